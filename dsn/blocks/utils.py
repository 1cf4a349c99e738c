"""
Tools to go from grid coordinates to pixels and back, and to derive the geometry of blocks.

The canvas' y axis points down (like the text in the blocks); (0, 0) is the top-left of the canvas. Positions on the
grid are expressed in cells; a cell is `cell_width` by `cell_height` pixels (i.e. the size of a single character).
"""
from textwrap import wrap

from utils import pmts, round_half_up

from dsn.blocks.structure import Block, Bounds, DEFAULT_MIN_GRID_WIDTH
from dsn.gaps.structure import Decoration
from dsn.gaps.utils import gaps_for_decorations, logical_to_physical, total_gap_size

ERROR_DECORATION = 'error'

# Space, in cells, around the numbered lines of a block
LINE_PADDING = 4


def grid_to_pixel(grid, cell_size):
    """
    >>> grid_to_pixel(10, 8)
    80
    >>> grid_to_pixel(-3, 16)
    -48
    """
    return grid * cell_size


def pixel_to_grid(pixel, cell_size):
    """
    >>> pixel_to_grid(85, 8)
    11
    >>> pixel_to_grid(165, 16)
    10

    Halfway between 2 cells we round up (also for negative positions):
    >>> pixel_to_grid(4, 8)
    1
    >>> pixel_to_grid(-4, 8)
    0
    """
    return round_half_up(pixel / cell_size)


def snap_to_grid(pixel, cell_size):
    """
    >>> snap_to_grid(94, 8)
    96
    >>> snap_to_grid(178, 16)
    176

    Already aligned positions are left alone:
    >>> snap_to_grid(-96, 8)
    -96
    """
    return pixel_to_grid(pixel, cell_size) * cell_size


def bounds_for(x, y, width, height, offset_x=0, offset_y=0):
    """
    >>> bounds_for(100, 100, 50, 20)
    Bounds(left=100, top=100, right=150, bottom=120)
    >>> bounds_for(100, 100, 50, 20, offset_x=-10, offset_y=5)
    Bounds(left=90, top=105, right=140, bottom=125)

    Degenerate sizes are not an error:
    >>> bounds_for(0, 0, 0, -10)
    Bounds(left=0, top=0, right=0, bottom=-10)
    """
    left = x + offset_x
    top = y + offset_y
    return Bounds(left, top, left + width, top + height)


def block_bounds(block):
    return bounds_for(block.x, block.y, block.width, block.height, block.offset_x, block.offset_y)


def bounds_center(bounds):
    """
    >>> bounds_center(Bounds(0, 0, 100, 50))
    (50.0, 25.0)
    """
    return (bounds.left + bounds.right) / 2, (bounds.top + bounds.bottom) / 2


def bounds_overlap(a, b):
    """Touching edges do not count as overlap.

    >>> bounds_overlap(Bounds(0, 0, 10, 10), Bounds(5, 5, 15, 15))
    True
    >>> bounds_overlap(Bounds(0, 0, 10, 10), Bounds(10, 0, 20, 10))
    False
    """
    return a.left < b.right and b.left < a.right and a.top < b.bottom and b.top < a.bottom


def bounds_contain_point(bounds, x, y):
    """
    >>> bounds_contain_point(Bounds(0, 0, 10, 10), 10, 0)
    True
    >>> bounds_contain_point(Bounds(0, 0, 10, 10), 11, 0)
    False
    """
    return bounds.left <= x <= bounds.right and bounds.top <= y <= bounds.bottom


def place_on_grid(block, cell_width, cell_height):
    """(Re)derives the block's pixel position from its grid position, e.g. after a change of the cell size."""
    block.x = grid_to_pixel(block.grid_x, cell_width)
    block.y = grid_to_pixel(block.grid_y, cell_height)


def snap_block(block, cell_width, cell_height):
    """Snaps each axis of the block's pixel position to the nearest grid line independently; the grid position
    follows."""
    block.grid_x = pixel_to_grid(block.x, cell_width)
    block.grid_y = pixel_to_grid(block.y, cell_height)
    place_on_grid(block, cell_width, cell_height)


def line_number_column_width(lines):
    """
    >>> line_number_column_width(['a'] * 9)
    1
    >>> line_number_column_width(['a'] * 10)
    2
    >>> line_number_column_width([])
    1
    """
    return len(str(len(lines)))


def numbered_lines(lines):
    """
    >>> numbered_lines(['module test'] + [''] * 9 + ['moduleEnd'])[-1]
    '10 moduleEnd'
    >>> numbered_lines(['module test'] + [''] * 9 + ['moduleEnd'])[0]
    '00 module test'
    """
    width = line_number_column_width(lines)
    return [str(i).rjust(width, '0') + ' ' + line for i, line in enumerate(lines)]


def code_block_grid_width(lines, min_grid_width=DEFAULT_MIN_GRID_WIDTH):
    """The width of a block in cells: its longest numbered line plus some padding, but no less than `min_grid_width`.

    >>> code_block_grid_width(['short', 'lines'], 50)
    50
    >>> code_block_grid_width(['module test', 'this is a much longer line of code', 'moduleEnd'], 32)
    40
    >>> code_block_grid_width(['line %d' % i for i in range(100)], 10)
    15
    >>> code_block_grid_width([])
    32
    """
    return max([min_grid_width] + [len(line) + LINE_PADDING for line in numbered_lines(lines)])


def wrap_text(text, width):
    """
    >>> wrap_text("Undeclared identifier: foo", 12)
    ['Undeclared', 'identifier:', 'foo']
    """
    return wrap(text, max(int(width), 1)) or ['']


def error_decorations(block, cell_width):
    """Each error message is drawn below its line as a header ("Error:") followed by the wrapped message."""
    decorations = []
    for error_message in block.error_messages:
        error_message.lines = ['Error:'] + wrap_text(error_message.message, block.width / cell_width - 1)
        decorations.append(Decoration(error_message.line_number, len(error_message.lines), ERROR_DECORATION))
    return decorations


def update_geometry(block, cell_width, cell_height):
    """Recomputes all derived geometry of a block: size, gaps, the cursor's pixel position and the positions of the
    block's error messages.

    This must be called after any change to the block's lines, decorations or cursor and before the block is queried
    (navigation, hit tests) again.
    """
    pmts(block, Block)

    block.line_number_column_width = line_number_column_width(block.lines)
    block.width = code_block_grid_width(block.lines, block.min_grid_width) * cell_width

    block.gaps = gaps_for_decorations(block.decorations + error_decorations(block, cell_width))
    block.height = (len(block.lines) + total_gap_size(block.gaps)) * cell_height

    block.cursor.x = (block.cursor.col + block.line_number_column_width + 2) * cell_width
    block.cursor.y = logical_to_physical(block.cursor.row, block.gaps) * cell_height

    for error_message in block.error_messages:
        error_message.y = (logical_to_physical(error_message.line_number, block.gaps) + 1) * cell_height


def find_block_at_point(blocks, x, y):
    """Returns the topmost block at (x, y) in canvas pixels. Blocks later in the list are drawn on top of earlier ones.
    """
    for block in reversed(blocks):
        if bounds_contain_point(block_bounds(block), x, y):
            return block
    return None


def _grid_bounds(block, grid_x, grid_y):
    # the footprint of `block` when placed at (grid_x, grid_y), in cells
    width = code_block_grid_width(block.lines, block.min_grid_width)
    height = len(block.lines) + total_gap_size(block.gaps)
    return bounds_for(grid_x, grid_y, width, height)


def _expanded(bounds, padding_x, padding_y):
    return Bounds(
        bounds.left - padding_x,
        bounds.top - padding_y,
        bounds.right + padding_x,
        bounds.bottom + padding_y)


def is_grid_spot_free(grid_x, grid_y, candidate, blocks, padding_x=2, padding_y=2):
    candidate_bounds = _grid_bounds(candidate, grid_x, grid_y)

    return not any(
        bounds_overlap(_expanded(_grid_bounds(block, block.grid_x, block.grid_y), padding_x, padding_y),
                       candidate_bounds)
        for block in blocks)


def find_free_spot_below_cluster(blocks, candidate, padding_x=2, padding_y=2):
    """Returns (grid_x, grid_y) for `candidate`: below all existing blocks, and such that it keeps some padding from
    them."""
    if not blocks:
        return 0, 0

    footprints = [_grid_bounds(block, block.grid_x, block.grid_y) for block in blocks]

    grid_x = min(f.left for f in footprints) + padding_x
    grid_y = max(f.bottom for f in footprints) + padding_y

    while not is_grid_spot_free(grid_x, grid_y, candidate, blocks, padding_x, padding_y):
        grid_y += padding_y + 1

    return grid_x, grid_y
