from collections import namedtuple

from utils import pmts

from dsn.gaps.structure import Gaps


Bounds = namedtuple('Bounds', ('left', 'top', 'right', 'bottom'))


DEFAULT_MIN_GRID_WIDTH = 32


class Cursor(object):
    def __init__(self, row=0, col=0, x=0, y=0):
        """row & col are logical (i.e. into the block's lines); x & y are in pixels, relative to the top-left of the
        block that owns the cursor."""
        self.row = row
        self.col = col
        self.x = x
        self.y = y

    def __repr__(self):
        return "Cursor(%s, %s, %s, %s)" % (self.row, self.col, self.x, self.y)


class ErrorMessage(object):
    def __init__(self, line_number, message):
        self.line_number = line_number
        self.message = message

        # Filled in by update_geometry
        self.lines = []
        self.y = 0

    def __repr__(self):
        return "ErrorMessage(%s, %r)" % (self.line_number, self.message)


class Block(object):
    """A movable rectangle of text on the canvas.

    Blocks are mutable: dragging changes x & y in place, and the geometry (size, gaps, cursor position) is recomputed
    in place by `dsn.blocks.utils.update_geometry` whenever the lines, the decorations or the cell size change. Other
    parts of the editor hold on to blocks by reference (e.g. the selected block), which is why we don't construct new
    ones for each change.
    """

    def __init__(self, identifier, lines, grid_x=0, grid_y=0, block_id=None, group_name=None,
                 min_grid_width=DEFAULT_MIN_GRID_WIDTH):
        pmts(lines, list)

        self.identifier = identifier  # stable over the block's lifetime; the order of creation
        self.block_id = block_id  # as given by the block's source, if any
        self.group_name = group_name
        self.lines = lines
        self.min_grid_width = min_grid_width

        # The grid coordinates are the source of truth for the position; x & y are derived from them (and only deviate
        # while dragging).
        self.grid_x = grid_x
        self.grid_y = grid_y
        self.x = 0
        self.y = 0

        # transient visual adjustments, e.g. for animations
        self.offset_x = 0
        self.offset_y = 0

        self.width = 0
        self.height = 0
        self.line_number_column_width = 1

        self.cursor = Cursor()
        self.decorations = []
        self.error_messages = []
        self.gaps = Gaps.empty()

    def __repr__(self):
        return "Block(%s @ %s, %s)" % (self.identifier, self.grid_x, self.grid_y)
