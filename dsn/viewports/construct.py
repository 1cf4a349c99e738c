from dsn.blocks.utils import block_bounds, grid_to_pixel, pixel_to_grid

from dsn.viewports.clef import (
    CellSizeChange,
    CenterOnBlock,
    PanViewport,
    SnapViewport,
    ViewportContextChange,
)
from dsn.viewports.structure import ViewportStructure
from dsn.viewports.utils import centered_position, panned_position, snapped_position


def center_on(structure, block, animated=True):
    x, y = centered_position(block_bounds(block), structure.width, structure.height)
    return structure.moved_to(x, y, animated=animated)


def play_viewport_note(note, structure):
    """:: note, structure => structure"""

    if isinstance(note, ViewportContextChange):
        # The top-left of the viewport stays where it is; no animation needed for that.
        return ViewportStructure(
            structure.x,
            structure.y,
            note.width,
            note.height,
            structure.cell_width,
            structure.cell_height,
            animated=False,
            animation_duration=structure.animation_duration)

    elif isinstance(note, CellSizeChange):
        x = grid_to_pixel(pixel_to_grid(structure.x, structure.cell_width), note.cell_width)
        y = grid_to_pixel(pixel_to_grid(structure.y, structure.cell_height), note.cell_height)

        return ViewportStructure(
            x,
            y,
            structure.width,
            structure.height,
            note.cell_width,
            note.cell_height,
            animated=False,
            animation_duration=structure.animation_duration)

    elif isinstance(note, CenterOnBlock):
        return center_on(structure, note.block, note.animated and structure.animation_duration > 0)

    elif isinstance(note, PanViewport):
        # Manual input: never animated, 1:1 with the pointer
        x, y = panned_position(structure.x, structure.y, note.movement_x, note.movement_y)
        return structure.moved_to(x, y, animated=False)

    elif isinstance(note, SnapViewport):
        x, y = snapped_position(structure.x, structure.y, structure.cell_width, structure.cell_height)
        return structure.moved_to(x, y, animated=False)

    raise Exception("Illegal note (programming error): %s" % note)
