import logging
from math import floor

from utils import clamp

from dsn.blocks.structure import Block, ErrorMessage
from dsn.blocks.utils import (
    block_bounds,
    find_block_at_point,
    find_free_spot_below_cluster,
    place_on_grid,
    snap_block,
    update_geometry,
)
from dsn.canvas.clef import (
    AddBlock,
    ChangeCellSize,
    JumpToBlock,
    Navigate,
    PlaceCursor,
    PointerDown,
    PointerMove,
    PointerUp,
    PRIMARY_BUTTON,
    Resize,
    SelectBlock,
    SetDecorations,
    SetErrorMessages,
)
from dsn.canvas.structure import CanvasStructure
from dsn.gaps.utils import pixel_row_to_logical_row
from dsn.navigation.utils import find_closest_block_in_direction
from dsn.viewports.clef import CellSizeChange, CenterOnBlock, PanViewport, SnapViewport, ViewportContextChange
from dsn.viewports.construct import play_viewport_note

logger = logging.getLogger(__name__)


def navigate(structure, direction):
    """Returns the block that navigating in `direction` leads to; this is the selected block itself if there is no
    block in that direction (or None if nothing is selected)."""
    if structure.selected_block is None:
        return None

    return find_closest_block_in_direction(structure.blocks, structure.selected_block, direction)


def find_block(blocks, identifier, block_id=None):
    """By identifier first; by block_id as a fallback."""
    for block in blocks:
        if block.identifier == identifier:
            return block

    if block_id is not None:
        for block in blocks:
            if block.block_id == block_id:
                return block

    return None


def cursor_for_position(block, relative_x, relative_y, cell_width, cell_height):
    """Returns the (row, col) for a click at (relative_x, relative_y) pixels from the block's top-left; clamped to the
    text of the block."""
    if not block.lines:
        return 0, 0

    row = clamp(pixel_row_to_logical_row(relative_y, block.gaps, cell_height), 0, len(block.lines) - 1)

    col = int(floor(relative_x / cell_width)) - (block.line_number_column_width + 2)
    col = clamp(col, 0, len(block.lines[row]))

    return row, col


def _select_and_center(structure, block, animated):
    viewport = play_viewport_note(CenterOnBlock(block, animated=animated), structure.viewport)
    return structure.replace(selected_block=block, viewport=viewport)


def _to_canvas(structure, x, y):
    return structure.viewport.x + x, structure.viewport.y + y


def play_canvas_note(note, structure):
    """:: note, structure => structure

    Blocks are updated in place (dragging, cursor placement, geometry); everything else results in a new structure.
    """
    viewport = structure.viewport
    flags = structure.feature_flags

    if isinstance(note, Navigate):
        target = navigate(structure, note.direction)

        if target is None or target is structure.selected_block:
            return structure

        # Navigation is always animated, even if animations are otherwise switched off; this makes it much easier to
        # follow where one ends up.
        return _select_and_center(structure, target, animated=True)

    elif isinstance(note, JumpToBlock):
        target = find_block(structure.blocks, note.identifier, note.block_id)

        if target is None:
            logger.info("Jump to block %s (%s): no such block", note.identifier, note.block_id)
            return structure

        return _select_and_center(structure, target, animated=True)

    elif isinstance(note, SelectBlock):
        if not note.center:
            return structure.replace(selected_block=note.block)
        return _select_and_center(structure, note.block, animated=flags.viewport_animations)

    elif isinstance(note, AddBlock):
        block = Block(structure.next_identifier, note.lines, block_id=note.block_id, group_name=note.group_name)
        update_geometry(block, viewport.cell_width, viewport.cell_height)

        block.grid_x, block.grid_y = find_free_spot_below_cluster(structure.blocks, block)
        place_on_grid(block, viewport.cell_width, viewport.cell_height)

        logger.debug("Added %s", block)

        structure = structure.replace(blocks=structure.blocks + [block], next_identifier=structure.next_identifier + 1)
        return _select_and_center(structure, block, animated=flags.viewport_animations)

    elif isinstance(note, PointerDown):
        if not note.buttons & PRIMARY_BUTTON:
            return structure

        canvas_x, canvas_y = _to_canvas(structure, note.x, note.y)
        block = find_block_at_point(structure.blocks, canvas_x, canvas_y)

        if block is None:
            return structure.replace(dragged_blocks=[], viewport_dragged=False)

        bounds = block_bounds(block)
        structure = play_canvas_note(
            PlaceCursor(block, canvas_x - bounds.left, canvas_y - bounds.top),
            structure.replace(selected_block=block))

        if not flags.block_dragging:
            return structure

        if note.alt and block.group_name is not None:
            dragged_blocks = [b for b in structure.blocks if b.group_name == block.group_name]
        else:
            dragged_blocks = [block]

        # the dragged block is brought to the front
        blocks = [b for b in structure.blocks if b is not block] + [block]

        return structure.replace(blocks=blocks, dragged_blocks=dragged_blocks, viewport_dragged=False)

    elif isinstance(note, PointerMove):
        if structure.dragged_blocks:
            for block in structure.dragged_blocks:
                block.x += note.movement_x
                block.y += note.movement_y
            return structure

        if note.buttons & PRIMARY_BUTTON and flags.viewport_dragging:
            return structure.replace(
                viewport=play_viewport_note(PanViewport(note.movement_x, note.movement_y), viewport),
                viewport_dragged=True)

        return structure

    elif isinstance(note, PointerUp):
        if structure.dragged_blocks:
            for block in structure.dragged_blocks:
                snap_block(block, viewport.cell_width, viewport.cell_height)
            logger.debug("Snapped %s to the grid", structure.dragged_blocks)

        if structure.viewport_dragged:
            viewport = play_viewport_note(SnapViewport(), viewport)

        return structure.replace(viewport=viewport, dragged_blocks=[], viewport_dragged=False)

    elif isinstance(note, PlaceCursor):
        block = note.block
        block.cursor.row, block.cursor.col = cursor_for_position(
            block, note.relative_x, note.relative_y, viewport.cell_width, viewport.cell_height)
        update_geometry(block, viewport.cell_width, viewport.cell_height)
        return structure

    elif isinstance(note, SetDecorations):
        note.block.decorations = list(note.decorations)
        update_geometry(note.block, viewport.cell_width, viewport.cell_height)
        return structure

    elif isinstance(note, SetErrorMessages):
        for block in structure.blocks:
            block.error_messages = [
                ErrorMessage(line_number, message)
                for (key, line_number, message) in note.error_messages
                if key == block.identifier or (block.block_id is not None and key == block.block_id)]
            update_geometry(block, viewport.cell_width, viewport.cell_height)
        return structure

    elif isinstance(note, Resize):
        return structure.replace(viewport=play_viewport_note(ViewportContextChange(note.width, note.height), viewport))

    elif isinstance(note, ChangeCellSize):
        for block in structure.blocks:
            place_on_grid(block, note.cell_width, note.cell_height)
            update_geometry(block, note.cell_width, note.cell_height)

        return structure.replace(
            viewport=play_viewport_note(CellSizeChange(note.cell_width, note.cell_height), viewport))

    raise Exception("Illegal note (programming error): %s" % note)


def initial_canvas(blocks, viewport, feature_flags):
    """Derives the geometry of `blocks` (positioned by their grid coordinates) and wraps everything in a
    CanvasStructure; nothing is selected."""
    for block in blocks:
        place_on_grid(block, viewport.cell_width, viewport.cell_height)
        update_geometry(block, viewport.cell_width, viewport.cell_height)

    return CanvasStructure(blocks, None, viewport, feature_flags)
