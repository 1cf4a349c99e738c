"""
Finding the block to move to when the user navigates in a direction (e.g. using the arrow keys).

Only blocks that are entirely on the requested side of the selected block are considered: for DOWN, the top edge of a
candidate must be at or below the bottom edge of the selected block (and analogously for the other directions). A
block that only partially overlaps on the axis of movement is never a candidate, even if it sticks out further.

Among those candidates:

* Moving UP or DOWN, the edge-to-edge distance is added to the (weighted) horizontal misalignment of the centers of the
  blocks. With the default weight of 2, an aligned block is preferred over a closer one that is off to the side.

* Moving LEFT or RIGHT, we follow the cursor rather than the block: only blocks that span the (absolute) height of the
  cursor qualify, and of those the nearest one wins.

Ties are won by the block that comes first in the list of blocks.
"""
import logging

from dsn.blocks.utils import block_bounds, bounds_center
from dsn.navigation.clef import (
    check_direction,
    DOWN,
    HORIZONTAL,
    LEFT,
    RIGHT,
    UP,
)

logger = logging.getLogger(__name__)

# How much a unit of misalignment (perpendicular to the movement) counts, compared to a unit of distance.
ALIGNMENT_WEIGHT = 2.0

# In these directions, a candidate must span the height of the cursor to qualify.
CURSOR_GATED_DIRECTIONS = HORIZONTAL

EXCLUDED = float('inf')


def is_in_direction(selected_bounds, candidate_bounds, direction):
    """
    >>> from dsn.blocks.structure import Bounds
    >>> is_in_direction(Bounds(0, 0, 100, 100), Bounds(0, 100, 100, 200), DOWN)
    True

    Partial overlap along the axis of movement disqualifies:
    >>> is_in_direction(Bounds(0, 0, 100, 100), Bounds(0, 99, 100, 300), DOWN)
    False
    >>> is_in_direction(Bounds(0, 0, 100, 100), Bounds(-50, 0, 0, 100), LEFT)
    True
    """
    check_direction(direction)

    if direction == DOWN:
        return candidate_bounds.top >= selected_bounds.bottom
    if direction == UP:
        return candidate_bounds.bottom <= selected_bounds.top
    if direction == RIGHT:
        return candidate_bounds.left >= selected_bounds.right
    return candidate_bounds.right <= selected_bounds.left  # LEFT


def primary_distance(selected_bounds, candidate_bounds, direction):
    """The edge-to-edge distance along the axis of movement; never negative.

    >>> from dsn.blocks.structure import Bounds
    >>> primary_distance(Bounds(0, 0, 100, 100), Bounds(80, 150, 180, 250), DOWN)
    50
    >>> primary_distance(Bounds(0, 0, 100, 100), Bounds(0, -300, 100, -20), UP)
    20
    >>> primary_distance(Bounds(0, 0, 100, 100), Bounds(50, 0, 150, 100), RIGHT)
    0
    """
    check_direction(direction)

    if direction == DOWN:
        distance = candidate_bounds.top - selected_bounds.bottom
    elif direction == UP:
        distance = selected_bounds.top - candidate_bounds.bottom
    elif direction == RIGHT:
        distance = candidate_bounds.left - selected_bounds.right
    else:  # LEFT
        distance = selected_bounds.left - candidate_bounds.right

    return max(0, distance)


def secondary_distance(selected_bounds, candidate_bounds):
    """The horizontal misalignment of the centers of 2 blocks.

    >>> from dsn.blocks.structure import Bounds
    >>> secondary_distance(Bounds(0, 0, 100, 100), Bounds(80, 150, 180, 250))
    80.0
    """
    selected_center_x, _ = bounds_center(selected_bounds)
    candidate_center_x, _ = bounds_center(candidate_bounds)
    return abs(candidate_center_x - selected_center_x)


def spans_height(candidate_bounds, y):
    """
    >>> from dsn.blocks.structure import Bounds
    >>> spans_height(Bounds(0, 10, 100, 20), 20)
    True
    >>> spans_height(Bounds(0, 10, 100, 20), 21)
    False
    """
    return candidate_bounds.top <= y <= candidate_bounds.bottom


def score(selected_block, selected_bounds, candidate_bounds, direction, alignment_weight=ALIGNMENT_WEIGHT):
    """Lower is better; EXCLUDED means: the candidate does not qualify."""
    if direction in CURSOR_GATED_DIRECTIONS:
        absolute_cursor_y = selected_bounds.top + selected_block.cursor.y

        if not spans_height(candidate_bounds, absolute_cursor_y):
            return EXCLUDED

        return primary_distance(selected_bounds, candidate_bounds, direction)

    return (primary_distance(selected_bounds, candidate_bounds, direction) +
            alignment_weight * secondary_distance(selected_bounds, candidate_bounds))


def find_closest_block_in_direction(blocks, selected_block, direction, alignment_weight=ALIGNMENT_WEIGHT):
    """Returns the block to move to; if there is no such block, `selected_block` itself is returned (never None), such
    that callers can detect "no movement" using `is`."""
    check_direction(direction)

    selected_bounds = block_bounds(selected_block)

    closest_block = selected_block
    lowest_score = EXCLUDED

    for block in blocks:
        if block is selected_block:
            continue

        candidate_bounds = block_bounds(block)

        if not is_in_direction(selected_bounds, candidate_bounds, direction):
            continue

        candidate_score = score(selected_block, selected_bounds, candidate_bounds, direction, alignment_weight)

        # strictly lower: on ties the first block encountered stays
        if candidate_score < lowest_score:
            lowest_score = candidate_score
            closest_block = block

    if closest_block is selected_block:
        logger.debug("No block %s of %s", direction, selected_block)
    else:
        logger.debug("Closest block %s of %s: %s (score %s)", direction, selected_block, closest_block, lowest_score)

    return closest_block
