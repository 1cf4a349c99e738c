"""
All positions are in canvas pixels, with the y axis pointing down. A viewport position is the position of the viewport's
top-left corner on the canvas.

## Centering

Horizontally, a block is centered in the viewport, unconditionally.

Vertically, a block is centered too, unless that would put the block's top edge above the top of the viewport (which
is the case for blocks that are taller than the viewport). In that case the top of the block is shown at the top of the
viewport instead: blocks grow downwards, and their most important part is at the top.

    +---------------------+
    |Viewport             |
    |    +----------+     |
    |    |Block     |     |
    |    |          |     |
    +----|----------|-----+
         |          |
         +----------+
"""
from utils import round_half_up

from dsn.blocks.utils import bounds_center, snap_to_grid

DEFAULT_ANIMATION_DURATION = 0.3


def centered_position(bounds, viewport_width, viewport_height):
    """
    A small block, centered both ways:
    >>> from dsn.blocks.structure import Bounds
    >>> centered_position(Bounds(100, 200, 200, 300), 800, 600)
    (-250.0, -50.0)

    A block that is taller than the viewport is shown from its top:
    >>> centered_position(Bounds(100, 100, 200, 900), 800, 600)
    (-250.0, 100)

    A block that is wider than the viewport is still centered:
    >>> centered_position(Bounds(0, 0, 1000, 100), 800, 600)
    (100.0, -250.0)
    """
    center_x, center_y = bounds_center(bounds)

    ideal_x = center_x - viewport_width / 2
    ideal_y = center_y - viewport_height / 2

    return ideal_x, min(bounds.top, ideal_y)


def panned_position(x, y, movement_x, movement_y):
    """The canvas follows the pointer; i.e. if the pointer moves right, the viewport moves left over the canvas.

    >>> panned_position(100, 100, 10, -5)
    (90, 105)
    """
    return x - movement_x, y - movement_y


def snapped_position(x, y, cell_width, cell_height):
    """
    >>> snapped_position(13, -9, 8, 16)
    (16, -16)
    >>> snapped_position(16, -16, 8, 16)
    (16, -16)
    """
    return snap_to_grid(x, cell_width), snap_to_grid(y, cell_height)


def ease_in_out_cubic(t):
    """Accelerates at the start, decelerates at the end.

    >>> ease_in_out_cubic(0), ease_in_out_cubic(0.5), ease_in_out_cubic(1)
    (0, 0.5, 1.0)
    """
    if t < 0.5:
        return 4 * t * t * t
    return 1 - pow(-2 * t + 2, 3) / 2


def interpolated_position(start, target, progress):
    """Positions along the way from `start` to `target`, rounded to whole pixels (to draw at pixel boundaries).

    >>> interpolated_position((0, 0), (100, -200), 0.5)
    (50, -100)
    >>> interpolated_position((-100, -200), (-300, -400), 0)
    (-100, -200)
    """
    eased = ease_in_out_cubic(progress)
    return (
        round_half_up(start[0] + (target[0] - start[0]) * eased),
        round_half_up(start[1] + (target[1] - start[1]) * eased),
    )
