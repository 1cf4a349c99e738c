"""
Rendering a block may splice extra blank rows into it, to make room for decorations (e.g. error messages). The rows of
the underlying text are called "logical" rows; the rows as rendered are "physical" rows.

A gap at (logical) row `k` is drawn _below_ row `k`. Hence it shifts rows `k + 1` and further, but not row `k` itself.

Rows 0..5 of a block with 2 extra rows below logical row 1:

    physical  logical
    0         0
    1         1
    2         -   (gap)
    3         -   (gap)
    4         2
    5         3
"""
from math import floor

from utils import pmts

from dsn.gaps.structure import Gaps


def logical_to_physical(row, gaps):
    """
    >>> logical_to_physical(0, Gaps({1: 2}))
    0
    >>> logical_to_physical(1, Gaps({1: 2}))
    1
    >>> logical_to_physical(2, Gaps({1: 2}))
    4
    >>> logical_to_physical(7, Gaps({1: 2, 3: 1, 9: 5}))
    10

    No gaps, no translation:
    >>> logical_to_physical(3, Gaps.empty())
    3
    """
    pmts(gaps, Gaps)

    physical_row = row
    for gap_row, size in gaps:
        if gap_row < row:
            physical_row += size

    return physical_row


def physical_to_logical(physical_row, gaps):
    """The inverse of logical_to_physical. A gap is only passed when the probe is strictly below (greater than) the
    gap's row; the same boundary rule as in logical_to_physical, which is what makes the round trip exact.

    >>> physical_to_logical(1, Gaps({1: 2}))
    1
    >>> physical_to_logical(4, Gaps({1: 2}))
    2

    Physical rows inside a gap are never produced by logical_to_physical; they land at or above the gap's row:
    >>> physical_to_logical(2, Gaps({1: 2}))
    0
    >>> physical_to_logical(3, Gaps({1: 2}))
    1
    >>> physical_to_logical(10, Gaps({1: 2, 3: 1, 9: 5}))
    7

    Never negative:
    >>> physical_to_logical(-3, Gaps({0: 2}))
    0
    """
    pmts(gaps, Gaps)

    offset = 0
    for gap_row, size in gaps:
        if physical_row > gap_row + offset:
            offset += size

    return max(physical_row - offset, 0)


def total_gap_size(gaps):
    """
    >>> total_gap_size(Gaps({1: 2, 5: 3}))
    5
    """
    return sum(size for _, size in gaps)


def gaps_for_decorations(decorations):
    """Decorations on the same row stack; their sizes are added.

    >>> from dsn.gaps.structure import Decoration
    >>> gaps_for_decorations([Decoration(3, 2), Decoration(0, 1), Decoration(3, 1)])
    Gaps(((0, 1), (3, 3)))
    >>> gaps_for_decorations([Decoration(2, 0)])
    Gaps(((2, 0),))
    """
    gaps = Gaps.empty()
    for decoration in decorations:
        gaps = gaps.with_gap(decoration.row, decoration.size)
    return gaps


def pixel_row_to_logical_row(pixel_y, gaps, cell_height):
    """`pixel_y` is relative to the top of the block.

    >>> pixel_row_to_logical_row(70, Gaps({1: 2}), 16)
    2
    >>> pixel_row_to_logical_row(20, Gaps({1: 2}), 16)
    1
    """
    return physical_to_logical(int(floor(pixel_y / cell_height)), gaps)
