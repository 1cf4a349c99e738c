from utils import pmts


class Decoration(object):
    """Something that is drawn below a given logical row of a block (an error message, a plotter, ...) and that needs
    `size` extra rows to do so."""

    def __init__(self, row, size, kind=None):
        pmts(row, int)
        pmts(size, int)
        assert size >= 0, "Decorations cannot take up a negative amount of rows"

        self.row = row
        self.size = size
        self.kind = kind

    def __repr__(self):
        return "Decoration(%s, %s, %s)" % (self.row, self.size, self.kind)


class Gaps(object):
    """An ordered mapping of logical row => number of extra (blank) rows rendered below that row.

    The translation algorithms depend on iterating in ascending row order; we therefore store the gaps as a sorted
    tuple of (row, size) pairs rather than as a dict.

    >>> Gaps({4: 1, 0: 2})
    Gaps(((0, 2), (4, 1)))
    >>> Gaps.empty().items
    ()
    """

    def __init__(self, rows_to_sizes=None):
        rows_to_sizes = rows_to_sizes or {}

        for row, size in rows_to_sizes.items():
            pmts(row, int)
            pmts(size, int)
            assert size >= 0, "Gap sizes must be non-negative"

        self.items = tuple(sorted(rows_to_sizes.items()))

    @classmethod
    def empty(cls):
        return cls()

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __eq__(self, other):
        return isinstance(other, Gaps) and self.items == other.items

    def __hash__(self):
        return hash(self.items)

    def __repr__(self):
        return "Gaps(%s)" % (self.items,)

    def with_gap(self, row, size):
        """Returns a new Gaps, in which `size` rows are added to any existing gap at `row`.

        >>> Gaps({1: 1}).with_gap(1, 2).with_gap(0, 1)
        Gaps(((0, 1), (1, 3)))
        """
        d = dict(self.items)
        d[row] = d.get(row, 0) + size
        return Gaps(d)
