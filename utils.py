from math import floor


def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__ if isinstance(type_, type) else type_,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def pmts_or_none(v, type_, extra_information=""):
    """Poor man's type system; value may be None"""
    if v is not None:
        pmts(v, type_, extra_information)


def round_half_up(value):
    """Rounds to the nearest int; halves are rounded towards positive infinity (unlike Python's own `round`, which
    rounds halves to the nearest even number).

    >>> round_half_up(2.5)
    3
    >>> round_half_up(-2.5)
    -2
    >>> round_half_up(11.74)
    12
    """
    return int(floor(value + 0.5))


def clamp(value, lowest, highest):
    """
    >>> clamp(5, 0, 3)
    3
    >>> clamp(-1, 0, 3)
    0
    """
    return max(lowest, min(highest, value))
