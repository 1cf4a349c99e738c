def rgba(r, g, b, a=255):
    """A Kivy color (4 values in the 0-1 range) from 0-255 values.

    >>> rgba(255, 0, 51)
    [1.0, 0.0, 0.2, 1.0]
    """
    return [x / 255. for x in (r, g, b, a)]


OLD_LACE = rgba(253, 246, 229)  # canvas background
WHITE = rgba(255, 255, 255)  # block background
CUTTY_SARK = rgba(88, 110, 117)  # block outline
CURIOUS_BLUE = rgba(38, 141, 210)  # selected block outline
GUARDSMAN_RED = rgba(211, 1, 2)  # error messages
BLACK = rgba(0, 0, 0)  # cursor
