LEFT = 'left'
RIGHT = 'right'
UP = 'up'
DOWN = 'down'

DIRECTIONS = (LEFT, RIGHT, UP, DOWN)

HORIZONTAL = (LEFT, RIGHT)
VERTICAL = (UP, DOWN)


def check_direction(direction):
    if direction not in DIRECTIONS:
        raise Exception("Unknown direction (programming error): %s" % direction)
