# The size of a single cell of the grid (i.e. of a single character), in pixels
CELL_WIDTH = 8
CELL_HEIGHT = 16

OUTLINE_WIDTH = 1
SELECTED_OUTLINE_WIDTH = 2
CURSOR_WIDTH = 2

# seconds
ANIMATION_DURATION = 0.3
DEMO_MODE_INTERVAL = 2
FRAME_INTERVAL = 1 / 60


cell_size = (CELL_WIDTH, CELL_HEIGHT)


def get_cell_size():
    return cell_size


def set_cell_size(cell_width, cell_height):
    global cell_size
    cell_size = (cell_width, cell_height)
