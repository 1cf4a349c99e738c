class ViewportNote(object):
    pass


class ViewportContextChange(ViewportNote):
    def __init__(self, width, height):
        """The size of the widget in which the canvas is shown has changed."""
        self.width = width
        self.height = height


class CellSizeChange(ViewportNote):
    def __init__(self, cell_width, cell_height):
        """The size of the grid's cells has changed (e.g. because of a change of font); the viewport stays at the same
        grid position."""
        self.cell_width = cell_width
        self.cell_height = cell_height


class CenterOnBlock(ViewportNote):
    def __init__(self, block, animated=True):
        self.block = block
        self.animated = animated


class PanViewport(ViewportNote):
    def __init__(self, movement_x, movement_y):
        """Movement of the pointer, in pixels (y pointing down). The canvas follows the pointer, i.e. the viewport
        moves in the opposite direction."""
        self.movement_x = movement_x
        self.movement_y = movement_y


class SnapViewport(ViewportNote):
    pass
