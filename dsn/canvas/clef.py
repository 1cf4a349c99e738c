PRIMARY_BUTTON = 1  # as a bit in the `buttons` mask of pointer events


class CanvasNote(object):
    pass


class Navigate(CanvasNote):
    def __init__(self, direction):
        self.direction = direction


class JumpToBlock(CanvasNote):
    def __init__(self, identifier, block_id=None):
        """`identifier` is the (stable) creation identifier; `block_id` is used as a fallback if no block has that
        identifier (anymore)."""
        self.identifier = identifier
        self.block_id = block_id


class SelectBlock(CanvasNote):
    def __init__(self, block, center=True):
        self.block = block
        self.center = center


class AddBlock(CanvasNote):
    def __init__(self, lines, block_id=None, group_name=None):
        self.lines = lines
        self.block_id = block_id
        self.group_name = group_name


class PointerDown(CanvasNote):
    def __init__(self, x, y, buttons=PRIMARY_BUTTON, alt=False):
        """x & y relative to the top-left of the viewport"""
        self.x = x
        self.y = y
        self.buttons = buttons
        self.alt = alt


class PointerMove(CanvasNote):
    def __init__(self, x, y, movement_x, movement_y, buttons=0):
        self.x = x
        self.y = y
        self.movement_x = movement_x
        self.movement_y = movement_y
        self.buttons = buttons


class PointerUp(CanvasNote):
    def __init__(self, x, y):
        self.x = x
        self.y = y


class PlaceCursor(CanvasNote):
    def __init__(self, block, relative_x, relative_y):
        """relative_x & relative_y: pixels relative to the top-left of the block"""
        self.block = block
        self.relative_x = relative_x
        self.relative_y = relative_y


class SetDecorations(CanvasNote):
    def __init__(self, block, decorations):
        self.block = block
        self.decorations = decorations


class SetErrorMessages(CanvasNote):
    def __init__(self, error_messages):
        """error_messages: a list of (identifier or block_id, line_number, message)"""
        self.error_messages = error_messages


class Resize(CanvasNote):
    def __init__(self, width, height):
        self.width = width
        self.height = height


class ChangeCellSize(CanvasNote):
    def __init__(self, cell_width, cell_height):
        self.cell_width = cell_width
        self.cell_height = cell_height
