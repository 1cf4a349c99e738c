import logging

from kivy.clock import Clock
from kivy.graphics import Color, Line, Rectangle
from kivy.uix.behaviors.focus import FocusBehavior
from kivy.uix.widget import Widget

from channel import Channel

from colorscheme import BLACK, CURIOUS_BLUE, CUTTY_SARK, GUARDSMAN_RED, OLD_LACE, WHITE

from dsn.blocks.utils import block_bounds
from dsn.canvas.clef import (
    ChangeCellSize,
    Navigate,
    PointerDown,
    PointerMove,
    PointerUp,
    PRIMARY_BUTTON,
    Resize,
)
from dsn.canvas.construct import play_canvas_note
from dsn.navigation.clef import DOWN, LEFT, RIGHT, UP

from widgets.animate import ViewportAnimation
from widgets.layout_constants import (
    CURSOR_WIDTH,
    FRAME_INTERVAL,
    OUTLINE_WIDTH,
    SELECTED_OUTLINE_WIDTH,
    get_cell_size,
    set_cell_size,
)

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    'left': LEFT,
    'right': RIGHT,
    'up': UP,
    'down': DOWN,
}

# kivy reports touches with a 'button' attribute for mice; other touches count as the primary button.
BUTTONS = {
    'left': PRIMARY_BUTTON,
    'right': 2,
    'middle': 4,
}


class CanvasWidget(FocusBehavior, Widget):
    """Shows the blocks of a CanvasStructure, and translates keyboard and pointer input into notes for it.

    Note on coordinates: kivy's y axis points up, the canvas' y axis points down. The conversion is done here, at the
    edge; everything in dsn uses the canvas' coordinates.
    """

    def __init__(self, **kwargs):
        self.ds = kwargs.pop('ds')

        super(CanvasWidget, self).__init__(**kwargs)

        self._invalidated = False
        self.alt_pressed = False

        # Broadcasts the selected block whenever it changes.
        self.selection_channel = Channel()

        self.animation = ViewportAnimation(self.ds.viewport.get_position())
        self.drawn_position = self.animation.present

        self.bind(pos=self.invalidate)
        self.bind(size=self.size_change)

        Clock.schedule_interval(self.tick, FRAME_INTERVAL)

    def play(self, note):
        previously_selected = self.ds.selected_block

        self.ds = play_canvas_note(note, self.ds)

        if self.ds.selected_block is not previously_selected:
            logger.debug("Selected %s", self.ds.selected_block)
            self.selection_channel.broadcast(self.ds.selected_block)

        self.invalidate()

    def size_change(self, *args):
        self.play(Resize(self.width, self.height))

    # ## Keyboard
    def keyboard_on_key_down(self, window, keycode, text, modifiers):
        FocusBehavior.keyboard_on_key_down(self, window, keycode, text, modifiers)

        code, textual_code = keycode

        if textual_code in ['alt', 'alt-gr']:
            self.alt_pressed = True
            return True

        if textual_code in ARROW_KEYS:
            self.play(Navigate(ARROW_KEYS[textual_code]))
            return True

        if modifiers == ['ctrl'] and text in ['+', '=', '-']:
            cell_width, cell_height = get_cell_size()
            factor = 2 if text in ['+', '='] else 0.5

            if cell_width * factor >= 1 and cell_height * factor >= 1:
                set_cell_size(int(cell_width * factor), int(cell_height * factor))
                self.play(ChangeCellSize(*get_cell_size()))
            return True

        return True

    def keyboard_on_key_up(self, window, keycode):
        """FocusBehavior automatically defocusses on 'escape'. This is undesirable, so we override without providing any
        behavior ourselves."""
        code, textual_code = keycode

        if textual_code in ['alt', 'alt-gr']:
            self.alt_pressed = False

        return True

    # ## Pointer
    def _viewport_relative(self, touch):
        return touch.x - self.x, self.top - touch.y

    def _buttons(self, touch):
        return BUTTONS.get(getattr(touch, 'button', 'left'), 0)

    def on_touch_down(self, touch):
        # see https://kivy.org/docs/guide/inputs.html#touch-event-basics
        ret = super(CanvasWidget, self).on_touch_down(touch)

        if not self.collide_point(*touch.pos):
            return ret

        # The mouse wheel comes in as touches too; without a grab, the matching touch-up is ignored as well.
        if touch.is_mouse_scrolling:
            return ret

        self.focus = True
        touch.grab(self)

        x, y = self._viewport_relative(touch)
        self.play(PointerDown(x, y, self._buttons(touch), alt=self.alt_pressed))
        return True

    def on_touch_move(self, touch):
        if touch.grab_current is not self:
            return super(CanvasWidget, self).on_touch_move(touch)

        x, y = self._viewport_relative(touch)
        self.play(PointerMove(x, y, touch.dx, -touch.dy, self._buttons(touch)))
        return True

    def on_touch_up(self, touch):
        if touch.grab_current is not self:
            return super(CanvasWidget, self).on_touch_up(touch)

        touch.ungrab(self)

        x, y = self._viewport_relative(touch)
        self.play(PointerUp(x, y))
        return True

    # ## Drawing
    def invalidate(self, *args):
        self._invalidated = True

    def tick(self, dt):
        position = self.animation.tick(self.ds.viewport, dt)

        if position != self.drawn_position or self._invalidated:
            self.drawn_position = position
            self.refresh()

    def _screen_rectangle(self, bounds):
        """(x, y, width, height) in kivy's coordinates for the given canvas bounds."""
        viewport_x, viewport_y = self.drawn_position
        return (
            self.x + bounds.left - viewport_x,
            self.top - (bounds.bottom - viewport_y),
            bounds.right - bounds.left,
            bounds.bottom - bounds.top,
        )

    def refresh(self, *args):
        """refresh means: redraw (I suppose we could rename, but I believe it's "canonical Kivy" to use 'refresh')"""
        self.canvas.clear()

        with self.canvas:
            Color(*OLD_LACE)
            Rectangle(pos=self.pos, size=self.size)

            for block in self.ds.blocks:
                self._draw_block(block, block is self.ds.selected_block)

        self._invalidated = False

    def _draw_block(self, block, is_selected):
        x, y, width, height = self._screen_rectangle(block_bounds(block))

        Color(*WHITE)
        Rectangle(pos=(x, y), size=(width, height))

        Color(*(CURIOUS_BLUE if is_selected else CUTTY_SARK))
        Line(rectangle=(x, y, width, height), width=SELECTED_OUTLINE_WIDTH if is_selected else OUTLINE_WIDTH)

        top = y + height
        cell_width, cell_height = self.ds.viewport.cell_width, self.ds.viewport.cell_height

        Color(*GUARDSMAN_RED)
        for error_message in block.error_messages:
            Rectangle(
                pos=(x, top - error_message.y - cell_height * len(error_message.lines)),
                size=(width, cell_height * len(error_message.lines)))

        if is_selected:
            Color(*BLACK)
            Rectangle(
                pos=(x + block.cursor.x, top - block.cursor.y - cell_height),
                size=(min(CURSOR_WIDTH, cell_width), cell_height))
