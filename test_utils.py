"""
Utils for testing.
"""
from dsn.blocks.structure import Block
from dsn.canvas.construct import play_canvas_note


def block_at(x, y, width, height, cursor_y=0, identifier=None, offset_x=0, offset_y=0):
    """A block with its pixel geometry set directly (rather than derived from its lines and the grid), which is what we
    want when testing the geometric parts of the editor."""
    block = Block(identifier, [])
    block.x = x
    block.y = y
    block.width = width
    block.height = height
    block.offset_x = offset_x
    block.offset_y = offset_y
    block.cursor.y = cursor_y
    return block


class FakeClock(object):
    """Stands in for kivy's Clock; intervals are only run when `advance` is called explicitly."""

    def __init__(self):
        self.events = []

    def schedule_interval(self, callback, interval):
        event = FakeClockEvent(self, callback, interval)
        self.events.append(event)
        return event

    def advance(self, seconds):
        for event in self.events[:]:
            event.elapsed += seconds
            while event.elapsed >= event.interval and event in self.events:
                event.elapsed -= event.interval
                event.callback(event.interval)


class FakeClockEvent(object):
    def __init__(self, clock, callback, interval):
        self.clock = clock
        self.callback = callback
        self.interval = interval
        self.elapsed = 0

    def cancel(self):
        if self in self.clock.events:
            self.clock.events.remove(self)


class FakeCanvasWidget(object):
    """Stands in for a CanvasWidget, without any drawing."""

    def __init__(self, ds):
        self.ds = ds
        self.played = []

    def play(self, note):
        self.played.append(note)
        self.ds = play_canvas_note(note, self.ds)
