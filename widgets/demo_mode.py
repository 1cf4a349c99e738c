"""
Demo mode: wander around the canvas by itself, for presentations. A random block is selected to start with (if none
is selected yet), after which we navigate in a random direction every few seconds.
"""
import logging
import random

from kivy.clock import Clock

from dsn.canvas.clef import Navigate, SelectBlock
from dsn.navigation.clef import DIRECTIONS

from widgets.layout_constants import DEMO_MODE_INTERVAL

logger = logging.getLogger(__name__)


class DemoMode(object):
    def __init__(self, widget, interval=DEMO_MODE_INTERVAL, rng=None, clock=Clock):
        """`widget` is anything with a CanvasStructure as `ds` and a `play(note)` method (i.e. a CanvasWidget)"""
        self.widget = widget
        self.interval = interval
        self.rng = rng or random.Random()
        self.clock = clock
        self.event = None

    def start(self):
        self.stop()

        blocks = self.widget.ds.blocks
        if self.widget.ds.selected_block is None and blocks:
            self.widget.play(SelectBlock(self.rng.choice(blocks)))

        logger.info("Demo mode started; navigating every %s seconds", self.interval)
        self.event = self.clock.schedule_interval(self.tick, self.interval)

    def stop(self):
        if self.event is not None:
            self.event.cancel()
            self.event = None
            logger.info("Demo mode stopped")

    def tick(self, dt):
        if not self.widget.ds.blocks:
            return

        direction = self.rng.choice(DIRECTIONS)
        logger.debug("Demo mode: navigating %s", direction)
        self.widget.play(Navigate(direction))
