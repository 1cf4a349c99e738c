import logging
import os
from sys import argv

# --demo and --debug are ours; kivy should not try to interpret the command line.
os.environ.setdefault('KIVY_NO_ARGS', '1')

from kivy.app import App
from kivy.clock import Clock
from kivy.config import Config

from logging_config import setup_logging

from dsn.blocks.structure import Block
from dsn.canvas.clef import SelectBlock, SetErrorMessages
from dsn.canvas.construct import initial_canvas
from dsn.canvas.structure import FeatureFlags
from dsn.viewports.structure import ViewportStructure

from widgets.canvas import CanvasWidget
from widgets.demo_mode import DemoMode
from widgets.layout_constants import ANIMATION_DURATION, get_cell_size

Config.set('kivy', 'exit_on_escape', '0')

logger = logging.getLogger(__name__)


def example_blocks():
    return [
        Block(0, ['module counter', 'int count', 'push &count', 'push count', 'push 1', 'add', 'store', 'moduleEnd'],
              grid_x=0, grid_y=0, block_id='counter'),
        Block(1, ['module output', 'float out', 'push &out', 'push counter.count', 'castToFloat', 'store',
                  'moduleEnd'], grid_x=40, grid_y=2, block_id='output'),
        Block(2, ['module lfo', 'float rate 0.5', 'moduleEnd'], grid_x=2, grid_y=14, block_id='lfo',
              group_name='modulation'),
        Block(3, ['module depth', 'float amount 0.1', 'moduleEnd'], grid_x=40, grid_y=16, block_id='depth',
              group_name='modulation'),
    ]


class EditorGUI(App):

    def __init__(self, demo_mode=False):
        super(EditorGUI, self).__init__()
        self.feature_flags = FeatureFlags(demo_mode=demo_mode)

    def build(self):
        cell_width, cell_height = get_cell_size()
        viewport = ViewportStructure(0, 0, 0, 0, cell_width, cell_height, animation_duration=ANIMATION_DURATION)

        self.canvas_widget = CanvasWidget(ds=initial_canvas(example_blocks(), viewport, self.feature_flags))
        self.canvas_widget.selection_channel.connect(self.selection_changed)

        self.canvas_widget.play(SetErrorMessages([('output', 3, "Undeclared identifier: counter.count")]))

        self.demo_mode = DemoMode(self.canvas_widget)

        # Selecting (and centering on) a block must wait until the widget has its actual size.
        Clock.schedule_once(self.start_navigation)

        self.canvas_widget.focus = True
        return self.canvas_widget

    def start_navigation(self, dt):
        if self.feature_flags.demo_mode:
            self.demo_mode.start()
        else:
            self.canvas_widget.play(SelectBlock(self.canvas_widget.ds.blocks[0]))

    def selection_changed(self, block):
        self.title = "blockspace: %s" % (block.block_id or block.identifier)

    def on_stop(self):
        self.demo_mode.stop()


def main():
    setup_logging(logging.DEBUG if '--debug' in argv else logging.INFO)
    EditorGUI(demo_mode='--demo' in argv).run()


if __name__ == "__main__":
    main()
