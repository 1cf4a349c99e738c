from utils import pmts, pmts_or_none

from dsn.blocks.structure import Block
from dsn.viewports.structure import ViewportStructure


class FeatureFlags(object):
    def __init__(self, viewport_animations=True, viewport_dragging=True, block_dragging=True, demo_mode=False):
        self.viewport_animations = viewport_animations
        self.viewport_dragging = viewport_dragging
        self.block_dragging = block_dragging
        self.demo_mode = demo_mode

    def __repr__(self):
        return "FeatureFlags(%s)" % ", ".join(
            name for name in ['viewport_animations', 'viewport_dragging', 'block_dragging', 'demo_mode']
            if getattr(self, name))


class CanvasStructure(object):

    def __init__(self, blocks, selected_block, viewport, feature_flags, dragged_blocks=None, viewport_dragged=False,
                 next_identifier=None):
        """
        `blocks`: in drawing order, i.e. the last block is on top.
        `dragged_blocks`: the blocks that move along with the pointer in the current drag (empty if none).
        `viewport_dragged`: the viewport has been dragged since the last PointerDown.
        """
        pmts(blocks, list)
        pmts_or_none(selected_block, Block)
        pmts(viewport, ViewportStructure)
        pmts(feature_flags, FeatureFlags)

        self.blocks = blocks
        self.selected_block = selected_block
        self.viewport = viewport
        self.feature_flags = feature_flags
        self.dragged_blocks = dragged_blocks or []
        self.viewport_dragged = viewport_dragged

        if next_identifier is None:
            next_identifier = max([-1] + [b.identifier for b in blocks if isinstance(b.identifier, int)]) + 1
        self.next_identifier = next_identifier

    def __repr__(self):
        return "Canvas(%s blocks, selected: %s, %s)" % (len(self.blocks), self.selected_block, self.viewport)

    def replace(self, **kwargs):
        d = {
            'blocks': self.blocks,
            'selected_block': self.selected_block,
            'viewport': self.viewport,
            'feature_flags': self.feature_flags,
            'dragged_blocks': self.dragged_blocks,
            'viewport_dragged': self.viewport_dragged,
            'next_identifier': self.next_identifier,
        }
        d.update(kwargs)
        return CanvasStructure(**d)
