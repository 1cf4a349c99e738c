from dsn.viewports.utils import DEFAULT_ANIMATION_DURATION


class ViewportStructure(object):
    def __init__(self, x, y, width, height, cell_width, cell_height, animated=False,
                 animation_duration=DEFAULT_ANIMATION_DURATION):
        """(x, y) is the top-left of the viewport in canvas pixels; width & height are the size of the visible frame.

        `animated` expresses whether the move to the present position should be animated (it is set for programmatic
        moves only). `animation_duration` is in seconds.
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.animated = animated
        self.animation_duration = animation_duration

    def __repr__(self):
        return "Viewport((%s, %s), %sx%s, cell %sx%s%s)" % (
            self.x, self.y, self.width, self.height, self.cell_width, self.cell_height,
            ", animated" if self.animated else "")

    def get_position(self):
        return self.x, self.y

    def moved_to(self, x, y, animated=False):
        return ViewportStructure(
            x, y, self.width, self.height, self.cell_width, self.cell_height, animated, self.animation_duration)
