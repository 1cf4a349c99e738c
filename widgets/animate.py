from dsn.viewports.utils import interpolated_position


class ViewportAnimation(object):
    """Keeps track of the viewport position as drawn, which may lag behind the actual (ViewportStructure) position
    while an animation is in progress.

    A change of the actual position starts an animation from the position as presently drawn, but only if the
    ViewportStructure says the move is to be animated; otherwise the drawn position jumps to the actual position,
    cancelling any animation that was in progress.

    >>> from dsn.viewports.structure import ViewportStructure
    >>> animation = ViewportAnimation((-100, -200))
    >>> target = ViewportStructure(-300, -400, 800, 600, 8, 16, animated=True, animation_duration=1.0)
    >>> animation.tick(target, 0.0)
    (-100, -200)
    >>> animation.tick(target, 0.5)
    (-200, -300)
    >>> animation.tick(target, 0.5)
    (-300, -400)
    >>> animation.animating
    False

    Non-animated changes cancel any animation in flight:
    >>> animation.tick(target.moved_to(0, 0, animated=True), 0.0)
    (-300, -400)
    >>> animation.tick(target.moved_to(10, 10, animated=False), 0.1)
    (10, 10)
    >>> animation.animating
    False
    """

    def __init__(self, position):
        self.present = position
        self.previous_target = position

        self.animating = False
        self.start = position
        self.elapsed = 0
        self.duration = 0

    def tick(self, viewport_ds, dt):
        """Returns the position to draw at; `dt` is the time (in seconds) since the previous tick."""
        target = viewport_ds.get_position()

        if target != self.previous_target:
            self.previous_target = target

            if viewport_ds.animated and viewport_ds.animation_duration > 0:
                self.animating = True
                self.start = self.present
                self.elapsed = 0
                self.duration = viewport_ds.animation_duration
            else:
                self.animating = False

        elif self.animating:
            self.elapsed += dt

        if not self.animating:
            self.present = target
            return self.present

        progress = min(self.elapsed / self.duration, 1.0)

        if progress >= 1.0:
            self.animating = False
            self.present = target
        else:
            self.present = interpolated_position(self.start, target, progress)

        return self.present
