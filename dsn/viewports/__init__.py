"""
The dsn 'viewports' implements the tools for managing the viewport on the (infinite) canvas of blocks.

There are 2 sources of viewport movement: programmatic ones (centering the viewport on a block that the user navigated
to, jumped to, or that needs attention) and manual ones (the user dragging the canvas around). The main design
question is how the two interact. The answer is: the last input wins, and manual input always wins over an animation
that is still in progress. A programmatic move is marked as "animated" (if animations are enabled); a manual move is
never animated, which cancels any animation in flight.

The ViewportStructure only expresses where the viewport _is_ (i.e. where it will be when any animation has finished).
Animating towards that position is a concern of the widget that draws the canvas (see widgets/animate.py).
"""
