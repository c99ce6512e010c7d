"""Shape built from a centerline path, a stroke style and a fit policy.

``StrokedShape.path_in(rect)`` strokes the path and fits the stroked outline
into ``rect``, so a caller holding a drawing region can ask for the outline
to fill or clip with on every layout pass.
"""

from dataclasses import dataclass, field

from pathfit.core.fitter import PathFitter
from pathfit.core.stroker import Stroker
from pathfit.domain import (
    Align,
    Anchor,
    AsIs,
    FitPolicy,
    LineCap,
    Outline,
    Point,
    Rect,
    ScaleAndAlign,
    ScaleFit,
    Segment,
    SegmentKind,
    StrokeStyle,
)

# Labelled policies offered by the demo picker, in display order
PICKER_PRESETS: dict[str, FitPolicy] = {
    "As it is": AsIs(),
    "Scale Fit": ScaleFit(),
    "Align Top": Align(Anchor.TOP),
    "Align Center": Align(Anchor.CENTER),
    "Scale + Align Top": ScaleAndAlign(Anchor.TOP),
    "Scale + Align Center": ScaleAndAlign(Anchor.CENTER),
}


def demo_path() -> Outline:
    """The demo centerline: an S-curve from (50, 150) to (350, 150)."""
    return Outline(
        (
            Segment(SegmentKind.MOVE, (Point(50, 150),)),
            Segment(
                SegmentKind.CUBIC,
                (Point(150, 250), Point(250, 50), Point(350, 150)),
            ),
        )
    )


def demo_style() -> StrokeStyle:
    """Stroke style used with ``demo_path``."""
    return StrokeStyle(line_width=24, line_cap=LineCap.ROUND)


@dataclass(frozen=True)
class StrokedShape:
    """A stroked path that fits itself into whatever rectangle it is given.

    Attributes:
        path: Centerline outline
        style: Stroke parameters
        policy: How to place the stroked outline in the reference rectangle
        stroker: Stroker used to expand the centerline
    """

    path: Outline
    style: StrokeStyle
    policy: FitPolicy = field(default_factory=AsIs)
    stroker: Stroker = field(default_factory=Stroker, compare=False, repr=False)

    def stroked(self) -> Outline:
        """The stroked outline before fitting."""
        return self.stroker.stroke(self.path, self.style)

    def path_in(self, rect: Rect) -> Outline:
        """Stroke the path and fit it into ``rect``.

        Args:
            rect: Reference rectangle

        Returns:
            Fitted filled outline
        """
        return PathFitter().fit(self.stroked(), self.policy, rect)

    def with_policy(self, policy: FitPolicy) -> "StrokedShape":
        """Copy of this shape with a different fit policy."""
        return StrokedShape(self.path, self.style, policy, self.stroker)
