"""Stroke style describing how a centerline is expanded into an outline."""

from dataclasses import dataclass
from enum import Enum


class LineCap(str, Enum):
    """End cap applied to open contours."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(str, Enum):
    """Corner treatment between consecutive segments."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """Stroke parameters.

    Attributes:
        line_width: Full stroke width
        line_cap: Cap style for open contour ends
        line_join: Join style for corners
        miter_limit: Ratio beyond which miter joins are beveled
    """

    line_width: float = 1.0
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER
    miter_limit: float = 10.0
