"""Axis-aligned rectangle value type.

Used both for the bounding rectangle derived from an outline and for the
reference rectangle a caller fits an outline into.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by origin and size.

    Attributes:
        x: Minimum X coordinate
        y: Minimum Y coordinate
        width: Extent along X
        height: Extent along Y
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        """Build a rectangle from (min_x, min_y, max_x, max_y) bounds."""
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @classmethod
    def zero(cls) -> "Rect":
        """The empty rectangle at the origin."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.mid_x, self.mid_y)

    def is_finite(self) -> bool:
        """Check that no coordinate is infinite or NaN."""
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    def to_bounds(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
