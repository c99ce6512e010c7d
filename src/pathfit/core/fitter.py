"""Fitting of outlines into a reference rectangle.

This module implements the four fit policies:

- AsIs: return the outline unchanged
- ScaleFit: uniform scale about the origin by the smaller of the two axis
  ratios, then translate the result back onto the original center
- Align(anchor): rigid translation matching one bounding-box point to the
  same point of the reference rectangle
- ScaleAndAlign(anchor): ScaleFit, then Align on the scaled outline

All functions are pure. Degenerate geometry is not rejected: a zero-width or
zero-height bounding box yields an infinite or NaN scale on that axis, which
propagates into the result exactly as IEEE-754 arithmetic dictates.
"""

import math

from pathfit.domain import (
    Align,
    Anchor,
    AsIs,
    FitPolicy,
    Outline,
    Rect,
    ScaleAndAlign,
    ScaleFit,
)


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division with IEEE-754 results for a zero denominator.

    x / 0 gives a signed infinity and 0 / 0 gives NaN instead of raising.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def scale_factors(bounds: Rect, reference_rect: Rect) -> tuple[float, float]:
    """Per-axis ratios between the reference rectangle and a bounding box.

    Args:
        bounds: Bounding rectangle of the outline
        reference_rect: Target rectangle

    Returns:
        Tuple (scale_x, scale_y); either may be infinite or NaN
    """
    scale_x = _divide(reference_rect.width, bounds.width)
    scale_y = _divide(reference_rect.height, bounds.height)
    return scale_x, scale_y


def alignment_offset(bounds: Rect, anchor: Anchor, reference_rect: Rect) -> tuple[float, float]:
    """Translation that moves ``bounds`` onto ``reference_rect`` at ``anchor``.

    Edge anchors constrain one axis only; the other offset is zero.

    Args:
        bounds: Bounding rectangle of the outline
        anchor: Alignment position
        reference_rect: Target rectangle

    Returns:
        Tuple (dx, dy)
    """
    if anchor is Anchor.BOTTOM:
        return 0.0, reference_rect.max_y - bounds.max_y
    if anchor is Anchor.BOTTOM_TRAILING:
        return reference_rect.max_x - bounds.max_x, reference_rect.max_y - bounds.max_y
    if anchor is Anchor.BOTTOM_LEADING:
        return reference_rect.min_x - bounds.min_x, reference_rect.max_y - bounds.max_y
    if anchor is Anchor.TOP:
        return 0.0, reference_rect.min_y - bounds.min_y
    if anchor is Anchor.TOP_TRAILING:
        return reference_rect.max_x - bounds.max_x, reference_rect.min_y - bounds.min_y
    if anchor is Anchor.TOP_LEADING:
        return reference_rect.min_x - bounds.min_x, reference_rect.min_y - bounds.min_y
    if anchor is Anchor.TRAILING:
        return reference_rect.max_x - bounds.max_x, 0.0
    if anchor is Anchor.LEADING:
        return reference_rect.min_x - bounds.min_x, 0.0
    if anchor is Anchor.CENTER:
        return reference_rect.mid_x - bounds.mid_x, reference_rect.mid_y - bounds.mid_y
    raise ValueError(f"Unknown anchor: {anchor!r}")


class PathFitter:
    """Applies a fit policy to an outline relative to a reference rectangle.

    Stateless; one instance can be shared freely across threads.

    Example:
        fitter = PathFitter()
        fitted = fitter.fit(outline, ScaleAndAlign(Anchor.CENTER), Rect(0, 0, 400, 300))
    """

    def fit(self, outline: Outline, policy: FitPolicy, reference_rect: Rect) -> Outline:
        """Fit an outline according to ``policy``.

        Args:
            outline: Stroked outline to place
            policy: Fit policy
            reference_rect: Target rectangle

        Returns:
            New outline; the input is never modified
        """
        if isinstance(policy, AsIs):
            return outline

        if isinstance(policy, ScaleFit):
            return self.resize(outline, reference_rect)

        if isinstance(policy, Align):
            return self.shift(outline, policy.anchor, reference_rect)

        if isinstance(policy, ScaleAndAlign):
            scaled = self.resize(outline, reference_rect)
            return self.shift(scaled, policy.anchor, reference_rect)

        raise TypeError(f"Not a fit policy: {policy!r}")

    def resize(self, outline: Outline, reference_rect: Rect) -> Outline:
        """Scale uniformly to fit the reference rectangle, keeping the center.

        Scaling happens about the origin, which moves the outline; the result
        is translated back so its center matches the original center. The
        position of ``reference_rect`` plays no part.

        Args:
            outline: Outline to resize
            reference_rect: Rectangle whose size is matched

        Returns:
            Resized outline
        """
        bounds = outline.bounding_rect()
        scale_x, scale_y = scale_factors(bounds, reference_rect)
        factor = min(scale_x, scale_y)

        # scale with respect to origin
        scaled = outline.scaled(factor)

        # shift the center back
        scaled_bounds = scaled.bounding_rect()
        return scaled.offset_by(
            bounds.mid_x - scaled_bounds.mid_x,
            bounds.mid_y - scaled_bounds.mid_y,
        )

    def shift(self, outline: Outline, anchor: Anchor, reference_rect: Rect) -> Outline:
        """Translate so the bounding box meets the reference rectangle at ``anchor``.

        Args:
            outline: Outline to move
            anchor: Alignment position
            reference_rect: Target rectangle

        Returns:
            Translated outline
        """
        dx, dy = alignment_offset(outline.bounding_rect(), anchor, reference_rect)
        return outline.offset_by(dx, dy)


def fit_outline(outline: Outline, policy: FitPolicy, reference_rect: Rect) -> Outline:
    """Fit an outline with a shared stateless ``PathFitter``."""
    return _FITTER.fit(outline, policy, reference_rect)


_FITTER = PathFitter()
