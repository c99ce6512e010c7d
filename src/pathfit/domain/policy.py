"""Fit policies and alignment anchors.

A fit policy is a closed union of four cases:

- AsIs: leave the outline untouched
- ScaleFit: uniform scale so the outline fits the reference rectangle,
  keeping its center where it was
- Align(anchor): rigid translation onto one of nine anchors
- ScaleAndAlign(anchor): ScaleFit followed by Align
"""

import re
from dataclasses import dataclass
from enum import Enum

from pathfit.exceptions import PolicyError


class Anchor(str, Enum):
    """Nine alignment positions: corners, edge midpoints and center.

    Leading is the minimum-X edge, trailing the maximum-X edge, top the
    minimum-Y edge and bottom the maximum-Y edge.
    """

    TOP = "top"
    TOP_LEADING = "top_leading"
    TOP_TRAILING = "top_trailing"
    BOTTOM = "bottom"
    BOTTOM_LEADING = "bottom_leading"
    BOTTOM_TRAILING = "bottom_trailing"
    LEADING = "leading"
    TRAILING = "trailing"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class AsIs:
    """Ignore the reference rectangle."""


@dataclass(frozen=True, slots=True)
class ScaleFit:
    """Resize to fit the reference rectangle, keeping the relative position."""


@dataclass(frozen=True, slots=True)
class Align:
    """Keep the size, align the bounding rectangle with the reference rectangle."""

    anchor: Anchor


@dataclass(frozen=True, slots=True)
class ScaleAndAlign:
    """ScaleFit, then Align."""

    anchor: Anchor


FitPolicy = AsIs | ScaleFit | Align | ScaleAndAlign

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

_ALIASES = {
    "as_it_is": "as_is",
    "asitis": "as_is",
    "scale": "scale_fit",
    "scale_align": "scale_and_align",
}


def _normalize(token: str) -> str:
    token = _CAMEL_BOUNDARY.sub("_", token.strip()).lower().replace("-", "_")
    return _ALIASES.get(token, token)


def parse_anchor(text: str) -> Anchor:
    """Parse an anchor name.

    Accepts snake_case, kebab-case and camelCase spellings
    (``top_leading``, ``top-leading``, ``topLeading``).

    Raises:
        PolicyError: If the name is not one of the nine anchors
    """
    try:
        return Anchor(_normalize(text))
    except ValueError:
        raise PolicyError(text, f"unknown anchor '{text}'") from None


def parse_policy(text: str) -> FitPolicy:
    """Parse a policy string such as ``scale_fit`` or ``align:center``.

    Args:
        text: ``as_is``, ``scale_fit``, ``align:<anchor>`` or
            ``scale_and_align:<anchor>``

    Returns:
        The matching policy value

    Raises:
        PolicyError: If the string is malformed
    """
    mode, _, anchor_text = text.partition(":")
    mode = _normalize(mode)

    if mode in ("as_is", "scale_fit"):
        if anchor_text:
            raise PolicyError(text, f"'{mode}' does not take an anchor")
        return AsIs() if mode == "as_is" else ScaleFit()

    if mode in ("align", "scale_and_align"):
        if not anchor_text:
            raise PolicyError(text, f"'{mode}' requires an anchor, e.g. '{mode}:center'")
        anchor = parse_anchor(anchor_text)
        return Align(anchor) if mode == "align" else ScaleAndAlign(anchor)

    raise PolicyError(text, f"unknown fit mode '{mode}'")


def format_policy(policy: FitPolicy) -> str:
    """Render a policy in the form accepted by ``parse_policy``."""
    if isinstance(policy, AsIs):
        return "as_is"
    if isinstance(policy, ScaleFit):
        return "scale_fit"
    if isinstance(policy, Align):
        return f"align:{policy.anchor.value}"
    if isinstance(policy, ScaleAndAlign):
        return f"scale_and_align:{policy.anchor.value}"
    raise TypeError(f"Not a fit policy: {policy!r}")
