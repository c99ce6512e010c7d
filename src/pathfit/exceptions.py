"""Exception hierarchy for pathfit.

The fitting core is total over finite and non-finite floats and never raises;
these exceptions belong to the layers around it (parsing, stroking, writing).
"""


class PathfitError(Exception):
    """Base exception for all pathfit errors."""

    pass


class PathParseError(PathfitError):
    """Malformed SVG path data."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Failed to parse path data '{path_data}': {reason}")


class PolicyError(PathfitError):
    """Unknown or malformed fit policy."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid fit policy '{text}': {reason}")


class StrokeError(PathfitError):
    """Error expanding a centerline into a stroked outline."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Stroke expansion failed: {reason}")


class SvgWriteError(PathfitError):
    """Error writing an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")
