from ._bezier_error import BezierError


class CurveError(BezierError, ValueError):
    """Raised when a curve cannot be interpreted as a sequence of control points."""

    pass
