class BezierError(Exception):
    """Base exception for Bezier curve operations."""

    pass
