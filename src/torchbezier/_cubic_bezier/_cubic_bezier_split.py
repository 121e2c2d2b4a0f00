"""Cubic Bezier subdivision at the parameter midpoint."""

from __future__ import annotations

from .._point import Point, point_midpoint


def cubic_bezier_split(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
) -> tuple[
    tuple[Point, Point, Point, Point],
    tuple[Point, Point, Point, Point],
]:
    """
    Split a cubic Bezier segment at ``t = 0.5``.

    Uses De Casteljau's algorithm with midpoints at every level. The two
    halves together describe the same curve as the input segment.

    Parameters
    ----------
    p1, p2, p3, p4 : Point
        Control points of the segment.

    Returns
    -------
    left : tuple of Point
        Control points ``(p1, p12, p123, p1234)`` of the half covering
        the parameter range [0, 0.5].
    right : tuple of Point
        Control points ``(p1234, p234, p34, p4)`` of the half covering
        the parameter range [0.5, 1].

    Notes
    -----
    ``p1234`` is the point on the curve at ``t = 0.5``. It is shared by
    both halves.
    """
    p12 = point_midpoint(p1, p2)
    p23 = point_midpoint(p2, p3)
    p34 = point_midpoint(p3, p4)

    p123 = point_midpoint(p12, p23)
    p234 = point_midpoint(p23, p34)

    p1234 = point_midpoint(p123, p234)

    return (p1, p12, p123, p1234), (p1234, p234, p34, p4)
