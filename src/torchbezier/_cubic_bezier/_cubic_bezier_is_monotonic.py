from torch import Tensor

from .._point import Point


def cubic_bezier_is_monotonic(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
) -> Tensor:
    """
    Check whether the control points of a segment are ordered in x.

    Ordered control points (``p1.x <= p2.x <= p3.x <= p4.x``) guarantee that
    x(t) is non-decreasing, which subdivision inversion relies on. The test
    is sufficient, not necessary.

    Returns
    -------
    Tensor
        Boolean mask over the broadcast batch shape of the control points.
    """
    return (p1.x <= p2.x) & (p2.x <= p3.x) & (p3.x <= p4.x)
