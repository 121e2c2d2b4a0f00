"""Cubic Bezier evaluation in Bernstein form."""

from __future__ import annotations

from .._point import Point, _as_tensor, _point_from_tensors, _result_dtype
from ._cubic_bezier_basis import cubic_bezier_basis


def cubic_bezier_evaluate(
    t,
    c1: Point,
    c2: Point,
    c3: Point,
    c4: Point,
) -> Point:
    """
    Evaluate a cubic Bezier segment at parameter values.

    Parameters
    ----------
    t : float or Tensor
        Curve parameter, shape (*query_shape). Not restricted to [0, 1].
    c1, c2, c3, c4 : Point
        Control points. Their batch shapes broadcast against ``t``.

    Returns
    -------
    p : Point
        Point on the curve, batch shape broadcast from ``t`` and the
        control points.

    Examples
    --------
    >>> from torchbezier import point
    >>> c = [point(0, 0), point(1, 2), point(2, 3), point(3, 0)]
    >>> p = cubic_bezier_evaluate(0.5, *c)
    >>> float(p.x), float(p.y)
    (1.5, 1.875)
    """
    controls = (c1, c2, c3, c4)
    t = _as_tensor(
        t, _result_dtype(*(c.x for c in controls), *(c.y for c in controls))
    )
    b1, b2, b3, b4 = cubic_bezier_basis(t).unbind(-1)

    x = c1.x * b1 + c2.x * b2 + c3.x * b3 + c4.x * b4
    y = c1.y * b1 + c2.y * b2 + c3.y * b3 + c4.y * b4

    return _point_from_tensors(x, y)
