from __future__ import annotations

from collections.abc import Sequence

from torch import Tensor

from .._point import Point, _point_from_tensors, point
from ._control_points import control_points


def curve_start(curve: Point | Tensor | Sequence | None) -> Point:
    """Return the first control point, or the origin for an empty curve."""
    points = control_points(curve)
    if points is None:
        return point()
    return _point_from_tensors(points.x[0], points.y[0])


def curve_end(curve: Point | Tensor | Sequence | None) -> Point:
    """Return the last control point, or the origin for an empty curve."""
    points = control_points(curve)
    if points is None:
        return point()
    return _point_from_tensors(points.x[-1], points.y[-1])


def curve_duration(curve: Point | Tensor | Sequence | None) -> Tensor:
    """Return the x-extent ``end.x - start.x`` of the curve."""
    return curve_end(curve).x - curve_start(curve).x
