"""Cubic Bezier curves for PyTorch tensors, queried by x.

A piecewise cubic Bezier curve is parametric in t, so its y-value at a given
x is recovered by repeated midpoint subdivision of the segment that contains
x. All operations broadcast over batches of queries.

Points
------
Point
    Tensor-backed 2D point.
point
    Create a point; absent coordinates default to zero.
point_add, point_scale, point_midpoint
    Point algebra.

Cubic Bezier Segments
---------------------
cubic_bezier_basis
    Cubic Bernstein basis weights.
cubic_bezier_evaluate
    Evaluate a segment at parameter t.
cubic_bezier_split
    Split a segment at t = 0.5.
cubic_bezier_invert
    Recover y from x on a segment by subdivision.
cubic_bezier_is_monotonic
    Check that a segment's control points are ordered in x.

Curves
------
curve_lookup
    y-value of a piecewise curve at x.
curve_inverse_lookup
    x-coordinate at which a curve reaches a y-value.
curve_start, curve_end, curve_duration
    Curve bounds.
curve_point_at
    Curve point at a global segment parameter.
curve_sample
    Polyline of evaluated curve points.
curve_smooth
    Smooth curve through anchor points.
ease_segment
    Control points of an ease-in/ease-out segment.
bezier_curve
    Create a curve callable (validate + lookup).
BezierCurve
    Curve with its subdivision settings.

Exceptions and Warnings
-----------------------
BezierError
    Base exception.
CurveError
    Curve input cannot be interpreted.
CurveWarning
    Curve is usable but likely malformed.
"""

from ._bezier_error import BezierError
from ._cubic_bezier import (
    cubic_bezier_basis,
    cubic_bezier_evaluate,
    cubic_bezier_invert,
    cubic_bezier_is_monotonic,
    cubic_bezier_split,
)
from ._curve import (
    BezierCurve,
    bezier_curve,
    control_points,
    curve_duration,
    curve_end,
    curve_inverse_lookup,
    curve_lookup,
    curve_point_at,
    curve_sample,
    curve_smooth,
    curve_start,
    ease_segment,
)
from ._curve_error import CurveError
from ._curve_warning import CurveWarning
from ._point import Point, point, point_add, point_midpoint, point_scale
from ._tolerances import default_tolerances

__all__ = [
    "BezierCurve",
    "BezierError",
    "CurveError",
    "CurveWarning",
    "Point",
    "bezier_curve",
    "control_points",
    "cubic_bezier_basis",
    "cubic_bezier_evaluate",
    "cubic_bezier_invert",
    "cubic_bezier_is_monotonic",
    "cubic_bezier_split",
    "curve_duration",
    "curve_end",
    "curve_inverse_lookup",
    "curve_lookup",
    "curve_point_at",
    "curve_sample",
    "curve_smooth",
    "curve_start",
    "default_tolerances",
    "ease_segment",
    "point",
    "point_add",
    "point_midpoint",
    "point_scale",
]

__version__ = "0.1.0"
