from ._bezier_curve import (
    BezierCurve,
    bezier_curve,
)
from ._control_points import control_points
from ._curve_bounds import curve_duration, curve_end, curve_start
from ._curve_inverse_lookup import curve_inverse_lookup
from ._curve_lookup import curve_lookup
from ._curve_sample import curve_point_at, curve_sample
from ._curve_smooth import curve_smooth
from ._ease_segment import ease_segment

__all__ = [
    "BezierCurve",
    "bezier_curve",
    "control_points",
    "curve_duration",
    "curve_end",
    "curve_inverse_lookup",
    "curve_lookup",
    "curve_point_at",
    "curve_sample",
    "curve_smooth",
    "curve_start",
    "ease_segment",
]
