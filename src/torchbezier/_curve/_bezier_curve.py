"""Piecewise cubic Bezier curve representation and convenience function."""

import warnings
from collections.abc import Sequence
from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._cubic_bezier import cubic_bezier_is_monotonic
from .._curve_error import CurveError
from .._curve_warning import CurveWarning
from .._point import Point
from .._tolerances import default_tolerances
from ._control_points import control_points as _control_points
from ._curve_lookup import curve_lookup


@tensorclass
class BezierCurve:
    """Piecewise cubic Bezier curve queried by x.

    Attributes
    ----------
    control_points : Point
        Control points, batch shape (n,). Consecutive groups of four form
        the segments.
    precision : float
        Absolute tolerance on x used when inverting a segment.
    max_depth : int
        Maximum subdivision depth used when inverting a segment.
    """

    control_points: Point
    precision: float
    max_depth: int

    @property
    def n_segments(self) -> int:
        """Return the number of complete segments."""
        return self.control_points.x.shape[0] // 4


def bezier_curve(
    control_points: Point | Tensor | Sequence,
    precision: float | None = None,
    max_depth: int | None = None,
) -> Callable[[Tensor], Tensor]:
    """Create a piecewise cubic Bezier curve from control points.

    This is a convenience function that creates a BezierCurve and returns
    a callable mapping x-coordinates to y-values.

    Parameters
    ----------
    control_points : Point, Tensor or sequence
        Control points, in any form accepted by ``curve_lookup``.
    precision : float, optional
        Absolute tolerance on x. Default: 1e-3.
    max_depth : int, optional
        Maximum subdivision depth. Default: 250.

    Returns
    -------
    curve : Callable[[Tensor], Tensor]
        Function that looks up the curve at given x-coordinates.

    Raises
    ------
    CurveError
        If ``precision`` is not positive or ``max_depth`` is negative.

    Warns
    -----
    CurveWarning
        If the number of control points is not a multiple of four, or if
        the control points of a segment are not ordered in x.

    Examples
    --------
    >>> import torch
    >>> control_points = torch.tensor(
    ...     [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]
    ... )
    >>> curve = bezier_curve(control_points)
    >>> curve(torch.tensor([-1.0, 4.0]))
    tensor([0., 3.])
    """
    defaults = default_tolerances()
    if precision is None:
        precision = defaults["precision"]
    if max_depth is None:
        max_depth = defaults["max_depth"]

    if precision <= 0:
        raise CurveError(f"precision must be positive, got {precision}")
    if max_depth < 0:
        raise CurveError(f"max_depth must be non-negative, got {max_depth}")

    points = _control_points(control_points)
    if points is None:
        points = Point(x=torch.zeros(0), y=torch.zeros(0), batch_size=[0])

    n_points = points.x.shape[0]
    if n_points % 4 != 0:
        warnings.warn(
            f"{n_points} control points do not form whole segments; "
            f"the trailing {n_points % 4} will not be interpolated.",
            CurveWarning,
            stacklevel=2,
        )

    n_segments = n_points // 4
    if n_segments > 0:
        xs = points.x[: 4 * n_segments].reshape(n_segments, 4)
        ys = points.y[: 4 * n_segments].reshape(n_segments, 4)
        segment_points = [
            Point(x=xs[:, k], y=ys[:, k], batch_size=[n_segments])
            for k in range(4)
        ]
        ordered = cubic_bezier_is_monotonic(*segment_points)
        if not torch.all(ordered):
            bad = torch.where(~ordered)[0].tolist()
            warnings.warn(
                f"Control points of segments {bad} are not ordered in x; "
                f"lookups on them may be inaccurate.",
                CurveWarning,
                stacklevel=2,
            )

    curve = BezierCurve(
        control_points=points,
        precision=precision,
        max_depth=max_depth,
        batch_size=[],
    )
    return lambda x: curve_lookup(
        x,
        curve.control_points,
        precision=curve.precision,
        max_depth=curve.max_depth,
    )
