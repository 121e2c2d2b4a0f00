"""Evaluation of a piecewise curve by segment parameter."""

from __future__ import annotations

from collections.abc import Sequence

import torch
from torch import Tensor

from .._cubic_bezier import cubic_bezier_evaluate
from .._curve_error import CurveError
from .._point import Point, _as_tensor, _point_from_tensors
from ._control_points import control_points


def _segments(points: Point | None) -> tuple[Tensor, Tensor]:
    n_segments = 0 if points is None else points.x.shape[0] // 4
    if n_segments == 0:
        raise CurveError("The curve has no complete segment")
    xs = points.x[: 4 * n_segments].reshape(n_segments, 4)
    ys = points.y[: 4 * n_segments].reshape(n_segments, 4)
    return xs, ys


def curve_point_at(
    time,
    curve: Point | Tensor | Sequence | None,
) -> Point:
    """
    Evaluate a curve at a global segment parameter.

    The integer part of ``time`` selects the segment and the fractional
    part is the parameter within it, so segment ``k`` covers
    ``[k, k + 1]``.

    Parameters
    ----------
    time : float or Tensor
        Global parameter, shape (*query_shape).
    curve : Point, Tensor, sequence or None
        Control points, in any form accepted by ``curve_lookup``.

    Returns
    -------
    p : Point
        Curve points, batch shape (*query_shape).

    Raises
    ------
    CurveError
        If the curve has no complete segment.

    Notes
    -----
    The segment index is clamped to the complete segments, so a time
    before 0 or past the number of segments extrapolates the first or the
    last segment. The time equal to the number of segments is the end of
    the last segment.

    Examples
    --------
    >>> from torchbezier import point
    >>> curve = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
    >>> float(curve_point_at(0.5, curve).x)
    1.5
    """
    points = control_points(curve)
    xs, ys = _segments(points)

    time = _as_tensor(time, xs.dtype)
    index = torch.nan_to_num(torch.floor(time), nan=0.0)
    index = index.clamp(0, xs.shape[0] - 1).long()
    t = time - index.to(time.dtype)

    corners = [_point_from_tensors(xs[index, k], ys[index, k]) for k in range(4)]
    return cubic_bezier_evaluate(t, *corners)


def curve_sample(
    curve: Point | Tensor | Sequence | None,
    points_per_segment: int = 20,
    *,
    endpoint: bool = True,
) -> Point:
    """
    Sample a curve into a polyline.

    Every complete segment is evaluated at the ``points_per_segment``
    parameters ``0, 1/m, ..., (m - 1)/m`` where ``m = points_per_segment``.

    Parameters
    ----------
    curve : Point, Tensor, sequence or None
        Control points, in any form accepted by ``curve_lookup``.
    points_per_segment : int, default=20
        Number of samples taken from each segment.
    endpoint : bool, default=True
        Append the end point of the last complete segment.

    Returns
    -------
    vertices : Point
        Sampled points in curve order, batch shape
        ``(n_segments * points_per_segment + endpoint,)``. A curve with no
        complete segment gives an empty batch.

    Raises
    ------
    CurveError
        If ``points_per_segment`` is less than one.

    Examples
    --------
    >>> from torchbezier import point
    >>> curve = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
    >>> curve_sample(curve, 2).x
    tensor([0.0000, 1.5000, 3.0000])
    """
    if points_per_segment < 1:
        raise CurveError(
            f"points_per_segment must be at least 1, got {points_per_segment}"
        )

    points = control_points(curve)
    if points is None or points.x.shape[0] < 4:
        dtype = torch.get_default_dtype() if points is None else points.x.dtype
        empty = torch.zeros(0, dtype=dtype)
        return _point_from_tensors(empty, empty)

    xs, ys = _segments(points)

    # (n_segments, 1) corners against (points_per_segment,) parameters
    corners = [
        _point_from_tensors(xs[:, k : k + 1], ys[:, k : k + 1]) for k in range(4)
    ]
    t = (
        torch.arange(points_per_segment, dtype=xs.dtype, device=xs.device)
        / points_per_segment
    )
    sampled = cubic_bezier_evaluate(t, *corners)

    x = sampled.x.reshape(-1)
    y = sampled.y.reshape(-1)
    if endpoint:
        x = torch.cat([x, xs[-1, 3:]])
        y = torch.cat([y, ys[-1, 3:]])

    return _point_from_tensors(x, y)
