"""Inverse lookup of x by y on a piecewise cubic Bezier curve."""

from __future__ import annotations

from collections.abc import Sequence

import torch
from torch import Tensor

from .._curve_error import CurveError
from .._point import Point, _as_tensor
from .._tolerances import default_tolerances
from ._control_points import control_points
from ._curve_lookup import curve_lookup


def curve_inverse_lookup(
    y,
    curve: Point | Tensor | Sequence | None,
    *,
    precision: float | None = None,
    max_depth: int | None = None,
) -> Tensor:
    """
    Find the x-coordinate at which a curve reaches a given y-value.

    Bisects x over the span of the curve, evaluating ``curve_lookup`` at
    the midpoint of the bracket. The curve is assumed to be non-decreasing
    in y.

    Parameters
    ----------
    y : float or Tensor
        Target values, shape (*query_shape).
    curve : Point, Tensor, sequence or None
        Control points, in any form accepted by ``control_points``.
    precision : float, optional
        Bracket width at which bisection stops, also used as the x
        tolerance of the underlying lookups. Default: 1e-3.
    max_depth : int, optional
        Maximum number of bisection steps, also used as the subdivision
        depth of the underlying lookups. Default: 250.

    Returns
    -------
    x : Tensor
        x-coordinates, shape (*query_shape). Values below the curve's start
        converge to its first x and values above its end to its last x.

    Raises
    ------
    CurveError
        If the curve has fewer than two control points.
    """
    defaults = default_tolerances()
    if precision is None:
        precision = defaults["precision"]
    if max_depth is None:
        max_depth = defaults["max_depth"]

    points = control_points(curve)
    if points is None or points.x.shape[0] < 2:
        raise CurveError("Inverse lookup requires at least two control points")

    y = _as_tensor(y, points.x.dtype)
    dtype = torch.promote_types(y.dtype, points.x.dtype)
    query_shape = y.shape
    y_flat = y.to(dtype).flatten()

    px = points.x.to(dtype)
    lower = px[0].expand(y_flat.shape).clone()
    upper = px[-1].expand(y_flat.shape).clone()

    result = torch.zeros_like(y_flat)
    done = torch.zeros(y_flat.shape, dtype=torch.bool, device=y_flat.device)

    for iteration in range(max_depth + 1):
        active = ~done & (torch.abs(upper - lower) > precision)
        if not torch.any(active):
            break

        middle = (lower + upper) / 2
        value = curve_lookup(
            middle, points, precision=precision, max_depth=max_depth
        )

        found = active & ((value == y_flat) | (iteration >= max_depth))
        result = torch.where(found, middle, result)
        done = done | found

        below = active & ~found & (value < y_flat)
        above = active & ~found & ~(value < y_flat)
        lower = torch.where(below, middle, lower)
        upper = torch.where(above, middle, upper)

    result = torch.where(done, result, (lower + upper) / 2)
    return result.view(query_shape)
