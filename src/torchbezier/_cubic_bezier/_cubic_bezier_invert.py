"""Recover y from x on a cubic Bezier segment by midpoint subdivision."""

from __future__ import annotations

import torch
from torch import Tensor

from .._point import Point, _as_tensor, _result_dtype
from .._tolerances import default_tolerances
from ._cubic_bezier_split import cubic_bezier_split


def _expand(p: Point, shape: torch.Size, dtype: torch.dtype) -> Point:
    return Point(
        x=p.x.to(dtype).expand(shape),
        y=p.y.to(dtype).expand(shape),
        batch_size=shape,
    )


def _select(mask: Tensor, a: Point, b: Point) -> Point:
    return Point(
        x=torch.where(mask, a.x, b.x),
        y=torch.where(mask, a.y, b.y),
        batch_size=mask.shape,
    )


def cubic_bezier_invert(
    x,
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    depth: int = 0,
    *,
    precision: float | None = None,
    max_depth: int | None = None,
) -> Tensor:
    """
    Find the y-coordinate of a cubic Bezier segment at a given x-coordinate.

    A cubic Bezier curve is parametric in t, so y cannot be read off x
    directly. The segment is repeatedly split at ``t = 0.5`` and the half
    whose x-range brackets the target is kept, until one of its end control
    points lies within ``precision`` of the target in x.

    Parameters
    ----------
    x : float or Tensor
        Target x-coordinates, shape (*query_shape).
    p1, p2, p3, p4 : Point
        Control points of the segment. Their batch shapes broadcast
        against ``x``.
    depth : int, default=0
        Number of subdivisions already performed. Subdivision stops once
        the depth exceeds ``max_depth``.
    precision : float, optional
        Absolute tolerance on x. Default: 1e-3.
    max_depth : int, optional
        Maximum subdivision depth. Default: 250.

    Returns
    -------
    y : Tensor
        y-coordinates, shape broadcast from ``x`` and the control points.

    Notes
    -----
    **Algorithm**: at every level, with ``p1234`` the curve point at
    ``t = 0.5`` of the current sub-segment:

    1. increment the depth; if it exceeds ``max_depth`` return ``p1234.y``;
    2. if ``|p1.x - x| < precision`` return ``p1.y``, else if
       ``|p4.x - x| < precision`` return ``p4.y``;
    3. continue with the right half if ``x > p1234.x``, otherwise with the
       left half.

    Elements of a batch terminate independently.

    **Failure modes**: nothing is raised. The search assumes x(t) is
    monotonic on the segment. On a segment that folds back in x, or for a
    target outside ``[p1.x, p4.x]``, the result is whatever point the
    search ends on when the depth runs out.

    Examples
    --------
    >>> from torchbezier import point
    >>> p = [point(0, 0), point(1, 1), point(2, 2), point(3, 3)]
    >>> y = cubic_bezier_invert(1.5, *p)
    >>> abs(float(y) - 1.5) < 1e-3
    True
    """
    defaults = default_tolerances()
    if precision is None:
        precision = defaults["precision"]
    if max_depth is None:
        max_depth = defaults["max_depth"]

    controls = (p1, p2, p3, p4)
    x = _as_tensor(
        x, _result_dtype(*(p.x for p in controls), *(p.y for p in controls))
    )

    dtype = x.dtype
    for p in controls:
        dtype = torch.promote_types(dtype, p.x.dtype)
        dtype = torch.promote_types(dtype, p.y.dtype)

    shape = torch.broadcast_shapes(
        x.shape, p1.x.shape, p2.x.shape, p3.x.shape, p4.x.shape
    )
    x = x.to(dtype).expand(shape)
    p1, p2, p3, p4 = (_expand(p, shape, dtype) for p in (p1, p2, p3, p4))

    result = torch.zeros(shape, dtype=dtype, device=x.device)
    done = torch.zeros(shape, dtype=torch.bool, device=x.device)

    while True:
        left, right = cubic_bezier_split(p1, p2, p3, p4)
        p1234 = left[3]

        depth += 1

        if depth > max_depth:
            return torch.where(done, result, p1234.y)

        near_start = ~done & (torch.abs(p1.x - x) < precision)
        result = torch.where(near_start, p1.y, result)
        done = done | near_start

        near_end = ~done & (torch.abs(p4.x - x) < precision)
        result = torch.where(near_end, p4.y, result)
        done = done | near_end

        if torch.all(done):
            return result

        go_right = x > p1234.x
        p1, p2, p3, p4 = (
            _select(go_right, r, l) for r, l in zip(right, left)
        )
