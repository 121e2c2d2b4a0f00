"""Piecewise cubic Bezier lookup of y by x."""

from __future__ import annotations

from collections.abc import Sequence

import torch
from torch import Tensor

from .._cubic_bezier import cubic_bezier_invert
from .._point import Point, _as_tensor
from ._control_points import control_points


def curve_lookup(
    x,
    curve: Point | Tensor | Sequence | None,
    *,
    precision: float | None = None,
    max_depth: int | None = None,
) -> Tensor:
    """
    Look up the y-value of a piecewise cubic Bezier curve at x.

    The control points are read four at a time: points ``[0..3]`` form the
    first segment, ``[4..7]`` the second, and so on. Segments are expected
    to follow each other in increasing x.

    Parameters
    ----------
    x : float or Tensor
        Query x-coordinates, shape (*query_shape).
    curve : Point, Tensor, sequence or None
        Control points, in any form accepted by ``control_points``.
    precision : float, optional
        Absolute tolerance on x for the subdivision. Default: 1e-3.
    max_depth : int, optional
        Maximum subdivision depth. Default: 250.

    Returns
    -------
    y : Tensor
        Values, shape (*query_shape).

    Notes
    -----
    For each query the segments are visited in order:

    - if x lies left of the segment's first point, that point's y is
      returned;
    - if x lies right of the segment's last point, the next segment is
      tried;
    - otherwise the segment is inverted with ``cubic_bezier_invert``.

    A query to the right of every segment returns the y of the last control
    point. An empty or missing curve gives 0 everywhere. Trailing control
    points that do not complete a segment are never inverted, though the
    final point still serves as the right-hand clamp value.

    Examples
    --------
    >>> from torchbezier import point
    >>> curve = [point(0, 0), point(1, 2), point(2, 3), point(3, 4)]
    >>> curve_lookup(torch.tensor([-1.0, 4.0]), curve)
    tensor([0., 4.])
    """
    points = control_points(curve)

    if points is None:
        return torch.zeros_like(_as_tensor(x))

    x = _as_tensor(x, points.x.dtype)

    dtype = torch.promote_types(x.dtype, points.x.dtype)
    query_shape = x.shape
    x_flat = x.to(dtype).flatten()

    px = points.x.to(dtype)
    py = points.y.to(dtype)

    result = py[-1].expand(x_flat.shape).clone()

    n_segments = px.shape[0] // 4
    if n_segments == 0:
        return result.view(query_shape)

    # Index of the first control point of every complete segment
    first = torch.arange(n_segments, device=px.device) * 4

    before = x_flat.unsqueeze(-1) < px[first]
    after = x_flat.unsqueeze(-1) > px[first + 3]

    # The scan stops at the first segment the query lies left of or inside
    stop = before | ~after
    matched = stop.any(dim=-1)
    segment = torch.argmax(stop.int(), dim=-1)
    start = first[segment]

    is_before = matched & before.gather(-1, segment.unsqueeze(-1)).squeeze(-1)
    result = torch.where(is_before, py[start], result)

    inside = matched & ~is_before
    if torch.any(inside):
        index = start[inside]
        segment_points = [
            Point(x=px[index + k], y=py[index + k], batch_size=index.shape)
            for k in range(4)
        ]
        result[inside] = cubic_bezier_invert(
            x_flat[inside],
            *segment_points,
            0,
            precision=precision,
            max_depth=max_depth,
        )

    return result.view(query_shape)
