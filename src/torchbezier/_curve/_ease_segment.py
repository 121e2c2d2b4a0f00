"""Single-segment ease curves."""

from __future__ import annotations

import functools

import torch

from .._point import Point, _as_tensor, _point_from_tensors, _result_dtype


def ease_segment(
    start_x,
    end_x,
    start_y,
    end_y,
    ease_in=0.5,
    ease_out=0.5,
) -> Point:
    """
    Build the control points of an ease-in/ease-out segment.

    The inner control points sit at the height of their neighbouring end
    point, giving zero slope at both ends.

    Parameters
    ----------
    start_x, end_x : float or Tensor
        x-coordinates of the segment ends.
    start_y, end_y : float or Tensor
        y-coordinates of the segment ends.
    ease_in : float or Tensor, default=0.5
        Horizontal offset of the second control point from the start, as a
        fraction of ``end_x - start_x``.
    ease_out : float or Tensor, default=0.5
        Horizontal offset of the third control point from the end, as a
        fraction of ``end_x - start_x``.

    Returns
    -------
    points : Point
        Control points with batch shape ``(4, *batch_shape)``:
        ``(start_x, start_y)``, ``(start_x + ease_in * w, start_y)``,
        ``(end_x - ease_out * w, end_y)``, ``(end_x, end_y)`` where
        ``w = end_x - start_x``.

    Notes
    -----
    Only a segment built from scalar inputs, batch shape ``(4,)``, is a
    curve that ``curve_lookup`` accepts directly. A batched result holds
    one segment per trailing index; ``curve_lookup`` rejects it with
    ``CurveError``, so select a segment first, e.g.
    ``point(segment.x[:, i], segment.y[:, i])``.

    Examples
    --------
    >>> from torchbezier import curve_lookup
    >>> segment = ease_segment(0.0, 1.0, 0.0, 10.0)
    >>> float(curve_lookup(0.5, segment))
    5.0
    """
    raw = (start_x, end_x, start_y, end_y, ease_in, ease_out)
    dtype = _result_dtype(*raw)
    values = [_as_tensor(v, dtype) for v in raw]
    dtype = functools.reduce(torch.promote_types, [v.dtype for v in values])
    start_x, end_x, start_y, end_y, ease_in, ease_out = torch.broadcast_tensors(
        *(v.to(dtype) for v in values)
    )
    width = end_x - start_x

    x = torch.stack(
        [start_x, start_x + ease_in * width, end_x - ease_out * width, end_x]
    )
    y = torch.stack([start_y, start_y, end_y, end_y])

    return _point_from_tensors(x, y)
