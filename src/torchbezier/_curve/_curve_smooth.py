"""Smooth curves through anchor points."""

from __future__ import annotations

from collections.abc import Sequence

import torch
from torch import Tensor

from .._curve_error import CurveError
from .._point import Point, _as_tensor, _point_from_tensors
from ._control_points import control_points


def curve_smooth(
    anchors: Point | Tensor | Sequence,
    smoothness=1 / 3,
) -> Point:
    """
    Build a smooth piecewise curve passing through anchor points.

    Each anchor gets a tangent parallel to the chord from its previous to
    its next anchor (one-sided at the ends). The inner control points of a
    segment lie on those tangents, ``smoothness`` times the segment width
    away from the anchors in x.

    Parameters
    ----------
    anchors : Point, Tensor or sequence
        Anchor points, in any form accepted by ``curve_lookup``, ordered
        by x.
    smoothness : float or Tensor, default=1/3
        Horizontal handle length as a fraction of the segment width. Values
        below 0.5 keep every segment ordered in x. At 1/3 each segment is
        the cubic Hermite interpolant of its end slopes; 0 gives straight
        segments.

    Returns
    -------
    points : Point
        Control points, batch shape ``(4 * (n_anchors - 1),)``, one segment
        per consecutive pair of anchors.

    Raises
    ------
    CurveError
        If there are fewer than two anchors.

    Notes
    -----
    Consecutive segments share the anchor between them and have the same
    tangent direction there, so the curve is smooth across anchors. The
    slope at an anchor is the slope of the chord between its neighbours;
    neighbours with the same x give a flat tangent.

    Examples
    --------
    >>> import torch
    >>> from torchbezier import curve_lookup
    >>> anchors = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
    >>> curve = curve_smooth(anchors)
    >>> curve.batch_size
    torch.Size([8])
    >>> float(curve_lookup(1.0, curve))
    1.0
    """
    points = control_points(anchors)
    if points is None or points.x.shape[0] < 2:
        raise CurveError("Smoothing requires at least two anchor points")

    x, y = points.x, points.y
    n = x.shape[0]

    prior = torch.clamp(torch.arange(n, device=x.device) - 1, min=0)
    following = torch.clamp(torch.arange(n, device=x.device) + 1, max=n - 1)
    chord_x = x[following] - x[prior]
    chord_y = y[following] - y[prior]
    flat = chord_x == 0
    slope = torch.where(
        flat,
        torch.zeros_like(chord_y),
        chord_y / torch.where(flat, torch.ones_like(chord_x), chord_x),
    )

    handle = _as_tensor(smoothness, x.dtype) * (x[1:] - x[:-1])

    segment_x = torch.stack([x[:-1], x[:-1] + handle, x[1:] - handle, x[1:]], dim=-1)
    segment_y = torch.stack(
        [
            y[:-1],
            y[:-1] + slope[:-1] * handle,
            y[1:] - slope[1:] * handle,
            y[1:],
        ],
        dim=-1,
    )

    return _point_from_tensors(segment_x.reshape(-1), segment_y.reshape(-1))
