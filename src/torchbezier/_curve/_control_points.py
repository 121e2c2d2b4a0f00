"""Normalisation of the accepted curve representations."""

from __future__ import annotations

import functools
from collections.abc import Sequence

import torch
from torch import Tensor

from .._curve_error import CurveError
from .._point import Point, _as_tensor, _point_from_tensors


def control_points(curve: Point | Tensor | Sequence | None) -> Point | None:
    """
    Interpret a curve as a one-dimensional batch of control points.

    Parameters
    ----------
    curve : Point, Tensor, sequence or None
        One of:

        - a ``Point`` with batch shape ``(n,)``;
        - a tensor of shape ``(n, 2)`` holding ``(x, y)`` rows;
        - a sequence of scalar ``Point`` objects;
        - a sequence of ``(x, y)`` pairs;
        - ``None``.

    Returns
    -------
    points : Point or None
        Control points with batch shape ``(n,)``, or ``None`` when the
        curve is absent or has no points.

    Raises
    ------
    CurveError
        If the input cannot be read as a sequence of 2D points.
    """
    if curve is None:
        return None

    if isinstance(curve, Point):
        if curve.x.dim() != 1:
            raise CurveError(
                f"Control points must have batch shape (n,), got {tuple(curve.x.shape)}"
            )
        if curve.x.shape[0] == 0:
            return None
        return curve

    if not isinstance(curve, Tensor):
        curve = list(curve)
        if not curve:
            return None
        is_point = [isinstance(p, Point) for p in curve]
        if any(is_point) and not all(is_point):
            raise CurveError(
                "Control points must be all Point objects or all (x, y) pairs"
            )
        if all(is_point):
            shapes = {tuple(p.x.shape) for p in curve}
            if shapes != {()}:
                raise CurveError(
                    "A sequence of Point objects must hold single points, "
                    f"got batch shapes {sorted(shapes)}"
                )
            dtype = functools.reduce(
                torch.promote_types,
                [p.x.dtype for p in curve] + [p.y.dtype for p in curve],
            )
            return _point_from_tensors(
                torch.stack([p.x.to(dtype) for p in curve]),
                torch.stack([p.y.to(dtype) for p in curve]),
            )

    try:
        curve = _as_tensor(curve)
    except (TypeError, ValueError, RuntimeError) as error:
        raise CurveError(f"Control points are not (x, y) pairs: {error}") from error
    if curve.numel() == 0:
        return None
    if curve.dim() != 2 or curve.shape[-1] != 2:
        raise CurveError(
            f"Control points must have shape (n, 2), got {tuple(curve.shape)}"
        )

    return _point_from_tensors(curve[:, 0], curve[:, 1])
