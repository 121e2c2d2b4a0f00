"""Two-dimensional points and their vector algebra."""

import functools

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class Point:
    """Point in the plane.

    Both coordinates share the batch shape of the point: a single point has
    batch shape ``()`` and a sequence of ``n`` points has batch shape ``(n,)``.
    Operations in this package never modify a point in place.

    Attributes
    ----------
    x : Tensor
        Abscissa, shape (*batch_shape).
    y : Tensor
        Ordinate, shape (*batch_shape).
    """

    x: Tensor
    y: Tensor


def _result_dtype(*values) -> torch.dtype:
    dtypes = [
        v.dtype
        for v in values
        if isinstance(v, Tensor) and v.is_floating_point()
    ]
    if not dtypes:
        return torch.get_default_dtype()
    return functools.reduce(torch.promote_types, dtypes)


def _as_tensor(value, dtype: torch.dtype | None = None) -> Tensor:
    # Python numbers are created directly in ``dtype``, never rounded
    # through the default dtype first. Arrays keep their own float dtype.
    if dtype is None:
        dtype = torch.get_default_dtype()
    if isinstance(value, Tensor):
        if not value.is_floating_point():
            value = value.to(dtype)
        return value
    tensor = torch.as_tensor(value)
    if tensor.is_floating_point() and tensor.dtype != torch.get_default_dtype():
        return tensor
    return torch.as_tensor(value, dtype=dtype)


def _point_from_tensors(x: Tensor, y: Tensor) -> Point:
    dtype = torch.promote_types(x.dtype, y.dtype)
    x, y = torch.broadcast_tensors(x.to(dtype), y.to(dtype))
    return Point(x=x, y=y, batch_size=x.shape)


def point(x=None, y=None) -> Point:
    """
    Create a point.

    A coordinate that is not given (``None``) defaults to zero. An explicit
    zero is kept as given.

    Parameters
    ----------
    x : float or Tensor, optional
        Abscissa. Default 0.
    y : float or Tensor, optional
        Ordinate. Default 0.

    Returns
    -------
    p : Point
        Point whose batch shape is the broadcast shape of ``x`` and ``y``.
        Python numbers and integer tensors take the dtype of the other
        coordinate when it is a floating tensor, else the default dtype.

    Examples
    --------
    >>> point().x
    tensor(0.)
    >>> point(10, 20).y
    tensor(20.)
    """
    dtype = _result_dtype(x, y)
    x = _as_tensor(0.0 if x is None else x, dtype)
    y = _as_tensor(0.0 if y is None else y, dtype)
    return _point_from_tensors(x, y)


def point_add(a: Point, b: Point) -> Point:
    """Return ``a + b``, broadcasting the batch shapes."""
    return _point_from_tensors(a.x + b.x, a.y + b.y)


def point_scale(p: Point, s) -> Point:
    """Return ``p * s`` for a scalar or tensor ``s``."""
    s = _as_tensor(s, p.x.dtype)
    return _point_from_tensors(p.x * s, p.y * s)


def point_midpoint(a: Point, b: Point) -> Point:
    """Return the point halfway between ``a`` and ``b``."""
    return point_scale(point_add(a, b), 0.5)
