"""Cubic Bernstein basis polynomials."""

import torch
from torch import Tensor

from .._point import _as_tensor


def cubic_bezier_basis(t) -> Tensor:
    """
    Evaluate the four cubic Bernstein basis polynomials.

    Parameters
    ----------
    t : float or Tensor
        Curve parameter, shape (*query_shape). Values outside [0, 1] are
        accepted and extrapolate.

    Returns
    -------
    basis : Tensor
        Basis weights, shape (*query_shape, 4), ordered as

        - ``B1(t) = (1-t)^3``
        - ``B2(t) = 3t(1-t)^2``
        - ``B3(t) = 3t^2(1-t)``
        - ``B4(t) = t^3``

    Notes
    -----
    At ``t = 0`` the weights are exactly ``[1, 0, 0, 0]`` and at ``t = 1``
    exactly ``[0, 0, 0, 1]``, so evaluation reproduces the end control
    points without rounding error.
    """
    t = _as_tensor(t)
    mt = 1 - t
    return torch.stack(
        [mt * mt * mt, 3 * t * mt * mt, 3 * t * t * mt, t * t * t],
        dim=-1,
    )
