from typing import Optional

import torch
from torch import Tensor

from torchlaguerre.polynomial._polynomial_error import PolynomialError

from ._polynomial import Polynomial, polynomial


def random_polynomial(
    degree: int,
    *,
    generator: torch.Generator,
    dtype: torch.dtype = torch.complex128,
    device: Optional[torch.device] = None,
) -> Polynomial:
    """Draw a polynomial with standard complex normal coefficients.

    Parameters
    ----------
    degree : int
        Degree of the polynomial. Must be non-negative.
    generator : torch.Generator
        Caller-owned generator. Reusing a generator seeded with the same
        value reproduces the same polynomial; the global torch RNG is
        never consulted.
    dtype : torch.dtype
        Complex dtype of the coefficients. Default complex128.
    device : torch.device, optional
        Device of the coefficients.

    Returns
    -------
    Polynomial
        Polynomial with ``degree + 1`` coefficients.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(12345)
    >>> p = random_polynomial(5, generator=g)
    >>> p.coeffs.shape
    torch.Size([6])
    """
    if degree < 0:
        raise PolynomialError(f"Degree must be non-negative, got {degree}")

    coeffs = torch.randn(
        degree + 1, dtype=dtype, device=device, generator=generator
    )
    return polynomial(coeffs)


def random_initial_guess(
    *,
    generator: torch.Generator,
    dtype: torch.dtype = torch.complex128,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Draw a standard complex normal starting point as a 0-d tensor."""
    return torch.randn(
        (), dtype=dtype, device=device, generator=generator
    )
