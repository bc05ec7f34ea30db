import torch

from ._polynomial import Polynomial


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant polynomial returns [0]. The
        result never shares storage with ``p``.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 2 + 6x
    tensor([2., 6.])
    """
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    coeffs = p.coeffs.clone()

    for _ in range(order):
        n = coeffs.shape[-1]
        if n <= 1:
            # Derivative of constant is zero
            return Polynomial(
                coeffs=torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)
            )

        # new_coeffs[i] = (i+1) * old_coeffs[i+1]
        indices = torch.arange(1, n, device=coeffs.device).to(coeffs.dtype)
        coeffs = coeffs[1:] * indices

    return Polynomial(coeffs=coeffs)


def differentiate(p: Polynomial) -> Polynomial:
    """First derivative of ``p``.

    Equivalent to ``polynomial_derivative(p, order=1)``. Applying it twice
    yields the second derivative used by the Laguerre step.

    Examples
    --------
    >>> differentiate(polynomial([2.0, -3.0, 1.0])).coeffs
    tensor([-3.,  2.])
    >>> differentiate(polynomial([5.0])).coeffs
    tensor([0.])
    """
    return polynomial_derivative(p, order=1)
