from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlaguerre.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending complex coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i.

    Examples
    --------
    Polynomial 2 - 3x + x^2 with roots 1 and 2:
        Polynomial(coeffs=torch.tensor([2.0, -3.0, 1.0]))

    Evaluation:
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __call__(self, x: Union[Tensor, complex, float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(
    coeffs: Union[Tensor, Sequence[complex]],
    *,
    dtype: Optional[torch.dtype] = None,
) -> Polynomial:
    """Create polynomial from a coefficient tensor or sequence.

    Parameters
    ----------
    coeffs : Tensor or sequence of numbers
        Coefficients in ascending order, shape (N,).
        Must have at least one coefficient.
    dtype : torch.dtype, optional
        Dtype of the stored coefficients. Default keeps the dtype of a
        tensor input. Python sequences are stored at double precision:
        float64, complex128 if any coefficient is complex, int64 for
        integers.

    Returns
    -------
    Polynomial
        Polynomial owning a private copy of the coefficients.

    Raises
    ------
    PolynomialError
        If coeffs is empty or not one-dimensional.

    Examples
    --------
    >>> p = polynomial([2.0, -3.0, 1.0])  # 2 - 3x + x^2
    >>> p.coeffs
    tensor([ 2., -3.,  1.], dtype=torch.float64)
    """
    if dtype is None and not isinstance(coeffs, Tensor):
        # Python numbers are double precision
        inferred = torch.as_tensor(coeffs).dtype
        if inferred.is_complex:
            dtype = torch.complex128
        elif inferred.is_floating_point:
            dtype = torch.float64

    coeffs = torch.as_tensor(coeffs, dtype=dtype)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, got shape "
            f"{tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs.clone())
