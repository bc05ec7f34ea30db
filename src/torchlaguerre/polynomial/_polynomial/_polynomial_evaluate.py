from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(
    p: Polynomial, x: Union[Tensor, complex, float]
) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    The accumulation runs from the highest-degree coefficient downward,
    ``acc = acc * x + c[i]`` for ``i = d, ..., 0`` starting from
    ``acc = 0``. The order is fixed so that results are reproducible
    across precisions.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or number
        Evaluation points of any shape. Evaluated elementwise. Python
        numbers are read at double precision.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``. Coefficients and points are
        promoted to a common dtype.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs
    if not isinstance(x, Tensor):
        # Python numbers are double precision
        scalar_dtype = (
            torch.complex128 if isinstance(x, complex) else torch.float64
        )
        x = torch.as_tensor(
            x,
            dtype=torch.promote_types(coeffs.dtype, scalar_dtype),
            device=coeffs.device,
        )

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = torch.zeros_like(x)
    for i in range(coeffs.shape[-1] - 1, -1, -1):
        result = result * x + coeffs[i]

    return result
