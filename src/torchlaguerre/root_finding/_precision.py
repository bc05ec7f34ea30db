"""Working precision utilities for root finding."""

import math

import torch
from torch import Tensor

from ._exceptions import InvalidInputError

_COMPLEX_DTYPES = {
    torch.float32: torch.complex64,
    torch.float64: torch.complex128,
    torch.complex64: torch.complex64,
    torch.complex128: torch.complex128,
}

_REAL_DTYPES = {
    torch.complex64: torch.float32,
    torch.complex128: torch.float64,
}


def resolve_complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Return the complex dtype used as working precision for ``dtype``.

    Parameters
    ----------
    dtype : torch.dtype
        A float32/float64 or complex64/complex128 dtype.

    Returns
    -------
    torch.dtype
        complex64 for 32-bit inputs, complex128 for 64-bit inputs.

    Raises
    ------
    InvalidInputError
        If ``dtype`` has no supported complex counterpart.
    """
    try:
        return _COMPLEX_DTYPES[dtype]
    except KeyError:
        raise InvalidInputError(
            f"Unsupported working precision {dtype}; expected one of "
            f"float32, float64, complex64, complex128"
        ) from None


def infer_complex_dtype(*tensors: Tensor) -> torch.dtype:
    """Promote the dtypes of ``tensors`` to a complex working precision.

    Integer and boolean inputs promote to complex128.
    """
    dtype = tensors[0].dtype
    for tensor in tensors[1:]:
        dtype = torch.promote_types(dtype, tensor.dtype)

    if not (dtype.is_floating_point or dtype.is_complex):
        return torch.complex128

    # float16/bfloat16 have no usable complex counterpart
    if dtype in (torch.float16, torch.bfloat16):
        return torch.complex64

    return resolve_complex_dtype(dtype)


def real_dtype(dtype: torch.dtype) -> torch.dtype:
    """Real component dtype of a complex working precision."""
    return _REAL_DTYPES[resolve_complex_dtype(dtype)]


def machine_epsilon(dtype: torch.dtype) -> float:
    """Machine epsilon of the real component of ``dtype``."""
    return torch.finfo(real_dtype(dtype)).eps


def working_precision_bits(dtype: torch.dtype) -> int:
    """Mantissa bits (including the implicit bit) of ``dtype``.

    Examples
    --------
    >>> working_precision_bits(torch.complex64)
    24
    >>> working_precision_bits(torch.complex128)
    53
    """
    return round(-math.log2(machine_epsilon(dtype))) + 1
