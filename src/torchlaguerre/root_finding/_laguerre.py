"""Laguerre's polynomial root polishing method."""

import math
import warnings
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchlaguerre.polynomial import (
    Polynomial,
    differentiate,
    polynomial,
    polynomial_degree,
    polynomial_evaluate,
)

from ._exceptions import (
    ConvergenceWarning,
    InvalidInputError,
    LaguerreTraceWarning,
)
from ._precision import infer_complex_dtype, resolve_complex_dtype
from ._result import LaguerreResult
from ._trace import LaguerreTraceRecord, TraceSink, warning_trace

PolynomialLike = Union[Polynomial, Tensor, Sequence[complex]]


def _as_polynomial(p: PolynomialLike) -> Polynomial:
    if isinstance(p, Polynomial):
        return p
    return polynomial(p)


def _check_tolerance(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(
            f"{name} must be finite and non-negative, got {value}"
        )
    return value


def _check_maxit(maxit: int) -> int:
    if isinstance(maxit, bool) or not isinstance(maxit, int):
        raise InvalidInputError(
            f"maxit must be an integer, got {type(maxit).__name__}"
        )
    if maxit < 1:
        raise InvalidInputError(f"maxit must be at least 1, got {maxit}")
    return maxit


def _result(
    root: Tensor, dx: float, pval: Tensor, iterations: int, failed: bool
) -> LaguerreResult:
    return LaguerreResult(
        root=complex(root.item()),
        forward_error=dx,
        backward_error=float(torch.abs(pval)),
        iterations=iterations,
        failed=failed,
    )


def laguerre(
    p: PolynomialLike,
    d1p: Optional[PolynomialLike] = None,
    d2p: Optional[PolynomialLike] = None,
    z0: Union[Tensor, complex, float] = 0.0,
    *,
    dxtol: float = 1e-8,
    pxtol: float = 1e-8,
    maxit: int = 10,
    trace: Optional[TraceSink] = None,
    dtype: Optional[torch.dtype] = None,
    verbose: int = 0,
) -> LaguerreResult:
    """
    Polish a single root of a complex polynomial with Laguerre's method.

    Each step evaluates the polynomial and its first two derivatives at
    the current estimate and moves by

    .. math::

        \\Delta = \\frac{d}{G \\pm \\sqrt{(d - 1)(d H - G^2)}}

    where :math:`G = p'/p`, :math:`H = G^2 - p''/p` and :math:`d` is the
    formal degree of ``p``. The sign giving the larger denominator is used.

    Parameters
    ----------
    p : Polynomial, Tensor or sequence
        Polynomial whose root is sought, coefficients in ascending order.
        Degree at least 1 is required for a meaningful search.
    d1p : Polynomial, Tensor or sequence, optional
        First derivative of ``p``. Computed with :func:`differentiate`
        when omitted.
    d2p : Polynomial, Tensor or sequence, optional
        Second derivative of ``p``. Computed as the derivative of ``d1p``
        when omitted.
    z0 : Tensor or number
        Starting guess, a scalar.
    dxtol : float
        Forward error tolerance. The iteration stops once a step satisfies
        ``|dx| < dxtol``.
    pxtol : float
        Backward error tolerance. Checked before every step, so the
        starting guess itself is accepted when ``|p(z0)| < pxtol``.
    maxit : int
        Maximum number of Laguerre steps. Must be at least 1.
    trace : callable, optional
        Sink receiving one :class:`LaguerreTraceRecord` per step.
    dtype : torch.dtype, optional
        Working precision (complex64 or complex128; float32/float64 map to
        their complex counterparts). Default promotes the coefficient
        dtypes and a tensor ``z0``; integer inputs work in complex128.
    verbose : int
        Verbosity level. 0 = silent, 1 = summary, 2 = per-step.
        Uses warnings.warn() for messages (not print).

    Returns
    -------
    LaguerreResult
        ``(root, forward_error, backward_error, iterations, failed)``.
        ``iterations`` counts the steps taken: 0 when ``z0`` already met
        ``pxtol``, ``maxit`` when the iteration failed.

    Raises
    ------
    PolynomialError
        If a coefficient sequence is empty.
    InvalidInputError
        If ``maxit < 1``, a tolerance is negative or not finite, ``z0`` is
        not a scalar or ``dtype`` is not a supported precision.

    Examples
    --------
    Root of x^2 - 3x + 2 = (x - 1)(x - 2) nearest to 0:

    >>> import torch
    >>> from torchlaguerre.polynomial import polynomial
    >>> from torchlaguerre.root_finding import laguerre
    >>> p = polynomial(torch.tensor([2.0, -3.0, 1.0], dtype=torch.float64))
    >>> result = laguerre(p, z0=0.0)
    >>> result.failed
    False
    >>> round(result.root.real, 8)
    1.0

    Notes
    -----
    **Convergence**: Laguerre's method converges cubically to simple roots
    and, for polynomials with only real roots, from any real starting
    point.

    **Failure**: Exhausting ``maxit`` is reported through ``failed=True``
    together with the last estimates. It is never raised and never retried;
    re-running at a higher precision or from another ``z0`` is up to the
    caller.

    **Degenerate evaluation**: When ``p(root)`` is exactly zero while
    ``pxtol`` is zero, or the two candidate denominators both vanish, the
    division produces ``inf``/``nan``. This is not corrected; the estimate
    becomes ``nan`` and the run ends with ``failed=True``.

    **Branch choice**: The square root uses the principal branch of
    ``torch.sqrt``. Behaviour exactly on the branch cut is not normalized.

    See Also
    --------
    differentiate : Coefficients of the first derivative.
    """
    p = _as_polynomial(p)
    d1p = differentiate(p) if d1p is None else _as_polynomial(d1p)
    d2p = differentiate(d1p) if d2p is None else _as_polynomial(d2p)

    dxtol = _check_tolerance("dxtol", dxtol)
    pxtol = _check_tolerance("pxtol", pxtol)
    maxit = _check_maxit(maxit)

    device = p.coeffs.device
    z0_is_tensor = isinstance(z0, Tensor)
    if z0_is_tensor:
        z0 = z0.to(device=device)
    else:
        # Python scalars keep full double precision until cast
        z0 = torch.as_tensor(z0, dtype=torch.complex128, device=device)
    if z0.numel() != 1:
        raise InvalidInputError(
            f"z0 must be a scalar, got shape {tuple(z0.shape)}"
        )

    if dtype is None:
        inputs = [p.coeffs, d1p.coeffs, d2p.coeffs]
        if z0_is_tensor:
            inputs.append(z0)
        dtype = infer_complex_dtype(*inputs)
    else:
        dtype = resolve_complex_dtype(dtype)

    # Working copies at the requested precision
    wp = Polynomial(coeffs=p.coeffs.to(dtype=dtype, device=device))
    wd1p = Polynomial(coeffs=d1p.coeffs.to(dtype=dtype, device=device))
    wd2p = Polynomial(coeffs=d2p.coeffs.to(dtype=dtype, device=device))

    degree = polynomial_degree(p)
    root = z0.reshape(()).to(dtype)
    pval = polynomial_evaluate(wp, root)
    dx = math.inf

    for step in range(maxit):
        # Backward error check before stepping
        if torch.abs(pval) < pxtol:
            if verbose > 0:
                warnings.warn(
                    f"Laguerre iteration converged in {step} iterations "
                    f"(|p(x)| < {pxtol:.1e})",
                    LaguerreTraceWarning,
                    stacklevel=2,
                )
            return _result(root, dx, pval, step, failed=False)

        d1val = polynomial_evaluate(wd1p, root)
        d2val = polynomial_evaluate(wd2p, root)

        g = d1val / pval
        h = g * g - d2val / pval
        sq = torch.sqrt((degree - 1) * (degree * h - g * g))

        # Larger denominator gives the smaller step
        plus = g + sq
        minus = g - sq
        if torch.abs(plus) >= torch.abs(minus):
            denominator = plus
        else:
            denominator = minus

        delta = degree / denominator
        root = root - delta
        pval = polynomial_evaluate(wp, root)
        dx = float(torch.abs(delta))

        if trace is not None or verbose > 1:
            record = LaguerreTraceRecord(
                step=step + 1,
                real=float(root.real),
                imag=float(root.imag),
                step_size=dx,
                residual=float(torch.abs(pval)),
            )
            if trace is not None:
                trace(record)
            if verbose > 1:
                warning_trace(record)

        # Forward error check after stepping
        if dx < dxtol:
            if verbose > 0:
                warnings.warn(
                    f"Laguerre iteration converged in {step + 1} iterations "
                    f"(|dx| < {dxtol:.1e})",
                    LaguerreTraceWarning,
                    stacklevel=2,
                )
            return _result(root, dx, pval, step + 1, failed=False)

    if verbose > 0:
        warnings.warn(
            f"Laguerre iteration did not converge in {maxit} iterations: "
            f"root={complex(root.item())}, |dx|={dx:.3e}, "
            f"|p(x)|={float(torch.abs(pval)):.3e}",
            ConvergenceWarning,
            stacklevel=2,
        )
    return _result(root, dx, pval, maxit, failed=True)
