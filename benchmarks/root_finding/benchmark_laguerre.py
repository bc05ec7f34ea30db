"""Benchmark Laguerre root polishing across working precisions.

Polishes the smallest root of a degree-10 polynomial with tightly
clustered roots (k + 1/3 for k = 1..10) at complex64 and complex128 from
the same seeded starting guess, and reports the error estimates. Retrying
at a higher precision when a run fails is done here, by the caller.
"""

import time

import torch

from torchlaguerre.polynomial import polynomial, polynomial_evaluate
from torchlaguerre.root_finding import (
    TraceRecorder,
    format_trace_record,
    laguerre,
    machine_epsilon,
    working_precision_bits,
)

PRECISIONS = [torch.complex64, torch.complex128]


def clustered_polynomial(degree: int = 10):
    """Monic polynomial with roots k + 1/3, built in float64."""
    coeffs = torch.ones(1, dtype=torch.float64)
    roots = [k + 1.0 / 3.0 for k in range(1, degree + 1)]
    for r in roots:
        # multiply by (x - r)
        shifted = torch.nn.functional.pad(coeffs, (1, 0))
        scaled = torch.nn.functional.pad(coeffs, (0, 1)) * -r
        coeffs = shifted + scaled
    return polynomial(coeffs), roots


def benchmark_laguerre(
    dtype: torch.dtype, z0: complex, n_iterations: int = 20
) -> tuple:
    """Time one precision and return (result, trace, milliseconds)."""
    p, _ = clustered_polynomial()
    dxtol = 100 * machine_epsilon(dtype) ** 0.5

    # Warmup
    for _ in range(3):
        laguerre(p, z0=z0, dxtol=dxtol, maxit=20, dtype=dtype)

    start = time.perf_counter()
    for _ in range(n_iterations):
        laguerre(p, z0=z0, dxtol=dxtol, maxit=20, dtype=dtype)
    elapsed = time.perf_counter() - start

    recorder = TraceRecorder()
    result = laguerre(
        p, z0=z0, dxtol=dxtol, maxit=20, dtype=dtype, trace=recorder
    )
    return result, recorder, elapsed / n_iterations * 1000


def main():
    """Run the precision comparison."""
    generator = torch.Generator().manual_seed(12345)
    # Guess in [1.0, 1.4], nearer 4/3 than 7/3
    z0 = 1.0 + 0.4 * torch.rand((), dtype=torch.float64, generator=generator)
    z0 = complex(z0.item())

    p, roots = clustered_polynomial()
    reference = polynomial(p.coeffs.to(torch.complex128))

    print("Laguerre Precision Benchmark")
    print("=" * 70)
    print(f"z0 = {z0}, target root = {roots[0]:.16f}")

    for dtype in PRECISIONS:
        result, recorder, ms = benchmark_laguerre(dtype, z0)
        root = torch.tensor(result.root, dtype=torch.complex128)
        residual = float(torch.abs(polynomial_evaluate(reference, root)))

        print("-" * 70)
        print(f"{str(dtype):>16} ({working_precision_bits(dtype)} bits)")
        for record in recorder:
            print(format_trace_record(record))
        print(
            f"{'failed':>16}: {result.failed}\n"
            f"{'iterations':>16}: {result.iterations}\n"
            f"{'|dx|':>16}: {result.forward_error:.3e}\n"
            f"{'|p(x)|':>16}: {result.backward_error:.3e}\n"
            f"{'|x - root|':>16}: {abs(result.root - roots[0]):.3e}\n"
            f"{'|p(x)| (f64)':>16}: {residual:.3e}\n"
            f"{'time (ms)':>16}: {ms:.3f}"
        )

        if not result.failed:
            continue

        # Caller-level escalation
        for wider in PRECISIONS[PRECISIONS.index(dtype) + 1 :]:
            retry, _, _ = benchmark_laguerre(wider, result.root)
            print(f"{'retry ' + str(wider):>16}: failed={retry.failed}")
            if not retry.failed:
                break

    print("=" * 70)


if __name__ == "__main__":
    main()
