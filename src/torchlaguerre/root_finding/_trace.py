"""Trace records and sinks for the Laguerre iteration."""

import warnings
from typing import Callable, Iterator, List, NamedTuple

from ._exceptions import LaguerreTraceWarning


class LaguerreTraceRecord(NamedTuple):
    """Diagnostics of one Laguerre step.

    Parameters
    ----------
    step : int
        1-based step index.
    real : float
        Real part of the root estimate after the step.
    imag : float
        Imaginary part of the root estimate after the step.
    step_size : float
        Magnitude of the step, the forward error estimate.
    residual : float
        ``|p(root)|`` after the step, the backward error estimate.
    """

    step: int
    real: float
    imag: float
    step_size: float
    residual: float


TraceSink = Callable[[LaguerreTraceRecord], None]


class TraceRecorder:
    """Trace sink collecting every record it receives.

    Examples
    --------
    >>> recorder = TraceRecorder()
    >>> result = laguerre(polynomial([2.0, -3.0, 1.0]), z0=0.0, trace=recorder)
    >>> len(recorder) == result.iterations
    True
    """

    def __init__(self) -> None:
        self.records: List[LaguerreTraceRecord] = []

    def __call__(self, record: LaguerreTraceRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LaguerreTraceRecord]:
        return iter(self.records)


def format_trace_record(record: LaguerreTraceRecord) -> str:
    """Render one record as a fixed-width console line."""
    return (
        f"{record.step:4d}"
        f"  {record.real:+.16e}"
        f"  {record.imag:+.16e}"
        f"  {record.step_size:.3e}"
        f"  {record.residual:.3e}"
    )


def warning_trace(record: LaguerreTraceRecord) -> None:
    """Trace sink reporting each step through ``warnings.warn``."""
    warnings.warn(
        format_trace_record(record),
        LaguerreTraceWarning,
        stacklevel=3,
    )
