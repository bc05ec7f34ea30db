from ._exceptions import (
    ConvergenceWarning,
    InvalidInputError,
    LaguerreTraceWarning,
    RootFindingError,
)
from ._laguerre import laguerre
from ._precision import (
    infer_complex_dtype,
    machine_epsilon,
    resolve_complex_dtype,
    working_precision_bits,
)
from ._result import LaguerreResult
from ._trace import (
    LaguerreTraceRecord,
    TraceRecorder,
    format_trace_record,
    warning_trace,
)

__all__ = [
    "format_trace_record",
    "infer_complex_dtype",
    "laguerre",
    "machine_epsilon",
    "resolve_complex_dtype",
    "warning_trace",
    "working_precision_bits",
    "ConvergenceWarning",
    "InvalidInputError",
    "LaguerreResult",
    "LaguerreTraceRecord",
    "LaguerreTraceWarning",
    "RootFindingError",
    "TraceRecorder",
]
