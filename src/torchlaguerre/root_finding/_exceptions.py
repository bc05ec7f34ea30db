"""Exception and warning classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class InvalidInputError(RootFindingError, ValueError):
    """Raised before iterating when arguments are malformed.

    Covers a non-positive iteration budget, negative or non-finite
    tolerances, a non-scalar starting guess and unsupported dtypes.
    """

    pass


class ConvergenceWarning(UserWarning):
    """Warning for iterations that exhaust their budget without converging."""

    pass


class LaguerreTraceWarning(UserWarning):
    """Per-step and summary diagnostics of the Laguerre iteration."""

    pass
