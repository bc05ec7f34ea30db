class PolynomialError(ValueError):
    """Base exception for polynomial construction and operations."""

    pass
