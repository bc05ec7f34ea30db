from ._polynomial import (
    Polynomial,
    differentiate,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_evaluate,
    random_initial_guess,
    random_polynomial,
)
from ._polynomial_error import PolynomialError

__all__ = [
    "Polynomial",
    "PolynomialError",
    "differentiate",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "random_initial_guess",
    "random_polynomial",
]
