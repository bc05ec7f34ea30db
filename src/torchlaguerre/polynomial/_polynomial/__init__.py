from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import differentiate, polynomial_derivative
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_random import random_initial_guess, random_polynomial

__all__ = [
    "Polynomial",
    "differentiate",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "random_initial_guess",
    "random_polynomial",
]
