"""
Factory functions for creating approximations.
"""
from typing import List

from .base import Approximation
from .lagrange import LagrangePolynomialApproximation
from .linear import LinearApproximation

_APPROXIMATIONS = {
    LagrangePolynomialApproximation.type: LagrangePolynomialApproximation,
    LinearApproximation.type: LinearApproximation,
}


def available_methods() -> List[str]:
    """Names accepted by create_approximation."""
    return list(_APPROXIMATIONS)


def create_approximation(method: str) -> Approximation:
    """
    Create an approximation based on method name.

    Args:
        method: Approximation name, case-insensitive

    Returns:
        Approximation instance
    """
    method_upper = method.upper()

    if method_upper not in _APPROXIMATIONS:
        raise ValueError(f"Unknown interpolation method: {method}. "
                         f"Available: {', '.join(available_methods())}")
    return _APPROXIMATIONS[method_upper]()
