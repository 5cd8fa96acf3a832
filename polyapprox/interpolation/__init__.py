"""
Polynomial approximations over vector-valued sample tables.

Every approximation shares one contract: given a query value, a table of
independent values and a packed table of dependent values, return the
interpolated dependent vector.
"""

# Base classes
from .base import Approximation

# Factory
from .factory import available_methods, create_approximation

# Lagrange polynomial approximation
from .lagrange import LagrangePolynomialApproximation, interpolate, required_sample_count

# Linear approximation
from .linear import LinearApproximation

__all__ = [
    # Base classes
    'Approximation',

    # Approximations
    'LagrangePolynomialApproximation',
    'LinearApproximation',

    # Module-level Lagrange helpers
    'interpolate',
    'required_sample_count',

    # Factory
    'available_methods',
    'create_approximation',
]
