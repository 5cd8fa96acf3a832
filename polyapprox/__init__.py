"""Polynomial approximation of vector-valued samples.

This package provides interpolation routines for sample tables in which every
independent value carries a fixed-width vector of dependent values (for
example, time-tagged positions).

Key modules:
- interpolation: Lagrange and linear approximations plus a factory
- sampled: Time series that select interpolation windows automatically
- config: Settings for sampled series
- errors: Exceptions raised on invalid sample tables
"""

from .config import ExtrapolationType, SeriesSettings
from .errors import DegenerateSamplesError, InterpolationError, InvalidInputError
from .interpolation import (
    Approximation,
    LagrangePolynomialApproximation,
    LinearApproximation,
    create_approximation,
    interpolate,
    required_sample_count,
)
from .sampled import SampledSeries

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Approximations
    "Approximation",
    "LagrangePolynomialApproximation",
    "LinearApproximation",
    "create_approximation",
    "interpolate",
    "required_sample_count",
    # Series
    "SampledSeries",
    "SeriesSettings",
    "ExtrapolationType",
    # Errors
    "InterpolationError",
    "InvalidInputError",
    "DegenerateSamplesError",
]
