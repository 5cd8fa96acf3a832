"""
Settings for sampled series.
"""

from dataclasses import dataclass
from enum import Enum

from polyapprox.interpolation.factory import available_methods


class ExtrapolationType(Enum):
    """Behaviour of a sampled series outside its first and last sample."""

    NONE = "NONE"
    HOLD = "HOLD"
    EXTRAPOLATE = "EXTRAPOLATE"


@dataclass(frozen=True)
class SeriesSettings:
    """Interpolation settings for a SampledSeries.

    Attributes:
        method: Approximation name passed to create_approximation
        degree: Desired polynomial degree (reduced when too few samples exist)
        extrapolation: What value_at returns outside the sampled interval
    """

    method: str = "LAGRANGE"
    degree: int = 1
    extrapolation: ExtrapolationType = ExtrapolationType.NONE

    def __post_init__(self):
        if self.degree < 0:
            raise ValueError(f"Degree must be non-negative: {self.degree}")
        if self.method.upper() not in available_methods():
            raise ValueError(f"Unknown interpolation method: {self.method}. "
                             f"Available: {', '.join(available_methods())}")
        if not isinstance(self.extrapolation, ExtrapolationType):
            object.__setattr__(self, "extrapolation", ExtrapolationType(str(self.extrapolation).upper()))
