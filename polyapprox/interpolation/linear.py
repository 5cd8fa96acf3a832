"""
Linear approximation between two samples.
"""
from typing import MutableSequence, Optional, Sequence

from polyapprox.errors import DegenerateSamplesError, InvalidInputError

from .base import Approximation


class LinearApproximation(Approximation):
    """Straight-line interpolation through exactly two samples.

    Only degree 1 is supported, so two samples are always required.
    """

    type = "LINEAR"

    def required_sample_count(self, degree: float) -> float:
        return 2

    def interpolate(self,
                    x: float,
                    x_table: Sequence[float],
                    y_table: Sequence[float],
                    stride: int,
                    result: Optional[MutableSequence[float]] = None) -> MutableSequence[float]:
        """Linear interpolation on each dependent component."""
        if len(x_table) != 2:
            raise InvalidInputError(
                f"Linear interpolation needs exactly 2 samples, got {len(x_table)}"
            )
        xs, ys = self._validate_table(x_table, y_table, stride, result)

        x0, x1 = xs
        if x0 == x1:
            raise DegenerateSamplesError(f"Duplicate independent value {x0} at indices 0 and 1")

        y0, y1 = ys[0], ys[1]
        values = ((y1 - y0) * x + x1 * y0 - x0 * y1) / (x1 - x0)
        return self._store(values, result)
