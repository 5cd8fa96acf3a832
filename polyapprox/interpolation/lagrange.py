"""
Lagrange polynomial approximation.

The interpolating polynomial through N samples has degree N - 1 and is
evaluated directly from the Lagrange basis:

    L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)
    y(x)   = sum_i L_i(x) * y_i

Each evaluation costs O(N^2 * stride); no barycentric weights are cached, so
the routine stays stateless between calls.
"""
from typing import MutableSequence, Optional, Sequence

import numpy as np

from polyapprox.errors import DegenerateSamplesError

from .base import Approximation


class LagrangePolynomialApproximation(Approximation):
    """Lagrange interpolation over vector-valued samples.

    Extrapolation outside the sampled range is permitted and unchecked.
    """

    type = "LAGRANGE"

    def required_sample_count(self, degree: float) -> float:
        """Samples needed for the desired degree; never fewer than two."""
        return max(degree + 1, 2)

    def interpolate(self,
                    x: float,
                    x_table: Sequence[float],
                    y_table: Sequence[float],
                    stride: int,
                    result: Optional[MutableSequence[float]] = None) -> MutableSequence[float]:
        """
        Interpolate the dependent values at x.

        Args:
            x: Independent value to interpolate at
            x_table: Distinct, increasing independent values
            y_table: ``len(x_table) * stride`` dependent values, one block per sample
            stride: Dependent values per independent value
            result: Optional buffer of length stride, overwritten and returned

        Returns:
            The interpolated values; ``result`` itself if one was provided

        Raises:
            InvalidInputError: If the table shapes or the buffer length are inconsistent
            DegenerateSamplesError: If two entries of x_table are equal
        """
        xs, ys = self._validate_table(x_table, y_table, stride, result)

        values = np.zeros(stride)
        for i in range(len(xs)):
            others = np.delete(xs, i)
            diffs = xs[i] - others
            zeros = np.flatnonzero(diffs == 0)
            if zeros.size:
                # index into others skips i
                j = int(zeros[0]) + (1 if zeros[0] >= i else 0)
                raise DegenerateSamplesError(
                    f"Duplicate independent value {xs[i]} at indices {min(i, j)} and {max(i, j)}"
                )
            coefficient = np.prod((x - others) / diffs)
            values += coefficient * ys[i]

        return self._store(values, result)


_LAGRANGE = LagrangePolynomialApproximation()


def required_sample_count(degree: float) -> float:
    """Samples needed for a Lagrange interpolant of the given degree."""
    return _LAGRANGE.required_sample_count(degree)


def interpolate(x: float,
                x_table: Sequence[float],
                y_table: Sequence[float],
                stride: int,
                result: Optional[MutableSequence[float]] = None) -> MutableSequence[float]:
    """Lagrange-interpolate the dependent values at x."""
    return _LAGRANGE.interpolate(x, x_table, y_table, stride, result)
