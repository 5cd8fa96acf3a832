"""
Base classes for polynomial approximations.
"""
from abc import ABC, abstractmethod
from typing import MutableSequence, Optional, Sequence, Tuple

import numpy as np

from polyapprox.errors import InvalidInputError


def check_result_buffer(result: Optional[MutableSequence[float]], stride: int) -> None:
    """Reject output buffers that cannot hold ``stride`` floating-point values."""
    if result is None:
        return
    if len(result) != stride:
        raise InvalidInputError(f"Result buffer length {len(result)} does not match stride {stride}")
    # integer arrays would truncate the interpolated values on assignment
    if isinstance(result, np.ndarray) and not np.issubdtype(result.dtype, np.floating):
        raise InvalidInputError(f"Result buffer must have a floating dtype, got {result.dtype}")


class Approximation(ABC):
    """Base class for approximations over vector-valued sample tables.

    A sample table pairs ``x_table`` (N independent values) with a flat
    ``y_table`` holding ``stride`` dependent values per independent value,
    e.g. ``[p1, q1, w1, p2, q2, w2]`` for three components at two samples.
    """

    type: str = ""

    @abstractmethod
    def required_sample_count(self, degree: float) -> float:
        """Number of samples needed for the desired degree."""
        pass

    @abstractmethod
    def interpolate(self,
                    x: float,
                    x_table: Sequence[float],
                    y_table: Sequence[float],
                    stride: int,
                    result: Optional[MutableSequence[float]] = None) -> MutableSequence[float]:
        """Interpolate the dependent values at x."""
        pass

    def _validate_table(self,
                        x_table: Sequence[float],
                        y_table: Sequence[float],
                        stride: int,
                        result: Optional[MutableSequence[float]]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Check table shapes and return them as float arrays.

        Args:
            x_table: Independent values
            y_table: Packed dependent values
            stride: Dependent values per independent value
            result: Optional output buffer

        Returns:
            Tuple of (x values, y values reshaped to N x stride)
        """
        if isinstance(stride, bool) or not isinstance(stride, (int, np.integer)):
            raise InvalidInputError(f"Stride must be an integer: {stride!r}")
        if stride <= 0:
            raise InvalidInputError(f"Stride must be positive: {stride}")
        if len(x_table) < 2:
            raise InvalidInputError(f"Need at least 2 samples for interpolation, got {len(x_table)}")
        if len(y_table) != len(x_table) * stride:
            raise InvalidInputError(
                f"y_table length {len(y_table)} does not match "
                f"{len(x_table)} samples with stride {stride}"
            )
        check_result_buffer(result, stride)

        xs = np.asarray(x_table, dtype=float)
        ys = np.asarray(y_table, dtype=float).reshape(len(x_table), stride)
        return xs, ys

    @staticmethod
    def _store(values: np.ndarray,
               result: Optional[MutableSequence[float]]) -> MutableSequence[float]:
        """Write values into the caller's buffer, or hand them back as a new array."""
        if result is None:
            return values
        result[:] = values.tolist()
        return result
