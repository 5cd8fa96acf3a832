"""
Sampled series interpolated with a configurable approximation.

A series keeps samples sorted by their independent value and, for every
query, hands the approximation only the window of samples it needs for the
configured degree.
"""
import logging
import math
from typing import List, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from polyapprox.config import ExtrapolationType, SeriesSettings
from polyapprox.errors import InvalidInputError
from polyapprox.interpolation import create_approximation
from polyapprox.interpolation.base import check_result_buffer

logger = logging.getLogger(__name__)


class SampledSeries:
    """
    Vector-valued samples keyed by a sorted independent variable.

    Typical use is a time-tagged position track: ``stride`` is 3 and each
    sample stores x, y and z at one time.
    """

    def __init__(self, stride: int, settings: Optional[SeriesSettings] = None):
        """
        Initialize an empty series.

        Args:
            stride: Dependent values stored per sample
            settings: Approximation method, degree and extrapolation mode
        """
        if isinstance(stride, bool) or not isinstance(stride, (int, np.integer)) or stride <= 0:
            raise InvalidInputError(f"Stride must be a positive integer: {stride!r}")

        self.stride = int(stride)
        self.settings = settings if settings is not None else SeriesSettings()
        self.approximation = create_approximation(self.settings.method)

        self._times: List[float] = []
        self._values: List[np.ndarray] = []

    def __len__(self) -> int:
        return len(self._times)

    @property
    def times(self) -> List[float]:
        """Independent values of all samples, ascending."""
        return list(self._times)

    @property
    def interval(self) -> Optional[Tuple[float, float]]:
        """First and last independent value, or None when empty."""
        if not self._times:
            return None
        return self._times[0], self._times[-1]

    def add_sample(self, x: float, values: Sequence[float]) -> None:
        """Insert a sample, replacing any sample already stored at x."""
        if len(values) != self.stride:
            raise InvalidInputError(
                f"Sample at {x} has {len(values)} values, expected {self.stride}"
            )

        x = float(x)
        if not math.isfinite(x):
            raise InvalidInputError(f"Sample position must be finite: {x}")
        block = np.asarray(values, dtype=float).copy()
        i = int(np.searchsorted(self._times, x))
        if i < len(self._times) and self._times[i] == x:
            logger.debug("Replacing sample at %s", x)
            self._values[i] = block
        else:
            self._times.insert(i, x)
            self._values.insert(i, block)

    def add_samples(self, xs: Sequence[float], packed_values: Sequence[float]) -> None:
        """Insert samples from a packed table with ``stride`` values per entry."""
        if len(packed_values) != len(xs) * self.stride:
            raise InvalidInputError(
                f"Packed table length {len(packed_values)} does not match "
                f"{len(xs)} samples with stride {self.stride}"
            )
        if not np.all(np.isfinite(np.asarray(xs, dtype=float))):
            raise InvalidInputError(f"Sample positions must be finite: {list(xs)}")
        for i, x in enumerate(xs):
            self.add_sample(x, packed_values[i * self.stride:(i + 1) * self.stride])

    def value_at(self, x: float,
                 result: Optional[MutableSequence[float]] = None) -> Optional[MutableSequence[float]]:
        """
        Interpolate the series at x.

        Args:
            x: Independent value to evaluate
            result: Optional buffer of length stride, overwritten and returned

        Returns:
            The interpolated values, or None when the series is empty or x is
            outside the sampled interval and extrapolation is NONE
        """
        check_result_buffer(result, self.stride)

        n = len(self._times)
        if n == 0:
            return None

        i = int(np.searchsorted(self._times, x))
        if i < n and self._times[i] == x:
            return self._copy_block(i, result)

        if x < self._times[0] or x > self._times[-1]:
            mode = self.settings.extrapolation
            if mode is ExtrapolationType.NONE:
                return None
            if mode is ExtrapolationType.HOLD or n == 1:
                return self._copy_block(0 if x < self._times[0] else n - 1, result)

        size = int(math.ceil(self.approximation.required_sample_count(self.settings.degree)))
        if size > n:
            logger.warning(
                "Series has %s samples but degree %s needs %s; reducing degree",
                n,
                self.settings.degree,
                size,
            )
            size = n

        first = min(max(i - size // 2, 0), n - size)
        logger.debug("Interpolating %s using samples [%s, %s)", x, first, first + size)

        return self.approximation.interpolate(
            x,
            self._times[first:first + size],
            np.concatenate(self._values[first:first + size]),
            self.stride,
            result,
        )

    def _copy_block(self, i: int,
                    result: Optional[MutableSequence[float]]) -> MutableSequence[float]:
        if result is None:
            return self._values[i].copy()
        result[:] = self._values[i].tolist()
        return result
