################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-capacity sample buffer with on-demand descriptive statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import TypeVar

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from vector_stats.buffer.buffer_state import BufferState
from vector_stats.buffer.sample_result import SampleBufferError
from vector_stats.buffer.sample_result import SampleResult
from vector_stats.math_utils import stats
from vector_stats.math_utils.validation import is_integral_dtype
from vector_stats.math_utils.validation import is_numeric_dtype


_LOG: logging.Logger = logging.getLogger(__name__)


T = TypeVar("T", int, float)


# Default number of standard deviations for outlier and skew detection
DEFAULT_DEVIATIONS: float = 2.0

# Default number of trailing samples used by the settling check
DEFAULT_SETTLING_TAIL: int = 3


@dataclass(frozen=True)
class SettlingReport:
    """Leading samples that have not yet reached the trailing level.

    Attributes:
        reference: Mean of the trailing samples, rounded for integer buffers
        leading: Leading samples strictly below the reference, in order
    """

    reference: float | int
    leading: list[float | int]

    @property
    def settled(self) -> bool:
        """Return True when no leading sample is below the reference."""
        return not self.leading


class SampleBuffer(Generic[T]):
    """Preallocated buffer of numeric samples with batch statistics.

    Samples are written at a cursor that wraps once the active size is
    reached, marking the buffer full. Statistics are computed from the whole
    active store on each call. median() and get_sorted_element() reorder the
    store, after which insertion-order queries report WRONG_MODE until a new
    fill cycle completes.
    """

    def __init__(self, capacity: int, dtype: DTypeLike = np.float64) -> None:
        """Allocate storage for `capacity` samples of the given dtype."""
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise SampleBufferError("Capacity must be an int")
        if capacity <= 0:
            raise SampleBufferError("Capacity must be positive")
        try:
            resolved: np.dtype = np.dtype(dtype)
        except TypeError as exc:
            raise SampleBufferError(f"Invalid dtype: {dtype!r}") from exc
        if not is_numeric_dtype(resolved):
            raise SampleBufferError(
                f"dtype must be integer or floating, got {resolved}"
            )

        self._capacity: int = int(capacity)
        self._storage: NDArray[Any] = np.zeros(self._capacity, dtype=resolved)
        self._size: int = self._capacity
        self._mid_index: int = self._size // 2
        self._odd_parity: bool = self._size % 2 == 1
        self._cursor: int = 0
        self._state: BufferState = BufferState.FILLING

    def __len__(self) -> int:
        """Return the active size."""
        return self._size

    def __repr__(self) -> str:
        return (
            f"SampleBuffer(size={self._size}, capacity={self._capacity}, "
            f"dtype={self._storage.dtype}, state={self._state.name})"
        )

    @property
    def capacity(self) -> int:
        """Return the preallocated capacity."""
        return self._capacity

    @property
    def size(self) -> int:
        """Return the active size."""
        return self._size

    @property
    def dtype(self) -> np.dtype:
        """Return the sample dtype."""
        return self._storage.dtype

    @property
    def is_integral(self) -> bool:
        """Return True when samples are stored as integers."""
        return is_integral_dtype(self._storage.dtype)

    @property
    def cursor(self) -> int:
        """Return the index the next sample will be written to."""
        return self._cursor

    @property
    def mid_index(self) -> int:
        """Return size // 2."""
        return self._mid_index

    @property
    def odd_parity(self) -> bool:
        """Return True when the active size is odd."""
        return self._odd_parity

    @property
    def state(self) -> BufferState:
        """Return the current fill and ordering state."""
        return self._state

    @property
    def is_full(self) -> bool:
        return self._state.full

    @property
    def is_sorted(self) -> bool:
        return self._state.sorted

    @property
    def is_ordered(self) -> bool:
        return self._state.ordered

    @property
    def _active(self) -> NDArray[Any]:
        # View of the active slots, never a copy
        return self._storage[: self._size]

    ############################################################################
    # Mutation
    ############################################################################

    def resize(self, new_size: int) -> bool:
        """Change the active size within capacity and zero the buffer.

        Requests larger than the capacity, or smaller than one, are ignored
        and leave the buffer untouched.

        Returns:
            True if the buffer was resized
        """
        if new_size > self._capacity or new_size < 1:
            _LOG.debug(
                "Ignoring resize to %s (capacity %s)", new_size, self._capacity
            )
            return False

        self._size = int(new_size)
        self._mid_index = self._size // 2
        self._odd_parity = self._size % 2 == 1
        self.zero()
        return True

    def zero(self) -> None:
        """Fill the active slots with zero and restart the fill cycle."""
        self._active.fill(0)
        self._cursor = 0
        self._state = BufferState.FILLING

    def _coerce(self, value: T) -> Any:
        # Out-of-range integers wrap like a C cast rather than raising
        return np.asarray(value).astype(self._storage.dtype)

    def add(self, value: T) -> None:
        """Write a sample at the cursor, wrapping and marking full at the end.

        Writing to a full buffer overwrites from index 0 onward. Values are
        cast to the buffer dtype, so integers outside its range wrap.
        """
        self._storage[self._cursor] = self._coerce(value)
        if self._cursor < self._size - 1:
            self._cursor += 1
            self._state = self._state.after_write()
        else:
            self._cursor = 0
            self._state = self._state.after_wrap()
            _LOG.debug("Fill cycle complete after %s samples", self._size)

    def fill_buffer(self, value: T) -> None:
        """Set every active slot to `value` and mark the buffer full."""
        self._active.fill(self._coerce(value))
        self._cursor = 0
        self._state = BufferState.FULL

    def buffer_full(self) -> bool:
        """Return True once a fill cycle has completed."""
        return self._state.full

    def set_buffer_full_false(self) -> None:
        """Restart the fill cycle without zeroing memory."""
        self._cursor = 0
        self._state = BufferState.CONSUMED

    ############################################################################
    # Statistics
    ############################################################################

    def median(self) -> T:
        """Return the median, partially reordering the buffer.

        Odd sizes are cheaper since only one selection pass is needed. The
        buffer is no longer full or in insertion order afterwards.
        """
        result: Any = stats.median_in_place(
            self._active, presorted=self._state.sorted
        )
        self._state = self._state.after_median()
        return result  # type: ignore[no-any-return]

    def get_average(self) -> float:
        """Return the arithmetic mean of the active samples."""
        return stats.mean(self._active)

    def get_std_dev(self) -> float:
        """Return the population standard deviation of the active samples."""
        return stats.population_std_dev(self._active)

    def get_outliers(self, deviations: float = DEFAULT_DEVIATIONS) -> int:
        """Count samples more than `deviations` std devs from the mean."""
        return stats.count_outliers(self._active, deviations)

    def get_left_skew(
        self, deviations: float = DEFAULT_DEVIATIONS
    ) -> SampleResult[int]:
        """Return the signed length of the leading run off the right-half level.

        Positive when the run lies above the right-half mean, negative when
        below. Requires insertion order.
        """
        if not self._state.ordered:
            return SampleResult.wrong_mode()
        return SampleResult.of(
            stats.left_skew(self._active, self._mid_index, deviations)
        )

    def get_slope(self) -> SampleResult[float]:
        """Return the least-squares slope over sample position.

        Requires insertion order.
        """
        if not self._state.ordered:
            return SampleResult.wrong_mode()
        return SampleResult.of(stats.regression_slope(self._active))

    def compare_first_last(self, tail: int = DEFAULT_SETTLING_TAIL) -> SettlingReport:
        """Compare the leading samples with the mean of the last `tail`.

        Useful for tuning settle delays, e.g. capacitor charge time before an
        ADC read: a settled buffer has no leading samples below the trailing
        level.
        """
        reference, leading = stats.settling_run(self._active, tail)
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("%s --> %s", reference, " ".join(str(v) for v in leading))
        return SettlingReport(reference=reference, leading=leading)

    ############################################################################
    # Element access
    ############################################################################

    def get_element(self, index: int) -> SampleResult[T]:
        """Return the sample at `index` in insertion order.

        Reports WRONG_MODE after the buffer was sorted or partitioned.
        """
        if not self._state.ordered:
            return SampleResult.wrong_mode()
        if not 0 <= index < self._size:
            return SampleResult.out_of_range()
        return SampleResult.of(self._storage[index].item())

    def get_sorted_element(self, index: int) -> SampleResult[T]:
        """Return the sample at `index` in ascending order.

        Sorts the buffer on the first call after any write.
        """
        if not self._state.sorted:
            self._active.sort()
            self._state = self._state.after_sort()
        if not 0 <= index < self._size:
            return SampleResult.out_of_range()
        return SampleResult.of(self._storage[index].item())

    def elements(self) -> list[T]:
        """Return a copy of the active samples in storage order."""
        return self._active.tolist()  # type: ignore[no-any-return]
