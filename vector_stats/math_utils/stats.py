################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Descriptive statistics kernels for 1D sample vectors.

All reductions accumulate in float64 so that narrow integer samples (such as
12-bit ADC readings stored as int16) do not overflow or lose precision.
Only median_in_place() modifies its input.
"""

from __future__ import annotations

import math
from typing import Any
from typing import Union

import numpy as np
from numpy.typing import NDArray

from .validation import as_sample_vector
from .validation import is_integral_dtype
from .validation import require_non_negative


Number = Union[int, float]


def rounded_int_mean(values: list[int]) -> int:
    """Return the mean of Python ints, ties rounded toward +inf.

    Computed as floor(total / n + 1/2) in integer arithmetic, so 64-bit
    samples stay exact.
    """
    count: int = len(values)
    if count == 0:
        raise ValueError("values must not be empty")
    return (2 * sum(values) + count) // (2 * count)


def mean(values: Any) -> float:
    """Return the arithmetic mean using a float64 accumulator."""
    data: NDArray[Any] = as_sample_vector(values, "values")
    total: float = float(np.sum(data, dtype=np.float64))
    return total / float(data.size)


def population_std_dev(values: Any) -> float:
    """Return the population standard deviation (divisor N)."""
    data: NDArray[Any] = as_sample_vector(values, "values")
    centered: NDArray[np.float64] = data.astype(np.float64) - mean(data)
    variance: float = float(np.dot(centered, centered)) / float(data.size)
    return math.sqrt(variance)


def median_in_place(values: NDArray[Any], *, presorted: bool = False) -> Number:
    """Return the median, partially reordering the array in place.

    Uses selection (numpy introselect) rather than a full sort. For an even
    count the two middle elements are combined: integer dtypes return the
    round-half-up mean, floating dtypes return the exact mean.

    Args:
        values: Sample array, reordered in place unless already sorted
        presorted: True when the array is known to be in ascending order
    """
    data: NDArray[Any] = as_sample_vector(values, "values")
    count: int = data.size
    mid_index: int = count // 2

    if count % 2 == 1:
        if not presorted:
            data.partition(mid_index)
        return data[mid_index].item()

    if not presorted:
        data.partition((mid_index - 1, mid_index))
    if is_integral_dtype(data.dtype):
        return rounded_int_mean([int(data[mid_index - 1]), int(data[mid_index])])
    lower: float = float(data[mid_index - 1])
    upper: float = float(data[mid_index])
    return (lower + upper) / 2.0


def count_outliers(values: Any, deviations: float) -> int:
    """Count samples further than `deviations` std devs from the mean."""
    data: NDArray[Any] = as_sample_vector(values, "values")
    k: float = require_non_negative(deviations, "deviations")
    samples: NDArray[np.float64] = data.astype(np.float64)
    threshold: float = k * population_std_dev(samples)
    distance: NDArray[np.float64] = np.abs(samples - mean(samples))
    return int(np.count_nonzero(distance > threshold))


def left_skew(values: Any, mid_index: int, deviations: float) -> int:
    """Return the signed length of the leading run that departs from the tail.

    The slice values[mid_index:] is the reference. Leading samples are counted
    while they lie more than `deviations` reference std devs from the
    reference mean. The count is negative when the run's mean is below the
    reference mean.
    """
    data: NDArray[Any] = as_sample_vector(values, "values")
    k: float = require_non_negative(deviations, "deviations")
    if not 0 <= mid_index < data.size:
        raise ValueError(f"mid_index must be in [0, {data.size}), got {mid_index}")

    samples: NDArray[np.float64] = data.astype(np.float64)
    reference: NDArray[np.float64] = samples[mid_index:]
    ref_mean: float = mean(reference)
    threshold: float = k * population_std_dev(reference)

    exceeds: NDArray[np.bool_] = np.abs(samples - ref_mean) > threshold
    run_length: int
    if bool(np.all(exceeds)):
        run_length = exceeds.size
    else:
        # First False marks the end of the run
        run_length = int(np.argmin(exceeds))

    if run_length == 0:
        return 0
    if mean(samples[:run_length]) < ref_mean:
        return -run_length
    return run_length


def regression_slope(values: Any) -> float:
    """Return the least-squares slope of value against 1-based position."""
    data: NDArray[Any] = as_sample_vector(values, "values")
    samples: NDArray[np.float64] = data.astype(np.float64)
    positions: NDArray[np.float64] = np.arange(1, samples.size + 1, dtype=np.float64)

    x_centered: NDArray[np.float64] = positions - float(np.mean(positions))
    y_centered: NDArray[np.float64] = samples - mean(samples)
    denominator: float = float(np.dot(x_centered, x_centered))
    if denominator == 0.0:
        return 0.0
    return float(np.dot(x_centered, y_centered)) / denominator


def settling_run(values: Any, tail: int) -> tuple[Number, list[Number]]:
    """Compare the leading samples against the mean of the last `tail`.

    Returns the tail mean (round-half-up for integer dtypes) and the leading
    samples that lie strictly below it, stopping at the first that does not.
    """
    data: NDArray[Any] = as_sample_vector(values, "values")
    if tail <= 0:
        raise ValueError("tail must be positive")
    window: int = min(tail, data.size)

    trailing: NDArray[Any] = data[data.size - window :]
    reference: Number
    if is_integral_dtype(data.dtype):
        reference = rounded_int_mean(trailing.tolist())
    else:
        reference = mean(trailing)

    leading: list[Number] = []
    for sample in data.tolist():
        if not sample < reference:
            break
        leading.append(sample)
    return reference, leading
