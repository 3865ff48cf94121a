################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for sample buffer inputs."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray


def as_sample_vector(values: Any, name: str) -> NDArray[Any]:
    """Return a non-empty 1D numeric view of the input."""
    array: NDArray[Any] = np.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {array.shape}")
    if array.size == 0:
        raise ValueError(f"{name} must not be empty")
    if not is_numeric_dtype(array.dtype):
        raise ValueError(f"{name} must hold integer or floating values")
    return array


def is_numeric_dtype(dtype: DTypeLike) -> bool:
    """Return True for integer and floating dtypes."""
    resolved: np.dtype = np.dtype(dtype)
    return bool(
        np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)
    )


def is_integral_dtype(dtype: DTypeLike) -> bool:
    """Return True for integer dtypes."""
    return bool(np.issubdtype(np.dtype(dtype), np.integer))


def require_non_negative(value: float, name: str) -> float:
    """Return the value as a float, rejecting negative or non-finite input."""
    result: float = float(value)
    if not np.isfinite(result):
        raise ValueError(f"{name} must be finite")
    if result < 0.0:
        raise ValueError(f"{name} must be non-negative")
    return result
