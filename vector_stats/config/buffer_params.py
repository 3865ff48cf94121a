################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for sample buffers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

from vector_stats.math_utils.validation import is_numeric_dtype


# Preallocated sample capacity
STORAGE_CAPACITY: int = 11
# Sample dtype name, any numpy integer or floating dtype
STORAGE_DTYPE: str = "float64"
# Active size at startup (None means the full capacity)
STORAGE_ACTIVE_SIZE: int | None = None

# Standard deviations from the mean beyond which a sample is an outlier
ANALYSIS_OUTLIER_DEVIATIONS: float = 2.0
# Standard deviations from the right-half mean that start a skew run
ANALYSIS_SKEW_DEVIATIONS: float = 2.0
# Trailing samples averaged by the settling check
ANALYSIS_SETTLING_TAIL: int = 3


class BufferParamsError(Exception):
    """Raised when buffer parameter validation fails."""


def _require_int(value: Any, name: str) -> None:
    """Require an int, rejecting bools."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise BufferParamsError(f"{name} must be an int")


def _require_positive_int(value: Any, name: str) -> None:
    """Require a positive int."""
    _require_int(value, name)
    if value <= 0:
        raise BufferParamsError(f"{name} must be positive")


def _validate_optional_positive_int(value: Any, name: str) -> None:
    """Validate an optional positive int."""
    if value is None:
        return
    _require_positive_int(value, name)


def _require_non_negative(value: Any, name: str) -> None:
    """Require a finite, non-negative real number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BufferParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise BufferParamsError(f"{name} must be finite")
    if not value >= 0.0:
        raise BufferParamsError(f"{name} must be non-negative")


def _require_numeric_dtype(value: Any, name: str) -> None:
    """Require a numpy integer or floating dtype name."""
    try:
        numeric: bool = is_numeric_dtype(value)
    except TypeError as exc:
        raise BufferParamsError(f"{name} is not a dtype: {value!r}") from exc
    if not numeric:
        raise BufferParamsError(f"{name} must be an integer or floating dtype")


@dataclass(frozen=True)
class StorageParams:
    """Preallocation parameters."""

    # Preallocated sample capacity
    capacity: int = STORAGE_CAPACITY
    # Sample dtype name
    dtype: str = STORAGE_DTYPE
    # Active size at startup (None means the full capacity)
    active_size: int | None = STORAGE_ACTIVE_SIZE


@dataclass(frozen=True)
class AnalysisParams:
    """Thresholds for the derived analyses."""

    # Outlier threshold in standard deviations
    outlier_deviations: float = ANALYSIS_OUTLIER_DEVIATIONS
    # Skew run threshold in standard deviations
    skew_deviations: float = ANALYSIS_SKEW_DEVIATIONS
    # Trailing samples averaged by the settling check
    settling_tail: int = ANALYSIS_SETTLING_TAIL


@dataclass(frozen=True)
class BufferParams:
    """Complete configuration tree for a sample buffer."""

    storage: StorageParams
    analysis: AnalysisParams

    @classmethod
    def defaults(cls) -> BufferParams:
        """Return the default parameter tree."""
        return cls(storage=StorageParams(), analysis=AnalysisParams())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BufferParams:
        """Build parameters from a nested dict, filling in defaults.

        Unknown namespaces or keys raise BufferParamsError.
        """
        namespaces: dict[str, type] = {
            "storage": StorageParams,
            "analysis": AnalysisParams,
        }
        unknown: set[str] = set(data) - set(namespaces)
        if unknown:
            raise BufferParamsError(f"Unknown namespaces: {sorted(unknown)}")

        built: dict[str, Any] = {}
        for name, params_type in namespaces.items():
            overrides: Any = data.get(name, {})
            if not isinstance(overrides, Mapping):
                raise BufferParamsError(f"{name} must be a mapping")
            allowed: set[str] = {f.name for f in fields(params_type)}
            unknown_keys: set[str] = set(overrides) - allowed
            if unknown_keys:
                raise BufferParamsError(
                    f"Unknown keys in {name}: {sorted(unknown_keys)}"
                )
            built[name] = params_type(**overrides)

        return cls(**built)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive_int(self.storage.capacity, "storage.capacity")
        _require_numeric_dtype(self.storage.dtype, "storage.dtype")
        _validate_optional_positive_int(
            self.storage.active_size, "storage.active_size"
        )

        _require_non_negative(
            self.analysis.outlier_deviations, "analysis.outlier_deviations"
        )
        _require_non_negative(self.analysis.skew_deviations, "analysis.skew_deviations")
        _require_positive_int(self.analysis.settling_tail, "analysis.settling_tail")

    def replace(self, **namespace_overrides: Any) -> BufferParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
