################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for buffer parameter schema."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from vector_stats.config.buffer_params import AnalysisParams
from vector_stats.config.buffer_params import BufferParams
from vector_stats.config.buffer_params import BufferParamsError
from vector_stats.config.buffer_params import StorageParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: BufferParams = BufferParams.defaults()
    params.validate()
    assert params.storage.capacity == 11
    assert params.storage.dtype == "float64"
    assert params.analysis.outlier_deviations == 2.0


def test_invalid_storage_rejected() -> None:
    """Storage values should be checked for type and range."""
    params: BufferParams = BufferParams.defaults()
    bad_storage: list[StorageParams] = [
        StorageParams(capacity=0),
        StorageParams(capacity=True),
        StorageParams(capacity=3.0),  # type: ignore[arg-type]
        StorageParams(dtype="bool"),
        StorageParams(dtype="bogus"),
        StorageParams(active_size=0),
    ]
    for storage in bad_storage:
        with pytest.raises(BufferParamsError):
            params.replace(storage=storage).validate()


def test_invalid_analysis_rejected() -> None:
    """Analysis thresholds should be non-negative and tail positive."""
    params: BufferParams = BufferParams.defaults()
    bad_analysis: list[AnalysisParams] = [
        AnalysisParams(outlier_deviations=-1.0),
        AnalysisParams(skew_deviations=float("nan")),
        AnalysisParams(outlier_deviations=float("inf")),
        AnalysisParams(skew_deviations=float("inf")),
        AnalysisParams(settling_tail=0),
    ]
    for analysis in bad_analysis:
        with pytest.raises(BufferParamsError):
            params.replace(analysis=analysis).validate()


def test_from_dict_fills_defaults() -> None:
    """Partial dicts should override only the given keys."""
    params: BufferParams = BufferParams.from_dict(
        {"storage": {"capacity": 127, "dtype": "int16"}}
    )
    assert params.storage.capacity == 127
    assert params.storage.dtype == "int16"
    assert params.storage.active_size is None
    assert params.analysis == AnalysisParams()


def test_from_dict_rejects_unknown_keys() -> None:
    """Unknown namespaces and keys should raise."""
    bad: list[dict[str, Any]] = [
        {"persistence": {}},
        {"storage": {"size": 3}},
        {"analysis": 2.0},
    ]
    for data in bad:
        with pytest.raises(BufferParamsError):
            BufferParams.from_dict(data)


def test_nested_dict_round_trip() -> None:
    """The nested dict view should rebuild an equal parameter tree."""
    params: BufferParams = BufferParams.defaults().replace(
        analysis=dataclasses.replace(AnalysisParams(), settling_tail=5)
    )
    nested: dict[str, Any] = params.as_nested_dict()
    assert nested["analysis"]["settling_tail"] == 5
    assert BufferParams.from_dict(nested) == params
