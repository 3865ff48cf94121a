################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the buffer configuration wrapper."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from vector_stats.buffer.sample_buffer import SampleBuffer
from vector_stats.buffer.sample_result import LookupStatus
from vector_stats.config.buffer_config import BufferConfig
from vector_stats.config.buffer_config import BufferConfigError
from vector_stats.config.buffer_params import AnalysisParams
from vector_stats.config.buffer_params import BufferParams
from vector_stats.config.buffer_params import StorageParams


def test_param_errors_are_wrapped() -> None:
    """Parameter errors should surface as config errors."""
    params: BufferParams = BufferParams.defaults().replace(
        storage=StorageParams(capacity=-4)
    )
    with pytest.raises(BufferConfigError):
        BufferConfig(params)


def test_infinite_deviations_rejected() -> None:
    """Thresholds the analyses cannot use should fail at construction."""
    params: BufferParams = BufferParams.defaults().replace(
        analysis=AnalysisParams(outlier_deviations=float("inf"))
    )
    with pytest.raises(BufferConfigError):
        BufferConfig(params)


def test_active_size_must_fit_capacity() -> None:
    """The startup size must not exceed the preallocated capacity."""
    params: BufferParams = BufferParams.defaults().replace(
        storage=StorageParams(capacity=5, active_size=6)
    )
    with pytest.raises(BufferConfigError):
        BufferConfig(params)


def test_create_buffer_uses_storage_params() -> None:
    """Created buffers should honor capacity, dtype and startup size."""
    config: BufferConfig = BufferConfig(
        BufferParams.from_dict(
            {"storage": {"capacity": 127, "dtype": "int16", "active_size": 31}}
        )
    )
    buffer: SampleBuffer[Any] = config.create_buffer()
    assert buffer.capacity == 127
    assert buffer.size == config.active_size() == 31
    assert buffer.dtype == np.dtype(np.int16)
    assert not buffer.buffer_full()


def test_create_buffer_defaults_to_capacity() -> None:
    """Without a startup size the buffer should span its capacity."""
    config: BufferConfig = BufferConfig(BufferParams.defaults())
    buffer: SampleBuffer[Any] = config.create_buffer()
    assert buffer.size == config.capacity() == 11
    assert buffer.dtype == np.dtype(np.float64)


def test_configured_analyses() -> None:
    """Analyses should use the configured thresholds."""
    params: BufferParams = BufferParams.defaults().replace(
        storage=StorageParams(dtype="int16"),
        analysis=AnalysisParams(
            outlier_deviations=1.0, skew_deviations=3.0, settling_tail=2
        ),
    )
    config: BufferConfig = BufferConfig(params)

    outliers: SampleBuffer[Any] = config.create_buffer()
    for value in (2791, 2082, 2082, 2084, 2084, 1367, 2084, 1377, 2084, 2793, 2083):
        outliers.add(value)
    assert config.outliers(outliers) == 4

    skewed: SampleBuffer[Any] = config.create_buffer()
    for value in (2015, 2005, 2003, 2001, 2003, 2001, 2002, 2000, 2004, 2001, 2002):
        skewed.add(value)
    assert config.left_skew(skewed).unwrap() == 1
    # Last two samples average 2001.5, rounded up to 2002
    assert config.settling(skewed).reference == 2002

    skewed.median()
    assert config.left_skew(skewed).status is LookupStatus.WRONG_MODE
