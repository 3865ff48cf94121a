################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for buffer lookup results."""

from __future__ import annotations

import pytest

from vector_stats.buffer.sample_result import NO_VALUE
from vector_stats.buffer.sample_result import LookupStatus
from vector_stats.buffer.sample_result import SampleBufferError
from vector_stats.buffer.sample_result import SampleResult


def test_ok_result() -> None:
    """Ensure successful results expose their value."""
    result: SampleResult[int] = SampleResult.of(0)
    assert result.ok
    assert result.status is LookupStatus.OK
    assert result.value_or() == 0
    assert result.unwrap() == 0


def test_failed_results_use_sentinel() -> None:
    """Ensure failed results fall back to the legacy sentinel."""
    for result in (SampleResult.out_of_range(), SampleResult.wrong_mode()):
        assert not result.ok
        assert result.value is None
        assert result.value_or() == NO_VALUE == -1
        assert result.value_or(None) is None


def test_unwrap_failure_raises() -> None:
    """Ensure unwrapping a failed result raises with the reason."""
    with pytest.raises(SampleBufferError, match="wrong_mode"):
        SampleResult.wrong_mode().unwrap()
