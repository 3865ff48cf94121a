################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for sample buffers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from vector_stats.buffer.sample_buffer import SampleBuffer
from vector_stats.buffer.sample_buffer import SettlingReport
from vector_stats.buffer.sample_result import SampleResult

from .buffer_params import BufferParams
from .buffer_params import BufferParamsError


_LOG: logging.Logger = logging.getLogger(__name__)


class BufferConfigError(Exception):
    """Raised when buffer configuration validation fails."""


@dataclass(frozen=True)
class BufferConfig:
    """Convenience wrapper around buffer parameters."""

    params: BufferParams

    def __init__(self, params: BufferParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except BufferParamsError as exc:
            raise BufferConfigError(str(exc)) from exc

        active_size: int | None = self.params.storage.active_size
        if active_size is not None and active_size > self.params.storage.capacity:
            raise BufferConfigError("storage.active_size must not exceed capacity")

    def capacity(self) -> int:
        """Return the configured capacity."""
        return self.params.storage.capacity

    def active_size(self) -> int:
        """Return the configured startup size."""
        if self.params.storage.active_size is None:
            return self.params.storage.capacity
        return self.params.storage.active_size

    def create_buffer(self) -> SampleBuffer[Any]:
        """Return a new zeroed buffer sized by this configuration."""
        buffer: SampleBuffer[Any] = SampleBuffer(
            self.params.storage.capacity, dtype=self.params.storage.dtype
        )
        if self.active_size() != buffer.size:
            buffer.resize(self.active_size())
        _LOG.debug("Created %r", buffer)
        return buffer

    def outliers(self, buffer: SampleBuffer[Any]) -> int:
        """Count outliers using the configured threshold."""
        return buffer.get_outliers(self.params.analysis.outlier_deviations)

    def left_skew(self, buffer: SampleBuffer[Any]) -> SampleResult[int]:
        """Return the left skew using the configured threshold."""
        return buffer.get_left_skew(self.params.analysis.skew_deviations)

    def settling(self, buffer: SampleBuffer[Any]) -> SettlingReport:
        """Run the settling check using the configured tail length."""
        return buffer.compare_first_last(self.params.analysis.settling_tail)
