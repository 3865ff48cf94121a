################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-capacity numeric sample buffers with descriptive statistics."""

from vector_stats.buffer import NO_VALUE
from vector_stats.buffer import BufferState
from vector_stats.buffer import LookupStatus
from vector_stats.buffer import SampleBuffer
from vector_stats.buffer import SampleBufferError
from vector_stats.buffer import SampleResult
from vector_stats.buffer import SettlingReport
from vector_stats.config import BufferConfig
from vector_stats.config import BufferConfigError
from vector_stats.config import BufferParams
from vector_stats.config import BufferParamsError


__all__ = [
    "NO_VALUE",
    "BufferConfig",
    "BufferConfigError",
    "BufferParams",
    "BufferParamsError",
    "BufferState",
    "LookupStatus",
    "SampleBuffer",
    "SampleBufferError",
    "SampleResult",
    "SettlingReport",
]
