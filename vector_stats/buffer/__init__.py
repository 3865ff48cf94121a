################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from vector_stats.buffer.buffer_state import BufferState
from vector_stats.buffer.sample_buffer import SampleBuffer
from vector_stats.buffer.sample_buffer import SettlingReport
from vector_stats.buffer.sample_result import NO_VALUE
from vector_stats.buffer.sample_result import LookupStatus
from vector_stats.buffer.sample_result import SampleBufferError
from vector_stats.buffer.sample_result import SampleResult


__all__ = [
    "NO_VALUE",
    "BufferState",
    "LookupStatus",
    "SampleBuffer",
    "SampleBufferError",
    "SampleResult",
    "SettlingReport",
]
