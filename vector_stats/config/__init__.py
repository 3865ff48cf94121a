################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from vector_stats.config.buffer_config import BufferConfig
from vector_stats.config.buffer_config import BufferConfigError
from vector_stats.config.buffer_params import AnalysisParams
from vector_stats.config.buffer_params import BufferParams
from vector_stats.config.buffer_params import BufferParamsError
from vector_stats.config.buffer_params import StorageParams


__all__ = [
    "AnalysisParams",
    "BufferConfig",
    "BufferConfigError",
    "BufferParams",
    "BufferParamsError",
    "StorageParams",
]
