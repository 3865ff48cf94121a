################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fill and ordering state of a sample buffer."""

from __future__ import annotations

import enum


class BufferState(enum.Enum):
    """Combined fullness and ordering state of a SampleBuffer.

    Each member carries the (full, sorted, ordered) flags it stands for, so
    combinations such as sorted-and-ordered cannot be represented.
    """

    # Accepting writes, contents in insertion order
    FILLING = (False, False, True)

    # Fill cycle complete, contents in insertion order
    FULL = (True, False, True)

    # Contents reordered by median selection or discarded for overwrite
    CONSUMED = (False, False, False)

    # Contents in ascending order, batch already consumed
    SORTED = (False, True, False)

    # Contents in ascending order, batch not yet consumed
    FULL_SORTED = (True, True, False)

    @property
    def full(self) -> bool:
        """Return True when a fill cycle has completed."""
        return self.value[0]

    @property
    def sorted(self) -> bool:
        """Return True when the contents are in ascending order."""
        return self.value[1]

    @property
    def ordered(self) -> bool:
        """Return True when the contents reflect insertion order."""
        return self.value[2]

    def after_write(self) -> BufferState:
        """Return the state after a write that does not complete the cycle."""
        if self.ordered:
            return BufferState.FILLING
        return BufferState.CONSUMED

    def after_wrap(self) -> BufferState:
        """Return the state after a write that completes the fill cycle."""
        return BufferState.FULL

    def after_sort(self) -> BufferState:
        """Return the state after a full ascending sort."""
        if self.full:
            return BufferState.FULL_SORTED
        return BufferState.SORTED

    def after_median(self) -> BufferState:
        """Return the state after the median has been extracted."""
        if self.sorted:
            return BufferState.SORTED
        return BufferState.CONSUMED
