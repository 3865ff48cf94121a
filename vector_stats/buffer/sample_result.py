################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Lookup results returned by state-dependent buffer queries."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import Optional
from typing import TypeVar


T = TypeVar("T")


# Legacy "no value" sentinel for callers that want a plain number back
NO_VALUE: int = -1


class SampleBufferError(Exception):
    """Raised when sample buffer operations are misused."""


class LookupStatus(enum.Enum):
    """Outcome of a buffer query."""

    OK = "ok"
    OUT_OF_RANGE = "out_of_range"
    WRONG_MODE = "wrong_mode"


@dataclass(frozen=True)
class SampleResult(Generic[T]):
    """Value-or-reason result for buffer queries.

    Attributes:
        value: Query result, or None when status is not OK
        status: Whether the query succeeded, and if not, why
    """

    value: Optional[T]
    status: LookupStatus

    @classmethod
    def of(cls, value: T) -> SampleResult[T]:
        """Return a successful result."""
        return cls(value=value, status=LookupStatus.OK)

    @classmethod
    def out_of_range(cls) -> SampleResult[T]:
        """Return a result for an index outside the active buffer."""
        return cls(value=None, status=LookupStatus.OUT_OF_RANGE)

    @classmethod
    def wrong_mode(cls) -> SampleResult[T]:
        """Return a result for a query invalid in the current buffer state."""
        return cls(value=None, status=LookupStatus.WRONG_MODE)

    @property
    def ok(self) -> bool:
        """Return True if the query produced a value."""
        return self.status is LookupStatus.OK

    def value_or(self, default: Any = NO_VALUE) -> Any:
        """Return the value, or `default` when there is none."""
        if self.status is LookupStatus.OK:
            return self.value
        return default

    def unwrap(self) -> T:
        """Return the value, raising SampleBufferError when there is none."""
        if self.status is not LookupStatus.OK:
            raise SampleBufferError(f"No value available: {self.status.value}")
        return self.value  # type: ignore[return-value]
