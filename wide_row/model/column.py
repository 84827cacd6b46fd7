"""Leaf column."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from wide_row.core.types import StoredColumn


def make_timestamp() -> int:
    """Current time in microseconds, the store's timestamp resolution."""
    return time.time_ns() // 1000


@dataclass
class Column:
    """A named value owned by exactly one SuperColumn."""

    name: str
    value: Any = None
    timestamp: int | None = None
    modified: bool = False
    deleted: bool = False

    def set_value(self, value: Any, timestamp: int | None = None) -> None:
        """Assign a value and stamp it. Marks the column modified."""
        self.value = value
        self.timestamp = timestamp if timestamp is not None else make_timestamp()
        self.deleted = False
        self.modified = True

    def delete(self) -> None:
        """Flag the column for removal on the next save."""
        self.deleted = True
        self.modified = True

    def reset(self) -> None:
        self.modified = False
        self.deleted = False

    def to_stored(self) -> StoredColumn:
        return StoredColumn(
            self.name,
            self.value,
            self.timestamp if self.timestamp is not None else make_timestamp(),
        )
