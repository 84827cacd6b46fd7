"""Store-level value types.

Frozen dataclasses exchanged between the StoreClient, the adapters and
the container model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StoredColumn:
    """A leaf column as read from or written to the store."""

    name: str
    value: Any
    timestamp: int | None = None


@dataclass(frozen=True)
class StoredSuperColumn:
    """A super column slice result: a name plus its ordered columns."""

    name: str
    columns: list[StoredColumn] = field(default_factory=list)


@dataclass(frozen=True)
class ColumnPath:
    """Delete target: a whole row of a column family, one super column,
    or a single column inside a super column."""

    column_family: str
    super_column: str | None = None
    column: str | None = None


@dataclass(frozen=True)
class SlicePredicate:
    """Selects named children of a row.

    Either an explicit list of ``column_names`` or a ``start``/``finish``
    range (inclusive, empty bound = open), limited to ``count`` entries
    when a count is given.
    """

    column_names: list[str] | None = None
    start: str = ""
    finish: str = ""
    reversed: bool = False
    count: int | None = None

    def apply(self, names: list[str]) -> list[str]:
        """Return the subset of ``names`` this predicate selects, in order."""
        if self.column_names is not None:
            wanted = set(self.column_names)
            return [name for name in sorted(names) if name in wanted]

        selected = sorted(names, reverse=self.reversed)
        if self.start:
            if self.reversed:
                selected = [n for n in selected if n <= self.start]
            else:
                selected = [n for n in selected if n >= self.start]
        if self.finish:
            if self.reversed:
                selected = [n for n in selected if n >= self.finish]
            else:
                selected = [n for n in selected if n <= self.finish]
        if self.count is not None:
            selected = selected[: self.count]
        return selected
