"""In-process store adapter.

Rows live in nested dicts: keyspace → column family → key → super column
→ column. Consistency levels are accepted and ignored.
"""

from __future__ import annotations

from typing import Any

from wide_row.core.connection import StoreConfig
from wide_row.core.enums import ConsistencyLevel
from wide_row.core.types import (
    ColumnPath,
    SlicePredicate,
    StoredColumn,
    StoredSuperColumn,
)

Row = dict[str, dict[str, StoredColumn]]


class MemoryStore:
    """The data behind one memory adapter handle."""

    def __init__(self) -> None:
        self.keyspaces: dict[str, dict[str, dict[str, Row]]] = {}
        self.closed = False

    def row(self, keyspace: str, column_family: str, key: str) -> Row | None:
        return self.keyspaces.get(keyspace, {}).get(column_family, {}).get(key)

    def row_for_write(self, keyspace: str, column_family: str, key: str) -> Row:
        families = self.keyspaces.setdefault(keyspace, {})
        return families.setdefault(column_family, {}).setdefault(key, {})


def _survives(column: StoredColumn, timestamp: int | None) -> bool:
    return timestamp is not None and (column.timestamp or 0) > timestamp


class MemoryStoreAdapter:
    """Store adapter keeping everything in memory."""

    def connect(self, config: StoreConfig) -> MemoryStore:
        return MemoryStore()

    def close(self, handle: MemoryStore) -> None:
        handle.closed = True

    def _check(self, handle: MemoryStore) -> None:
        if handle.closed:
            raise RuntimeError("Memory store is closed")

    def get_slice(
        self,
        handle: MemoryStore,
        keyspace: str,
        key: str,
        column_family: str,
        predicate: SlicePredicate,
        consistency: ConsistencyLevel,
    ) -> list[StoredSuperColumn]:
        self._check(handle)
        row = handle.row(keyspace, column_family, key)
        if not row:
            return []
        return [
            StoredSuperColumn(name, [row[name][col] for col in sorted(row[name])])
            for name in predicate.apply(list(row))
        ]

    def multiget_slice(
        self,
        handle: MemoryStore,
        keyspace: str,
        keys: list[str],
        column_family: str,
        predicate: SlicePredicate,
        consistency: ConsistencyLevel,
    ) -> dict[str, list[StoredSuperColumn]]:
        return {
            key: self.get_slice(handle, keyspace, key, column_family, predicate, consistency)
            for key in keys
        }

    def insert(
        self,
        handle: MemoryStore,
        keyspace: str,
        key: str,
        column_family: str,
        super_column: str,
        columns: list[StoredColumn],
        consistency: ConsistencyLevel,
    ) -> None:
        self._check(handle)
        stored = handle.row_for_write(keyspace, column_family, key).setdefault(super_column, {})
        for column in columns:
            existing = stored.get(column.name)
            if existing is None or (column.timestamp or 0) >= (existing.timestamp or 0):
                stored[column.name] = column

    def remove(
        self,
        handle: MemoryStore,
        keyspace: str,
        key: str,
        path: ColumnPath,
        timestamp: int | None,
        consistency: ConsistencyLevel,
    ) -> None:
        self._check(handle)
        row = handle.row(keyspace, path.column_family, key)
        if row is None:
            return

        names = [path.super_column] if path.super_column is not None else list(row)
        for name in names:
            if name not in row:
                continue
            columns = row[name]
            targets = [path.column] if path.column is not None else list(columns)
            for column_name in targets:
                column = columns.get(column_name)
                if column is not None and not _survives(column, timestamp):
                    del columns[column_name]
            if not columns:
                del row[name]

        if not row:
            del handle.keyspaces[keyspace][path.column_family][key]

    def dump(self, handle: MemoryStore) -> dict[str, Any]:
        """Plain-dict snapshot of the whole store, for inspection."""
        return {
            keyspace: {
                family: {
                    key: {
                        name: {col: stored.value for col, stored in columns.items()}
                        for name, columns in row.items()
                    }
                    for key, row in rows.items()
                }
                for family, rows in families.items()
            }
            for keyspace, families in handle.keyspaces.items()
        }
