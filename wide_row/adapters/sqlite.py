"""SQLite adapter - wide rows in a single stdlib sqlite3 table."""

from __future__ import annotations

import sqlite3
from typing import Any

from wide_row.core.connection import StoreConfig
from wide_row.core.enums import ConsistencyLevel
from wide_row.core.types import (
    ColumnPath,
    SlicePredicate,
    StoredColumn,
    StoredSuperColumn,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS wide_columns (
    keyspace TEXT NOT NULL,
    column_family TEXT NOT NULL,
    row_key TEXT NOT NULL,
    super_column TEXT NOT NULL,
    name TEXT NOT NULL,
    value,
    timestamp INTEGER,
    PRIMARY KEY (keyspace, column_family, row_key, super_column, name)
)
"""

_SELECT_ROW = """
SELECT super_column, name, value, timestamp FROM wide_columns
WHERE keyspace = :keyspace AND column_family = :column_family AND row_key = :row_key
ORDER BY super_column, name
"""

_UPSERT = """
INSERT INTO wide_columns
    (keyspace, column_family, row_key, super_column, name, value, timestamp)
VALUES (:keyspace, :column_family, :row_key, :super_column, :name, :value, :timestamp)
ON CONFLICT (keyspace, column_family, row_key, super_column, name) DO UPDATE SET
    value = excluded.value, timestamp = excluded.timestamp
WHERE COALESCE(excluded.timestamp, 0) >= COALESCE(wide_columns.timestamp, 0)
"""


class SqliteStoreAdapter:
    """Store adapter persisting wide rows with stdlib sqlite3."""

    def connect(self, config: StoreConfig) -> sqlite3.Connection:
        conn = sqlite3.connect(config.database)
        conn.row_factory = sqlite3.Row
        if config.database != ":memory:":
            conn.execute("PRAGMA journal_mode=WAL")
        conn.execute(_SCHEMA)
        conn.commit()
        return conn

    def close(self, handle: sqlite3.Connection) -> None:
        handle.close()

    def get_slice(
        self,
        handle: sqlite3.Connection,
        keyspace: str,
        key: str,
        column_family: str,
        predicate: SlicePredicate,
        consistency: ConsistencyLevel,
    ) -> list[StoredSuperColumn]:
        cursor = handle.execute(
            _SELECT_ROW,
            {"keyspace": keyspace, "column_family": column_family, "row_key": key},
        )
        grouped: dict[str, list[StoredColumn]] = {}
        for row in cursor.fetchall():
            grouped.setdefault(row["super_column"], []).append(
                StoredColumn(row["name"], row["value"], row["timestamp"])
            )
        return [StoredSuperColumn(name, grouped[name]) for name in predicate.apply(list(grouped))]

    def multiget_slice(
        self,
        handle: sqlite3.Connection,
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
        handle: sqlite3.Connection,
        keyspace: str,
        key: str,
        column_family: str,
        super_column: str,
        columns: list[StoredColumn],
        consistency: ConsistencyLevel,
    ) -> None:
        params = [
            {
                "keyspace": keyspace,
                "column_family": column_family,
                "row_key": key,
                "super_column": super_column,
                "name": column.name,
                "value": column.value,
                "timestamp": column.timestamp,
            }
            for column in columns
        ]
        with handle:
            handle.executemany(_UPSERT, params)

    def remove(
        self,
        handle: sqlite3.Connection,
        keyspace: str,
        key: str,
        path: ColumnPath,
        timestamp: int | None,
        consistency: ConsistencyLevel,
    ) -> None:
        clauses = ["keyspace = :keyspace", "column_family = :column_family", "row_key = :row_key"]
        params: dict[str, Any] = {
            "keyspace": keyspace,
            "column_family": path.column_family,
            "row_key": key,
        }
        if path.super_column is not None:
            clauses.append("super_column = :super_column")
            params["super_column"] = path.super_column
        if path.column is not None:
            clauses.append("name = :name")
            params["name"] = path.column
        if timestamp is not None:
            clauses.append("COALESCE(timestamp, 0) <= :timestamp")
            params["timestamp"] = timestamp

        with handle:
            handle.execute(f"DELETE FROM wide_columns WHERE {' AND '.join(clauses)}", params)
