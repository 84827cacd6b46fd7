"""Store adapter protocol.

Every adapter module MUST implement this protocol so that the
StoreClient can drive any backend through the same calls.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from wide_row.core.connection import StoreConfig
from wide_row.core.enums import ConsistencyLevel
from wide_row.core.types import (
    ColumnPath,
    SlicePredicate,
    StoredColumn,
    StoredSuperColumn,
)


@runtime_checkable
class StoreAdapter(Protocol):
    """Synchronous wide-column store adapter protocol."""

    def connect(self, config: StoreConfig) -> Any:
        """Open a handle to the store."""
        ...

    def close(self, handle: Any) -> None:
        """Release the handle."""
        ...

    def get_slice(
        self,
        handle: Any,
        keyspace: str,
        key: str,
        column_family: str,
        predicate: SlicePredicate,
        consistency: ConsistencyLevel,
    ) -> list[StoredSuperColumn]:
        """Return the super columns of one row selected by ``predicate``."""
        ...

    def multiget_slice(
        self,
        handle: Any,
        keyspace: str,
        keys: list[str],
        column_family: str,
        predicate: SlicePredicate,
        consistency: ConsistencyLevel,
    ) -> dict[str, list[StoredSuperColumn]]:
        """Return ``get_slice`` results for several keys."""
        ...

    def insert(
        self,
        handle: Any,
        keyspace: str,
        key: str,
        column_family: str,
        super_column: str,
        columns: list[StoredColumn],
        consistency: ConsistencyLevel,
    ) -> None:
        """Write columns under a super column. Newer timestamps win."""
        ...

    def remove(
        self,
        handle: Any,
        keyspace: str,
        key: str,
        path: ColumnPath,
        timestamp: int | None,
        consistency: ConsistencyLevel,
    ) -> None:
        """Delete what ``path`` addresses."""
        ...
