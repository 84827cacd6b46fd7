"""Store client.

The StoreClient resolves consistency levels, runs slice reads, super
column writes and column-path deletes through the adapter, and wraps
every outcome in a StoreResult. Adapter exceptions never escape: they
come back as the result's StoreError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from wide_row.core.connection import ConnectionManager, StoreConfig
from wide_row.core.enums import ConsistencyLevel
from wide_row.core.exceptions import StoreError
from wide_row.core.results import StoreResult
from wide_row.core.types import (
    ColumnPath,
    SlicePredicate,
    StoredColumn,
    StoredSuperColumn,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreClient:
    """Synchronous wide-column store client."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager

    @classmethod
    def from_config(cls, config: StoreConfig) -> StoreClient:
        """Create a StoreClient from a StoreConfig.

        Args:
            config: StoreConfig instance

        Returns:
            StoreClient instance
        """
        return cls(ConnectionManager(config))

    @property
    def config(self) -> StoreConfig:
        return self._connection_manager.config

    @property
    def adapter(self) -> Any:
        return self._connection_manager.adapter

    def __enter__(self) -> StoreClient:
        self._connection_manager.open()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._connection_manager.close()

    def resolve_consistency(
        self, level: ConsistencyLevel | str | None = None
    ) -> ConsistencyLevel:
        """Return ``level`` as a ConsistencyLevel, or the configured default."""
        if level is None:
            return self.config.consistency
        return ConsistencyLevel(level)

    def _run(self, operation: str, call: Callable[[Any], T]) -> StoreResult[T]:
        # Opening the handle happens inside the try: connect failures are
        # store failures too.
        try:
            with self._connection_manager.get_connection() as handle:
                value = call(handle)
        except Exception as e:
            error = StoreError(operation, str(e))
            logger.warning("%s", error)
            return StoreResult.failure(error)
        return StoreResult.success(value)

    def get_slice(
        self,
        keyspace: str,
        key: str,
        column_family: str,
        predicate: SlicePredicate | None = None,
        consistency: ConsistencyLevel | str | None = None,
    ) -> StoreResult[list[StoredSuperColumn]]:
        """Read the super columns of one row, optionally narrowed by ``predicate``."""
        level = self.resolve_consistency(consistency)
        predicate = predicate or SlicePredicate()
        logger.debug("get_slice %s/%s[%s] at %s", keyspace, column_family, key, level.value)
        return self._run(
            "get_slice",
            lambda handle: self.adapter.get_slice(
                handle, keyspace, key, column_family, predicate, level
            ),
        )

    def get_slice_multi(
        self,
        keyspace: str,
        keys: list[str],
        column_family: str,
        column_names: list[str] | None = None,
        predicate: SlicePredicate | None = None,
        consistency: ConsistencyLevel | str | None = None,
    ) -> StoreResult[dict[str, list[StoredSuperColumn]]]:
        """Read several rows at once. ``column_names`` takes precedence over
        ``predicate``. Every requested key is present in the result."""
        level = self.resolve_consistency(consistency)
        if column_names is not None:
            predicate = SlicePredicate(column_names=list(column_names))
        predicate = predicate or SlicePredicate()
        logger.debug(
            "get_slice_multi %s/%s%s at %s", keyspace, column_family, keys, level.value
        )

        def call(handle: Any) -> dict[str, list[StoredSuperColumn]]:
            rows = self.adapter.multiget_slice(
                handle, keyspace, list(keys), column_family, predicate, level
            )
            return {key: rows.get(key, []) for key in keys}

        return self._run("get_slice_multi", call)

    def insert_super(
        self,
        keyspace: str,
        key: str,
        column_family: str,
        super_column: str,
        columns: list[StoredColumn],
        consistency: ConsistencyLevel | str | None = None,
    ) -> StoreResult[None]:
        """Write ``columns`` under one super column of a row."""
        level = self.resolve_consistency(consistency)
        logger.debug(
            "insert_super %s/%s[%s][%s] (%d columns) at %s",
            keyspace,
            column_family,
            key,
            super_column,
            len(columns),
            level.value,
        )
        return self._run(
            "insert_super",
            lambda handle: self.adapter.insert(
                handle, keyspace, key, column_family, super_column, columns, level
            ),
        )

    def delete_column_path(
        self,
        keyspace: str,
        key: str,
        path: ColumnPath,
        timestamp: int | None = None,
        consistency: ConsistencyLevel | str | None = None,
    ) -> StoreResult[None]:
        """Delete a row, a super column or a single column.

        With a ``timestamp`` only values written at or before it are removed.
        """
        level = self.resolve_consistency(consistency)
        logger.debug("delete_column_path %s[%s] %s at %s", keyspace, key, path, level.value)
        return self._run(
            "delete_column_path",
            lambda handle: self.adapter.remove(handle, keyspace, key, path, timestamp, level),
        )
