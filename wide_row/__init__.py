"""wide_row - object mapping for super column families of a wide-column store."""

from __future__ import annotations

from wide_row.core.client import StoreClient
from wide_row.core.connection import ConnectionManager, StoreConfig
from wide_row.core.enums import ConsistencyLevel, StoreBackend
from wide_row.core.exceptions import (
    AdapterError,
    ContainerError,
    ContainerPathError,
    PayloadDecodeError,
    PayloadError,
    StoreError,
    WideRowError,
)
from wide_row.core.results import StoreResult
from wide_row.core.types import (
    ColumnPath,
    SlicePredicate,
    StoredColumn,
    StoredSuperColumn,
)
from wide_row.model.column import Column
from wide_row.model.super_column import SuperColumn
from wide_row.model.super_column_family import SuperColumnFamily
from wide_row.repository.base import RowRepository

__all__ = [
    # Store
    "StoreConfig",
    "ConnectionManager",
    "StoreClient",
    "StoreResult",
    # Types
    "ColumnPath",
    "SlicePredicate",
    "StoredColumn",
    "StoredSuperColumn",
    # Model
    "Column",
    "SuperColumn",
    "SuperColumnFamily",
    # Repository
    "RowRepository",
    # Enums
    "ConsistencyLevel",
    "StoreBackend",
    # Exceptions
    "WideRowError",
    "ContainerError",
    "ContainerPathError",
    "PayloadError",
    "PayloadDecodeError",
    "StoreError",
    "AdapterError",
]
