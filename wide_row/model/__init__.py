"""Container model - rows, super columns and columns."""

from __future__ import annotations

from wide_row.model.column import Column
from wide_row.model.container import ColumnContainer
from wide_row.model.payload import EntryKind, Payload, PayloadEntry, normalize_payload
from wide_row.model.super_column import SuperColumn
from wide_row.model.super_column_family import SuperColumnFamily

__all__ = [
    "Column",
    "ColumnContainer",
    "SuperColumn",
    "SuperColumnFamily",
    "EntryKind",
    "Payload",
    "PayloadEntry",
    "normalize_payload",
]
