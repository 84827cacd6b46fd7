"""Repository layer - rows of one column family."""

from __future__ import annotations

from wide_row.repository.base import RowRepository

__all__ = [
    "RowRepository",
]
