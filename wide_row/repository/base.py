"""Repository base class.

Thin wrapper over StoreClient + SuperColumnFamily for code that works
with whole rows of one column family.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from wide_row.core.client import StoreClient
from wide_row.core.enums import ConsistencyLevel
from wide_row.model.super_column_family import SuperColumnFamily

R = TypeVar("R", bound=SuperColumnFamily)


class RowRepository(Generic[R]):
    """Creates, loads, saves and deletes rows of ``column_family``.

    Subclasses add domain-specific lookups on top.
    """

    def __init__(
        self,
        client: StoreClient,
        column_family: str,
        row_class: type[R] = SuperColumnFamily,  # type: ignore[assignment]
        *,
        keyspace: str | None = None,
    ) -> None:
        self.client = client
        self.column_family = column_family
        self.row_class = row_class
        self.keyspace = keyspace

    def create(self, key_id: str) -> R:
        """A new, empty row bound to this repository's store."""
        return self.row_class(
            self.column_family, key_id, client=self.client, keyspace=self.keyspace
        )

    def get(
        self,
        key_id: str,
        *,
        auto_create: bool | None = None,
        consistency: ConsistencyLevel | str | None = None,
    ) -> R | None:
        """Load a row, or None when nothing could be loaded."""
        row = self.create(key_id)
        if row.load(auto_create=auto_create, consistency=consistency):
            return row
        return None

    def save(self, row: R, consistency: ConsistencyLevel | str | None = None) -> bool:
        return row.save(consistency)

    def delete(self, key_id: str, consistency: ConsistencyLevel | str | None = None) -> bool:
        """Delete the whole row without loading it first."""
        row = self.create(key_id)
        row.delete()
        return row.save(consistency)
