"""Named sub-container of leaf columns."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Any, ClassVar

from wide_row.core.enums import ConsistencyLevel
from wide_row.core.exceptions import PayloadError
from wide_row.core.types import ColumnPath
from wide_row.model.column import Column
from wide_row.model.container import ColumnContainer
from wide_row.model.payload import EntryKind, normalize_payload

if TYPE_CHECKING:
    from wide_row.model.super_column_family import SuperColumnFamily

logger = logging.getLogger(__name__)


class SuperColumn(ColumnContainer):
    """An ordered mapping of column name to Column inside one row.

    The parent row is held through a weak reference: the SuperColumn uses
    it to find the client, keyspace, key and column family at save time
    but never keeps the row alive.

    Subclasses may declare their columns::

        class Address(SuperColumn):
            columns = ("street", "city")

    Args:
        name: Super column name.
        column_names: Extra columns to declare on this instance.
        auto_create: Policy for this instance, None to follow the parent.
    """

    columns: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        name: str,
        *,
        column_names: tuple[str, ...] | list[str] = (),
        auto_create: bool | None = None,
    ) -> None:
        self._column_names = tuple(column_names)
        self._parent_ref: weakref.ref[SuperColumnFamily] | None = None
        super().__init__(name, auto_create=auto_create)

    def _declare(self) -> None:
        for name in (*type(self).columns, *self._column_names):
            self._columns.setdefault(name, Column(name))

    def blank(self) -> SuperColumn:
        """A detached copy with the same name and column names but no values."""
        return type(self)(self.name, column_names=self.column_names(), auto_create=self._auto_create)

    # --- parent ---

    @property
    def parent(self) -> SuperColumnFamily | None:
        return self._parent_ref() if self._parent_ref is not None else None

    def set_parent(self, parent: SuperColumnFamily | None) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def client(self) -> Any:
        parent = self.parent
        return parent.client if parent is not None else None

    @property
    def keyspace(self) -> str | None:
        parent = self.parent
        return parent.keyspace if parent is not None else None

    @property
    def key_id(self) -> str | None:
        parent = self.parent
        return parent.key_id if parent is not None else None

    @property
    def column_family(self) -> str | None:
        parent = self.parent
        return parent.name if parent is not None else None

    def _inherited_auto_create(self) -> bool:
        parent = self.parent
        if parent is not None:
            return parent.get_auto_create()
        return super()._inherited_auto_create()

    # --- columns ---

    def _child_modified(self, child: Any) -> bool:
        return bool(child.modified)

    def add_column(self, name: str) -> Column:
        """Return the column called ``name``, defining it if needed."""
        if name not in self._columns:
            self._columns[name] = Column(name)
        return self._columns[name]

    def get_column(self, name: str) -> Column | None:
        return self._columns.get(name)

    def __getitem__(self, name: str) -> Any:
        return self._columns[name].value

    def __setitem__(self, name: str, value: Any) -> None:
        self.add_column(name).set_value(value)

    def __delitem__(self, name: str) -> None:
        self._columns[name].delete()

    def to_dict(self) -> dict[str, Any]:
        return {name: column.value for name, column in self._columns.items() if not column.deleted}

    # --- populate / save ---

    def populate(self, data: Any, auto_create: bool | None = None) -> bool:
        """Set column values from a mapping, JSON text or list of columns.

        Unknown names are skipped unless auto-create is on.

        Returns:
            True when no error has been recorded on this super column.
        """
        try:
            payload = normalize_payload(self.name, data)
        except PayloadError as e:
            self.register_error(e)
            return False

        create = self.get_auto_create(auto_create)
        for entry in payload:
            if not create and entry.name not in self._columns:
                logger.debug("Skipping undeclared column '%s' in '%s'", entry.name, self.name)
                continue

            if entry.kind in (EntryKind.CONTAINER, EntryKind.STORED_SUPER):
                self.register_error(
                    PayloadError(self.name, f"'{entry.name}' is a container, expected a column")
                )
                break
            if entry.kind is EntryKind.COLUMN:
                self._columns[entry.name] = entry.value
                entry.value.modified = True
            elif entry.kind is EntryKind.STORED_COLUMN:
                self.add_column(entry.name).set_value(entry.value.value, entry.value.timestamp)
            else:
                self.add_column(entry.name).set_value(entry.value)

        return not self.errors

    def save(self, consistency: ConsistencyLevel | str | None = None) -> bool:
        """Write modified columns and remove deleted ones.

        Nothing pending counts as success.
        """
        if not self.is_modified:
            return True
        if not self.path_ok():
            return False

        client = self.client
        keyspace, key, family = self.keyspace, self.key_id, self.column_family

        if self._deleted:
            result = client.delete_column_path(
                keyspace, key, ColumnPath(family, super_column=self.name), consistency=consistency
            )
            if not result.ok:
                self.register_error(result.error)
                return False
            self.init()
            return True

        removed = [name for name, column in self._columns.items() if column.deleted]
        for name in removed:
            result = client.delete_column_path(
                keyspace, key, ColumnPath(family, self.name, name), consistency=consistency
            )
            if not result.ok:
                self.register_error(result.error)
                return False

        pending = [c.to_stored() for c in self._columns.values() if c.modified and not c.deleted]
        if pending:
            result = client.insert_super(
                keyspace, key, family, self.name, pending, consistency=consistency
            )
            if not result.ok:
                self.register_error(result.error)
                return False

        for name in removed:
            del self._columns[name]
        self.reset()
        return True
