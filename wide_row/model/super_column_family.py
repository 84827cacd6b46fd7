"""Row container: one row of a super column family."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from wide_row.core.enums import ConsistencyLevel
from wide_row.core.exceptions import PayloadError
from wide_row.core.types import ColumnPath
from wide_row.model.container import ColumnContainer
from wide_row.model.payload import EntryKind, normalize_payload
from wide_row.model.super_column import SuperColumn

logger = logging.getLogger(__name__)


class SuperColumnFamily(ColumnContainer):
    """A row: an ordered mapping of super column name to SuperColumn.

    Subclasses may declare the super columns every row carries; they are
    rebuilt by ``init()``::

        class Users(SuperColumnFamily):
            super_columns = {"profile": Profile, "settings": SuperColumn}

    Args:
        name: Column family name in the store.
        key_id: Row key.
        client: StoreClient used by save and load.
        keyspace: Keyspace, defaults to the client config's keyspace.
        auto_create: Policy for this row, None to follow the client config.
    """

    super_columns: ClassVar[dict[str, type[SuperColumn]]] = {}

    def __init__(
        self,
        name: str,
        key_id: str | None = None,
        *,
        client: Any = None,
        keyspace: str | None = None,
        auto_create: bool | None = None,
    ) -> None:
        self._client = client
        self._keyspace = keyspace
        self._key_id = key_id
        super().__init__(name, auto_create=auto_create)

    def _declare(self) -> None:
        for name, super_class in self.super_columns.items():
            self.add_super(super_class(name))

    @property
    def client(self) -> Any:
        return self._client

    @property
    def keyspace(self) -> str | None:
        if self._keyspace is not None:
            return self._keyspace
        return self._client.config.keyspace if self._client is not None else None

    @keyspace.setter
    def keyspace(self, value: str | None) -> None:
        self._keyspace = value

    @property
    def key_id(self) -> str | None:
        return self._key_id

    @key_id.setter
    def key_id(self, value: str | None) -> None:
        self._key_id = value

    @property
    def column_family(self) -> str | None:
        return self.name

    def _inherited_auto_create(self) -> bool:
        if self._client is not None:
            return bool(self._client.config.auto_create)
        return super()._inherited_auto_create()

    # --- attachment ---

    def add_super(self, super_column: SuperColumn) -> SuperColumn:
        """Attach ``super_column`` under its own name, replacing any previous one."""
        super_column.set_parent(self)
        self._columns[super_column.name] = super_column
        self._modified = True
        return self.get_super(super_column.name)  # type: ignore[return-value]

    def add_column(self, name: str) -> SuperColumn:
        """Return the super column called ``name``, creating an empty one if needed."""
        if name not in self._columns:
            self.add_super(SuperColumn(name))
        return self._columns[name]

    def get_super(self, name: str) -> SuperColumn | None:
        return self._columns.get(name)

    def to_dict(self) -> dict[str, Any]:
        return {name: super_column.to_dict() for name, super_column in self._columns.items()}

    # --- save ---

    def save(self, consistency: ConsistencyLevel | str | None = None) -> bool:
        """Delete the row, or save each super column in order.

        Returns False without touching the store when nothing is modified.
        Stops at the first super column that fails; earlier ones stay written.
        """
        if not self.is_modified:
            return False
        if not self.path_ok():
            return False

        if self._deleted:
            result = self._client.delete_column_path(
                self.keyspace, self._key_id, ColumnPath(self.name), consistency=consistency
            )
            if not result.ok:
                self.register_error(result.error)
                return False
            logger.debug("Deleted row '%s' from '%s'", self._key_id, self.name)
            self.init()
            self._loaded = False
            return True

        for super_column in self._columns.values():
            if not super_column.save(consistency):
                if super_column.last_error is not None:
                    self.register_error(super_column.last_error)
                return False

        self._modified = False
        logger.debug("Saved row '%s' of '%s'", self._key_id, self.name)
        return True

    # --- load ---

    def _fresh_super(self, name: str, previous: SuperColumn | None) -> SuperColumn:
        declared = self.super_columns.get(name)
        if declared is not None:
            return declared(name)
        if previous is not None:
            return previous.blank()
        return SuperColumn(name)

    def load(
        self,
        key_id: str | None = None,
        auto_create: bool | None = None,
        consistency: ConsistencyLevel | str | None = None,
    ) -> bool:
        """Replace the row's super columns with what the store holds for ``key_id``.

        With auto-create on the whole row is read; otherwise only the super
        columns currently defined on this row are requested and kept.

        Returns:
            True when at least one super column was loaded without error.
        """
        if key_id is None:
            key_id = self._key_id

        self._loaded = False
        if not self.path_ok(key_id):
            return False

        create = self.get_auto_create(auto_create)
        if create:
            requested = None
            result = self._client.get_slice(
                self.keyspace, key_id, self.name, consistency=consistency
            )
        else:
            requested = self.column_names()
            result = self._client.get_slice_multi(
                self.keyspace, [key_id], self.name, requested, consistency=consistency
            )

        if not result.ok:
            self.register_error(result.error)
            return False
        slices = result.value if requested is None else result.value.get(key_id, [])

        previous = dict(self._columns)
        self.init()
        for stored in slices:
            if requested is not None and stored.name not in requested:
                continue
            super_column = self.add_super(self._fresh_super(stored.name, previous.get(stored.name)))
            if super_column.populate(stored.columns, create):
                self._loaded = True
            else:
                if super_column.last_error is not None:
                    self.register_error(super_column.last_error)
                self._loaded = False
                break

        if self._loaded:
            self._key_id = key_id
            self.reset()
        logger.debug("Load of row '%s' from '%s': loaded=%s", key_id, self.name, self._loaded)
        return self._loaded

    # --- populate ---

    def populate(self, data: Any, auto_create: bool | None = None) -> bool:
        """Fill super columns from nested data.

        ``data`` may be a mapping of super column name to a mapping of
        columns (or to a SuperColumn), the same as JSON text, or a list of
        SuperColumns or store slice results. Unknown names are skipped
        unless auto-create is on.

        Returns:
            True when no error has been recorded on this row.
        """
        try:
            payload = normalize_payload(self.name, data)
        except PayloadError as e:
            self.register_error(e)
            return False

        create = self.get_auto_create(auto_create)
        for entry in payload:
            if not create and entry.name not in self._columns:
                logger.debug("Skipping undeclared super column '%s' in '%s'", entry.name, self.name)
                continue

            if entry.kind is EntryKind.CONTAINER:
                if not isinstance(entry.value, SuperColumn):
                    self.register_error(
                        PayloadError(self.name, f"'{entry.name}' is not a super column")
                    )
                    break
                if entry.value.name != entry.name:
                    self.register_error(
                        PayloadError(
                            self.name,
                            f"'{entry.name}' holds super column '{entry.value.name}'",
                        )
                    )
                    break
                entry.value.set_parent(self)
                self._columns[entry.name] = entry.value
                self._modified = True
                continue

            super_column = self.add_column(entry.name)
            if not super_column.populate(entry.nested(), create):
                self.register_error(
                    super_column.last_error or PayloadError(self.name, f"'{entry.name}' failed")
                )
                break

        return not self.errors
