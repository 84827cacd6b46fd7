"""Shared state of column containers.

A container is an ordered mapping of named children plus the bookkeeping
both nesting levels need: modified/loaded/deleted flags, the tri-state
auto-create policy, the error list and the path precondition.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from wide_row.core.exceptions import ContainerPathError, WideRowError
from wide_row.model.payload import encode_json

logger = logging.getLogger(__name__)

# Used when neither the call, the container nor the store config decides.
DEFAULT_AUTO_CREATE = True


class ColumnContainer:
    """Base for SuperColumnFamily and SuperColumn.

    Args:
        name: Column family or super column name.
        auto_create: True/False to fix the policy on this container, None
            to inherit it (from the parent or the store config).
    """

    def __init__(self, name: str, *, auto_create: bool | None = None) -> None:
        if not name:
            raise ValueError(f"{type(self).__name__} requires a name")
        self.name = name
        self._auto_create = auto_create
        self._columns: dict[str, Any] = {}
        self._modified = False
        self._loaded = False
        self._deleted = False
        self.errors: list[WideRowError] = []
        self.init()

    def init(self) -> None:
        """Discard all children and rebuild the declared ones."""
        self._columns = {}
        self._declare()
        self._modified = False
        self._deleted = False

    def _declare(self) -> None:
        """Hook for subclasses that declare children up front."""

    # --- resolution through the container chain ---

    @property
    def client(self) -> Any:
        return None

    @property
    def keyspace(self) -> str | None:
        return None

    @property
    def key_id(self) -> str | None:
        return None

    @property
    def column_family(self) -> str | None:
        return None

    def _inherited_auto_create(self) -> bool:
        return DEFAULT_AUTO_CREATE

    @property
    def auto_create(self) -> bool | None:
        """The policy stored on this container (None = inherited)."""
        return self._auto_create

    @auto_create.setter
    def auto_create(self, value: bool | None) -> None:
        self._auto_create = value

    def get_auto_create(self, override: bool | None = None) -> bool:
        """Effective policy: ``override``, else stored, else inherited."""
        if override is not None:
            return override
        if self._auto_create is not None:
            return self._auto_create
        return self._inherited_auto_create()

    def path_ok(self, key_id: str | None = None) -> bool:
        """Check that client, keyspace, column family and key are known.

        Records a ContainerPathError when they are not.
        """
        parts = {
            "client": self.client,
            "keyspace": self.keyspace,
            "column_family": self.column_family,
            "key_id": key_id if key_id is not None else self.key_id,
        }
        missing = [part for part, value in parts.items() if value is None or value == ""]
        if missing:
            self.register_error(ContainerPathError(self.name, missing))
            return False
        return True

    # --- state flags ---

    def _child_modified(self, child: Any) -> bool:
        return bool(child.is_modified)

    @property
    def is_modified(self) -> bool:
        return self._modified or any(self._child_modified(c) for c in self._columns.values())

    def set_modified(self, modified: bool = True) -> None:
        self._modified = modified

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def is_deleted(self) -> bool:
        return self._deleted

    def delete(self) -> None:
        """Flag the container for deletion on the next save."""
        self._deleted = True
        self._modified = True

    def reset(self) -> None:
        """Clear modified and deleted flags here and on every child."""
        self._modified = False
        self._deleted = False
        for child in self._columns.values():
            child.reset()

    # --- errors ---

    def register_error(self, error: WideRowError) -> None:
        logger.warning("%s '%s': %s", type(self).__name__, self.name, error)
        self.errors.append(error)

    @property
    def last_error(self) -> WideRowError | None:
        return self.errors[-1] if self.errors else None

    def clear_errors(self) -> None:
        self.errors.clear()

    # --- mapping access ---

    def column_names(self) -> list[str]:
        return list(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __getitem__(self, name: str) -> Any:
        return self._columns[name]

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_json(self) -> str:
        return encode_json(self.to_dict())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.column_names()!r})"
