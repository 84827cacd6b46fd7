"""Normalisation of populate input.

``populate`` accepts a mapping, a JSON object text, or a sequence of named
items (columns, super columns, store results). ``normalize_payload``
resolves whichever shape it was given into one ordered ``Payload`` of
tagged entries, so containers only dispatch on ``EntryKind``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

from wide_row.core.exceptions import PayloadDecodeError, PayloadError
from wide_row.core.types import StoredColumn, StoredSuperColumn
from wide_row.model.column import Column

_JSON_OBJECT: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


class EntryKind(Enum):
    CONTAINER = "container"
    COLUMN = "column"
    STORED_COLUMN = "stored_column"
    STORED_SUPER = "stored_super"
    RAW = "raw"


@dataclass(frozen=True)
class PayloadEntry:
    name: str
    kind: EntryKind
    value: Any

    def nested(self) -> Any:
        """The payload to hand to a child container for this entry."""
        if isinstance(self.value, StoredSuperColumn):
            return self.value.columns
        return self.value


@dataclass(frozen=True)
class Payload:
    entries: tuple[PayloadEntry, ...]

    def __iter__(self) -> Iterator[PayloadEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _kind_of(value: Any) -> EntryKind:
    # Imported here: container imports this module.
    from wide_row.model.container import ColumnContainer

    if isinstance(value, ColumnContainer):
        return EntryKind.CONTAINER
    if isinstance(value, Column):
        return EntryKind.COLUMN
    if isinstance(value, StoredColumn):
        return EntryKind.STORED_COLUMN
    if isinstance(value, StoredSuperColumn):
        return EntryKind.STORED_SUPER
    return EntryKind.RAW


def decode_json(container: str, text: str | bytes) -> dict[str, Any]:
    """Decode a JSON object, keeping key order."""
    try:
        return _JSON_OBJECT.validate_json(text)
    except ValidationError as e:
        raise PayloadDecodeError(container, f"not a JSON object ({e.error_count()} errors)") from e


def encode_json(data: dict[str, Any]) -> str:
    return _JSON_OBJECT.dump_json(data).decode("utf-8")


def normalize_payload(container: str, data: Any) -> Payload:
    """Resolve ``data`` into a non-empty Payload.

    Raises:
        PayloadDecodeError: ``data`` is text that is not a JSON object.
        PayloadError: ``data`` is empty or not a mapping or named sequence.
    """
    if isinstance(data, (str, bytes)):
        data = decode_json(container, data)

    if isinstance(data, Mapping):
        items = [(str(name), value) for name, value in data.items()]
    elif isinstance(data, Sequence) and all(hasattr(item, "name") for item in data):
        items = [(str(item.name), item) for item in data]
    else:
        raise PayloadError(container, f"expected a mapping, got {type(data).__name__}")

    if not items:
        raise PayloadError(container, "no entries")

    return Payload(tuple(PayloadEntry(name, _kind_of(value), value) for name, value in items))
