"""Structured results returned by every StoreClient call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from wide_row.core.exceptions import StoreError

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either a value or the StoreError that prevented producing it."""

    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> StoreResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> StoreResult[T]:
        return cls(error=error)
