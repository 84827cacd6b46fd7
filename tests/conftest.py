"""Shared test fixtures."""

from __future__ import annotations

from contextlib import ExitStack
from unittest.mock import MagicMock, patch

import pytest

from wide_row.core.client import StoreClient
from wide_row.core.connection import StoreConfig

STORE_METHODS = ("get_slice", "get_slice_multi", "insert_super", "delete_column_path")


class StoreCalls:
    """Spies on every StoreClient method that reaches the store."""

    def __init__(self, spies: dict[str, MagicMock]) -> None:
        self._spies = spies

    def __getattr__(self, name: str) -> MagicMock:
        try:
            return self._spies[name]
        except KeyError:
            raise AttributeError(name) from None

    @property
    def total(self) -> int:
        return sum(spy.call_count for spy in self._spies.values())

    def reset(self) -> None:
        for spy in self._spies.values():
            spy.reset_mock()


@pytest.fixture
def store_config() -> StoreConfig:
    """In-memory store with a default keyspace."""
    return StoreConfig(driver="memory", keyspace="app")


@pytest.fixture
def client(store_config: StoreConfig):
    """StoreClient over the in-memory adapter."""
    with StoreClient.from_config(store_config) as store_client:
        yield store_client


@pytest.fixture
def store_calls(client: StoreClient):
    """Count the store calls made through ``client``.

    Usage:
        row.save()
        assert store_calls.total == 0
    """
    with ExitStack() as stack:
        spies = {
            name: stack.enter_context(patch.object(client, name, wraps=getattr(client, name)))
            for name in STORE_METHODS
        }
        yield StoreCalls(spies)
