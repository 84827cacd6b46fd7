"""Integration tests against a SQLite file store."""

from __future__ import annotations

from pathlib import Path

import pytest

from wide_row.core.client import StoreClient
from wide_row.core.connection import StoreConfig
from wide_row.model.super_column import SuperColumn
from wide_row.model.super_column_family import SuperColumnFamily
from wide_row.repository.base import RowRepository


@pytest.fixture
def sqlite_config(tmp_path: Path) -> StoreConfig:
    return StoreConfig(driver="sqlite", database=str(tmp_path / "store.db"), keyspace="app")


class Profile(SuperColumn):
    columns = ("name", "age")


class Users(SuperColumnFamily):
    super_columns = {"profile": Profile, "settings": SuperColumn}


@pytest.mark.integration
def test_round_trip_across_clients(sqlite_config: StoreConfig) -> None:
    data = {"profile": {"name": "alice", "age": "30"}, "settings": {"theme": "dark"}}

    with StoreClient.from_config(sqlite_config) as writer:
        row = SuperColumnFamily("users", "alice", client=writer)
        assert row.populate(data)
        assert row.save()

    with StoreClient.from_config(sqlite_config) as reader:
        fresh = SuperColumnFamily("users", "alice", client=reader)
        assert fresh.load()
        assert fresh.to_dict() == data
        assert fresh.save() is False


@pytest.mark.integration
def test_update_and_delete_columns(sqlite_config: StoreConfig) -> None:
    with StoreClient.from_config(sqlite_config) as client:
        row = SuperColumnFamily("users", "alice", client=client)
        row.populate({"profile": {"name": "alice", "age": "30"}})
        assert row.save()

        profile = row.get_super("profile")
        profile["age"] = "31"
        del profile["name"]
        assert row.save()

        fresh = SuperColumnFamily("users", "alice", client=client)
        assert fresh.load()
        assert fresh.to_dict() == {"profile": {"age": "31"}}


@pytest.mark.integration
def test_declared_schema_with_auto_create_off(sqlite_config: StoreConfig) -> None:
    with StoreClient.from_config(sqlite_config) as client:
        writer = SuperColumnFamily("users", "alice", client=client)
        writer.populate(
            {
                "profile": {"name": "alice", "age": "30", "email": "a@ex.com"},
                "settings": {"theme": "dark"},
                "audit": {"created": "today"},
            }
        )
        assert writer.save()

        row = Users("users", "alice", client=client, auto_create=False)
        assert row.load()
        assert set(row.column_names()) == {"profile", "settings"}
        assert row.get_super("profile").to_dict() == {"name": "alice", "age": "30"}
        assert row.get_super("settings").to_dict() == {}


@pytest.mark.integration
def test_repository_delete(sqlite_config: StoreConfig) -> None:
    with StoreClient.from_config(sqlite_config) as client:
        repo = RowRepository(client, "users")
        row = repo.create("alice")
        row.populate('{"profile": {"name": "alice"}}')
        assert repo.save(row)
        assert repo.get("alice") is not None

        assert repo.delete("alice")
        assert repo.get("alice") is None


@pytest.mark.integration
def test_unsupported_value_is_recorded(sqlite_config: StoreConfig) -> None:
    with StoreClient.from_config(sqlite_config) as client:
        row = SuperColumnFamily("users", "alice", client=client)
        row.populate({"profile": {"tags": ["a", "b"]}})
        assert row.save() is False
        assert row.last_error.operation == "insert_super"
