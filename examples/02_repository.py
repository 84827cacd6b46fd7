"""
Example 02: Repository with a Declared Schema

This example demonstrates a SQLite-backed repository whose rows declare
their super columns, loaded with auto-create off so that only declared
names are read.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Optional

from wide_row import RowRepository, StoreClient, StoreConfig, SuperColumn, SuperColumnFamily


class Profile(SuperColumn):
    """Profile columns"""
    columns = ("name", "email")


class Users(SuperColumnFamily):
    """Users rows"""
    super_columns = {"profile": Profile}


class UserRepository(RowRepository[Users]):
    """Repository for Users rows"""

    def __init__(self, client: StoreClient):
        super().__init__(client, "users", Users)

    def register(self, key_id: str, name: str, email: str) -> bool:
        row = self.create(key_id)
        row.populate({"profile": {"name": name, "email": email}})
        return self.save(row)

    def find(self, key_id: str) -> Optional[Users]:
        return self.get(key_id, auto_create=False)


def main():
    db_path = Path(tempfile.mkdtemp()) / "store.db"
    config = StoreConfig(driver="sqlite", database=str(db_path), keyspace="app")

    with StoreClient.from_config(config) as client:
        repo = UserRepository(client)

        print("=== Repository ===\n")
        print(f"Register alice: {repo.register('alice', 'Alice', 'alice@example.com')}")
        print(f"Register bob: {repo.register('bob', 'Bob', 'bob@example.com')}\n")

        user = repo.find("alice")
        print(f"Found: {user.to_dict() if user else None}")
        print(f"Missing: {repo.find('carol')}\n")

        print(f"Delete bob: {repo.delete('bob')}")
        print(f"After delete: {repo.find('bob')}")

    shutil.rmtree(db_path.parent)


if __name__ == "__main__":
    main()
