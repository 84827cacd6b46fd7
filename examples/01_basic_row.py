"""
Example 01: Basic Row

This example demonstrates populating a row, saving it and loading it back
with the in-memory store.
"""

from wide_row import StoreClient, StoreConfig, SuperColumn, SuperColumnFamily


def main():
    config = StoreConfig(driver="memory", keyspace="app")

    with StoreClient.from_config(config) as client:
        print("=== Basic Row ===\n")

        # Populate from nested data
        print("1. Populate and save:")
        row = SuperColumnFamily("users", "alice", client=client)
        row.populate({"profile": {"name": "alice", "age": "30"}, "settings": {"theme": "dark"}})
        print(f"   Modified: {row.is_modified}")
        print(f"   Saved: {row.save()}\n")

        # Load into a fresh row
        print("2. Load:")
        fresh = SuperColumnFamily("users", "alice", client=client)
        print(f"   Loaded: {fresh.load()}")
        print(f"   Data: {fresh.to_json()}")
        print(f"   Save without changes: {fresh.save()}\n")

        # Mutate one super column
        print("3. Update one column:")
        fresh.get_super("profile")["age"] = "31"
        print(f"   Saved: {fresh.save()}\n")

        # Attach a prebuilt super column
        print("4. Attach a super column:")
        address = SuperColumn("address")
        address["city"] = "Lisbon"
        fresh.add_super(address)
        print(f"   Saved: {fresh.save()}")
        print(f"   Names: {fresh.column_names()}\n")

        # Delete the row
        print("5. Delete:")
        fresh.delete()
        print(f"   Deleted: {fresh.save()}")
        print(f"   Load after delete: {SuperColumnFamily('users', 'alice', client=client).load()}")


if __name__ == "__main__":
    main()
