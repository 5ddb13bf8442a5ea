"""Single-table CRUD example for mini_sql TableOperation."""

from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_sql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_sql import Database, SQLiteDialect, SqlValue, TableOperation, UnsupportedParameterType


def main() -> None:
    # 1) Create DB adapter and table helper.
    db = Database(sqlite3.connect(":memory:"), SQLiteDialect())
    db.conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)")
    users = TableOperation("users")

    with db:
        # 2) Insert rows; typed values pin a value kind explicitly.
        print("Inserted:", users.insert(db, {"name": "John", "age": 30}))
        print("Inserted:", users.insert(db, {"name": "Jane", "age": SqlValue.short(28)}))

        # 3) Update and select with equality conditions.
        print("Updated:", users.update(db, {"age": 35}, {"name": "John"}))
        print("John:", users.select(db, ["name", "age"], {"name": "John"}))
        print("Everyone:", users.select(db))

        # 4) Unsupported values fail before anything reaches the database.
        try:
            users.insert(db, {"name": "Bad", "age": [1, 2]})
        except UnsupportedParameterType as exc:
            print("Rejected:", exc)

        # 5) Delete requires at least one condition.
        print("Deleted:", users.delete(db, {"name": "Jane"}))
        print("After delete:", users.select(db, ["name"]))


if __name__ == "__main__":
    main()
