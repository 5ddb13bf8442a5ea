"""Conditional SQL template example for mini_sql TemplateQuery."""

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

from mini_sql import TemplateQuery


def main() -> None:
    # 1) Create a small in-memory table.
    conn = sqlite3.connect(":memory:")
    conn.executescript(
        """
        CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, age INTEGER, city TEXT);
        INSERT INTO users (name, age, city) VALUES ('Ann', 25, 'Paris');
        INSERT INTO users (name, age, city) VALUES ('Bob', 35, 'Rome');
        INSERT INTO users (name, age, city) VALUES ('Cid', 45, 'Paris');
        """
    )

    query = TemplateQuery(
        "SELECT name, age, city FROM users WHERE 1=1 "
        "[age | AND age > :age] [city | AND city = :city] ORDER BY id"
    )

    try:
        # 2) Blocks are kept only for keys with a non-null value.
        print("Rendered:", query.render({"age": 30}))
        print("Age > 30:", query.execute(conn, {"age": 30}))
        print("Age > 30 in Paris:", query.execute(conn, {"age": 30, "city": "Paris"}))
        print("No filters:", query.execute(conn, {"city": None}))

        # 3) Non-query templates report affected rows.
        update = TemplateQuery("UPDATE users SET city = :city WHERE 1=1 [id | AND id = :id]")
        print("Moved rows:", update.execute_update(conn, {"city": "Oslo", "id": 1}))
    finally:
        conn.close()


if __name__ == "__main__":
    main()
