from __future__ import annotations

import datetime as dt
import importlib
import os
import unittest
from typing import Any

from mini_sql import PostgresDialect, SqlValue, TableOperation, TemplateQuery


def _load_connect() -> Any:
    for module_name in ("psycopg", "psycopg2"):
        try:
            module = importlib.import_module(module_name)
        except (ModuleNotFoundError, ImportError):
            continue
        connect = getattr(module, "connect", None)
        if connect is not None:
            return connect
    return None


POSTGRES_CONNECT = _load_connect()
HAS_POSTGRES_DRIVER = POSTGRES_CONNECT is not None


@unittest.skipUnless(HAS_POSTGRES_DRIVER, "psycopg/psycopg2 is not installed")
class PostgresOperationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        password = os.getenv(
            "MINI_SQL_PG_PASSWORD",
            os.getenv("PGPASSWORD", os.getenv("POSTGRES_PASSWORD", "password")),
        )
        params = {
            "host": os.getenv("MINI_SQL_PG_HOST", os.getenv("PGHOST", "localhost")),
            "port": int(os.getenv("MINI_SQL_PG_PORT", os.getenv("PGPORT", "5432"))),
            "user": os.getenv("MINI_SQL_PG_USER", os.getenv("PGUSER", "postgres")),
            "password": password,
            "dbname": os.getenv("MINI_SQL_PG_DATABASE", os.getenv("PGDATABASE", "postgres")),
        }

        try:
            cls.conn = POSTGRES_CONNECT(**params)
        except Exception as exc:
            raise unittest.SkipTest(
                "PostgreSQL is not reachable with configured credentials: "
                f"{exc}"
            ) from exc

        cls.users = TableOperation("mini_sql_users")

    @classmethod
    def tearDownClass(cls) -> None:
        conn = getattr(cls, "conn", None)
        if conn is not None:
            conn.close()

    def setUp(self) -> None:
        cur = self.conn.cursor()
        cur.execute("DROP TABLE IF EXISTS mini_sql_users")
        cur.execute(
            "CREATE TABLE mini_sql_users ("
            "id SERIAL PRIMARY KEY, name TEXT, age INTEGER, score REAL, "
            "born DATE, seen TIMESTAMP, avatar BYTEA)"
        )
        cur.close()
        self.conn.commit()

    def tearDown(self) -> None:
        self.conn.rollback()

    def test_dialect_is_detected(self) -> None:
        from mini_sql import dialect_for

        self.assertIsInstance(dialect_for(self.conn), PostgresDialect)

    def test_crud_roundtrip(self) -> None:
        born = dt.date(1990, 5, 17)
        seen = dt.datetime(2024, 1, 2, 3, 4, 5)

        inserted = self.users.insert(
            self.conn,
            {
                "name": "John",
                "age": 30,
                "score": SqlValue.float32(1.5),
                "born": born,
                "seen": seen,
                "avatar": b"\x00\x01",
            },
        )
        self.assertEqual(inserted, 1)

        self.assertEqual(self.users.update(self.conn, {"age": 35}, {"name": "John"}), 1)

        rows = self.users.select(self.conn, ["name", "age", "born", "seen"], {"name": "John"})
        self.assertEqual(rows, [{"name": "John", "age": 35, "born": born, "seen": seen}])

        self.assertEqual(self.users.delete(self.conn, {"name": "John"}), 1)
        self.assertEqual(self.users.select(self.conn), [])

    def test_template_query_with_literal_percent(self) -> None:
        for name, age in (("John", 30), ("Jane", 28), ("Bob", 41)):
            self.users.insert(self.conn, {"name": name, "age": age})

        query = TemplateQuery(
            "SELECT name FROM mini_sql_users WHERE name LIKE 'J%' "
            "[min_age | AND age >= :min_age] ORDER BY name"
        )

        self.assertEqual(
            query.execute(self.conn, {"min_age": 29}),
            [{"name": "John"}],
        )
        self.assertEqual(
            [row["name"] for row in query.execute(self.conn, {})],
            ["Jane", "John"],
        )


if __name__ == "__main__":
    unittest.main()
