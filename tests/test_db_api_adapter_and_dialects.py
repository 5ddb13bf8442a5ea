from __future__ import annotations

import sqlite3
import sys
import types
import unittest
from unittest import mock

from mini_sql import (
    Database,
    Dialect,
    FormatDialect,
    MySQLDialect,
    NumericDialect,
    PostgresDialect,
    SQLiteDialect,
    dialect_for,
)
from tests.sql_test_helpers import RecordingConnection


class _InvalidDialect(Dialect):
    paramstyle = "invalid"


class _FakePgConn(RecordingConnection):
    __module__ = "psycopg"


class _FakePsycopg2Conn(RecordingConnection):
    __module__ = "psycopg2.extensions"


class _FakeMySQLConn(RecordingConnection):
    __module__ = "pymysql.connections"


class _FakeUnknownDriverConn(RecordingConnection):
    __module__ = "no_such_driver_module.connections"


class DialectTests(unittest.TestCase):
    def test_builtin_dialect_markers(self) -> None:
        self.assertEqual(Dialect().marker(1), "?")
        self.assertEqual(SQLiteDialect().marker(3), "?")
        self.assertEqual(PostgresDialect().marker(1), "%s")
        self.assertEqual(MySQLDialect().marker(2), "%s")
        self.assertEqual(FormatDialect().marker(2), "%s")
        self.assertEqual(NumericDialect().marker(2), ":2")

    def test_invalid_paramstyle_raises(self) -> None:
        with self.assertRaises(ValueError):
            _InvalidDialect().marker(1)

    def test_to_positional_per_style(self) -> None:
        sql = "SELECT * FROM t WHERE a = :a AND b = :b AND c = :a"

        self.assertEqual(
            SQLiteDialect().to_positional(sql),
            "SELECT * FROM t WHERE a = ? AND b = ? AND c = ?",
        )
        self.assertEqual(
            PostgresDialect().to_positional(sql),
            "SELECT * FROM t WHERE a = %s AND b = %s AND c = %s",
        )
        self.assertEqual(
            NumericDialect().to_positional(sql),
            "SELECT * FROM t WHERE a = :1 AND b = :2 AND c = :3",
        )

    def test_format_style_escapes_literal_percent(self) -> None:
        self.assertEqual(
            MySQLDialect().to_positional("SELECT * FROM t WHERE name LIKE '%x%' AND id = :id"),
            "SELECT * FROM t WHERE name LIKE '%%x%%' AND id = %s",
        )
        self.assertEqual(SQLiteDialect().to_positional("SELECT '%'"), "SELECT '%'")

    def test_dialect_detection_by_driver_module(self) -> None:
        conn = sqlite3.connect(":memory:")
        try:
            self.assertIsInstance(dialect_for(conn), SQLiteDialect)
        finally:
            conn.close()

        self.assertIsInstance(dialect_for(_FakePgConn()), PostgresDialect)
        self.assertIsInstance(dialect_for(_FakePsycopg2Conn()), PostgresDialect)
        self.assertIsInstance(dialect_for(_FakeMySQLConn()), MySQLDialect)

    def test_unknown_driver_falls_back_to_generic_dialect(self) -> None:
        dialect = dialect_for(_FakeUnknownDriverConn())
        self.assertIs(type(dialect), Dialect)
        self.assertEqual(dialect.paramstyle, "qmark")

    def test_loaded_driver_paramstyle_picks_dialect(self) -> None:
        driver = types.ModuleType("acme_numeric_driver")
        driver.paramstyle = "numeric"
        conn_type = type(
            "Connection", (RecordingConnection,), {"__module__": "acme_numeric_driver.core"}
        )

        with mock.patch.dict(sys.modules, {"acme_numeric_driver": driver}):
            self.assertIsInstance(dialect_for(conn_type()), NumericDialect)

    def test_driver_module_is_not_imported_for_detection(self) -> None:
        conn_type = type("Connection", (RecordingConnection,), {"__module__": "this.connections"})

        with mock.patch.dict(sys.modules):
            sys.modules.pop("this", None)
            self.assertIs(type(dialect_for(conn_type())), Dialect)
            self.assertNotIn("this", sys.modules)

    def test_default_values_insert_per_dialect(self) -> None:
        self.assertEqual(
            SQLiteDialect().default_values_insert("users"),
            "INSERT INTO users DEFAULT VALUES",
        )
        self.assertEqual(
            PostgresDialect().default_values_insert("users"),
            "INSERT INTO users DEFAULT VALUES",
        )
        self.assertEqual(
            MySQLDialect().default_values_insert("users"),
            "INSERT INTO users () VALUES ()",
        )

    def test_dialect_detection_uses_database_dialect(self) -> None:
        dialect = NumericDialect()
        db = Database(RecordingConnection(), dialect)
        self.assertIs(dialect_for(db), dialect)


class DatabaseAdapterTests(unittest.TestCase):
    def test_prepare_rewrites_placeholders(self) -> None:
        conn = RecordingConnection()
        db = Database(conn, PostgresDialect())

        with db.prepare("SELECT * FROM t WHERE a = :a AND b = :b") as statement:
            self.assertEqual(statement.sql, "SELECT * FROM t WHERE a = %s AND b = %s")
            self.assertEqual(statement.parameter_count, 2)

        self.assertTrue(conn.last.closed)

    def test_prepare_positional_keeps_sql(self) -> None:
        conn = RecordingConnection()
        db = Database(conn, SQLiteDialect())

        statement = db.prepare_positional("UPDATE t SET a = ? WHERE b = ?", parameter_count=2)
        statement.set_parameter(1, 1)
        statement.set_parameter(2, "x")
        statement.execute_update()
        statement.close()

        self.assertEqual(conn.executed, [("UPDATE t SET a = ? WHERE b = ?", [1, "x"])])

    def test_detects_dialect_when_omitted(self) -> None:
        conn = sqlite3.connect(":memory:")
        db = Database(conn)
        self.assertIsInstance(db.dialect, SQLiteDialect)
        db.close()

    def test_close_is_idempotent_and_blocks_prepare(self) -> None:
        conn = RecordingConnection()
        db = Database(conn, SQLiteDialect())

        db.close()
        db.close()

        self.assertEqual(conn.close_calls, 1)
        with self.assertRaisesRegex(RuntimeError, "connection is closed"):
            db.prepare("SELECT 1")

    def test_context_manager_closes_connection(self) -> None:
        conn = RecordingConnection()
        with Database(conn, SQLiteDialect()) as db:
            self.assertIs(db.conn, conn)
        self.assertEqual(conn.close_calls, 1)
        self.assertIsNone(db.conn)


if __name__ == "__main__":
    unittest.main()
