from __future__ import annotations

import json

import pytest

from src.escalaflex.escalaflex.core.exceptions import StorageError
from src.escalaflex.escalaflex.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self._result = None
        self.rowcount = 0
        self.closed = False

    def execute(self, sql: str, params: tuple = ()):
        statement = " ".join(sql.split()).upper()
        if statement.startswith("CREATE TABLE"):
            return
        if statement.startswith("SELECT"):
            key = params[0]
            self._result = {"store_value": self._table[key]} if key in self._table else None
        elif statement.startswith("INSERT"):
            key, value = params
            self._table[key] = value
            self.rowcount = 1
        elif statement.startswith("DELETE"):
            self.rowcount = 1 if self._table.pop(params[0], None) is not None else 0

    def fetchone(self):
        return self._result

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, table):
        self._table = table
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return FakeCursor(self._table)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.table: dict[str, str] = {}
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.table)
        self.connections.append(conn)
        return conn


@pytest.fixture
def factory():
    return FakeConnectionFactory()


@pytest.fixture
def store(factory):
    s = MySQLKeyValueStore(factory)
    s.ensure_schema()
    return s


def test_absent_key(store):
    assert store.get("shiftPattern") is None


def test_values_stored_as_json(store, factory):
    store.set("shiftPattern", {"work": 5, "off": 2, "startDate": "2024-01-01"})
    assert json.loads(factory.table["shiftPattern"]) == {"work": 5, "off": 2, "startDate": "2024-01-01"}
    assert store.get("shiftPattern") == {"work": 5, "off": 2, "startDate": "2024-01-01"}
    assert factory.connections[-1].committed


def test_upsert_replaces(store):
    store.set("shiftOverrides", {"2024-01-03": {"type": "Troca"}})
    store.set("shiftOverrides", {"2024-01-04": {"type": "Férias", "note": "Férias"}})
    assert store.get("shiftOverrides") == {"2024-01-04": {"type": "Férias", "note": "Férias"}}


def test_delete(store):
    store.set("shiftPattern", {"work": 1, "off": 1, "startDate": "2024-01-01"})
    assert store.delete("shiftPattern") is True
    assert store.delete("shiftPattern") is False
    assert store.get("shiftPattern") is None


def test_corrupt_value(store, factory):
    factory.table["shiftPattern"] = "{oops"
    with pytest.raises(StorageError):
        store.get("shiftPattern")
