from contextlib import closing

import pytest

from BackEnd.repos.kv_store import MemoryStore, SqliteStore


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteStore(tmp_path / "tempo.db")


class TestTypedGetters:
    def test_defaults_for_missing(self):
        store = MemoryStore()
        assert store.get_int("totalSessions") == 0
        assert store.get_float("totalFocusTime") == 0.0
        assert store.get_str("lastSessionDate") == ""
        assert store.get_bool("enableSounds", True) is True

    def test_unusable_values_fall_back(self):
        store = MemoryStore({"a": "many", "b": True, "c": 3, "d": "yes"})
        assert store.get_int("a", 7) == 7
        assert store.get_int("b", 7) == 7
        assert store.get_str("c", "x") == "x"
        assert store.get_bool("d", False) is False

    def test_numeric_strings_accepted(self):
        store = MemoryStore({"n": "12", "f": "1.5"})
        assert store.get_int("n") == 12
        assert store.get_float("f") == 1.5

    def test_remove(self):
        store = MemoryStore({"k": 1})
        store.remove("k")
        store.remove("never-set")
        assert store.get("k") is None


class TestSqliteStore:
    def test_round_trips_primitives(self, sqlite_store):
        sqlite_store.set("totalSessions", 4)
        sqlite_store.set("totalFocusTime", 1500.25)
        sqlite_store.set("enableSounds", False)
        sqlite_store.set("weeklyData", "[]")
        assert sqlite_store.get_int("totalSessions") == 4
        assert sqlite_store.get_float("totalFocusTime") == 1500.25
        assert sqlite_store.get_bool("enableSounds", True) is False
        assert sqlite_store.get("weeklyData") == "[]"

    def test_overwrite_and_remove(self, sqlite_store):
        sqlite_store.set("todaySessions", 1)
        sqlite_store.set("todaySessions", 2)
        assert sqlite_store.keys() == ["todaySessions"]
        assert sqlite_store.get("todaySessions") == 2
        sqlite_store.remove("todaySessions")
        assert sqlite_store.get("todaySessions", "gone") == "gone"

    def test_survives_reopen(self, tmp_path):
        SqliteStore(tmp_path / "tempo.db").set("lastSessionDate", "2026-03-11")
        assert SqliteStore(tmp_path / "tempo.db").get_str("lastSessionDate") == "2026-03-11"

    def test_unreadable_value_gives_default(self, sqlite_store):
        with closing(sqlite_store.connect()) as conn, conn:
            conn.execute("INSERT INTO settings (key, value) VALUES (?, ?)", ("totalSessions", "{oops"))
        assert sqlite_store.get_int("totalSessions", 0) == 0


def test_schema_applied_once_per_store(sqlite_store, tmp_path, monkeypatch):
    sqlite_store.set("totalSessions", 1)
    # later connections must not need the schema file again
    monkeypatch.setattr("BackEnd.repos.kv_store.schema_path", lambda: tmp_path / "missing.sql")
    assert sqlite_store.get_int("totalSessions") == 1
    sqlite_store.set("totalSessions", 2)
    assert sqlite_store.get_int("totalSessions") == 2
