import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import closing
from BackEnd.core.paths import db_path, schema_path
from BackEnd.core.clock import local_now

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
	"""Flat string-keyed store of primitive values (int, float, bool, str).

	Reads and writes are synchronous; every set/remove is durable when it returns.
	The typed getters never raise: a missing or unusable value yields the default.
	"""

	@abstractmethod
	def get(self, key, default=None):
		raise NotImplementedError

	@abstractmethod
	def set(self, key, value):
		raise NotImplementedError

	@abstractmethod
	def remove(self, key):
		raise NotImplementedError

	def get_int(self, key, default=0):
		value = self.get(key)
		if value is None or isinstance(value, bool):
			return default
		try:
			return int(value)
		except (TypeError, ValueError):
			return default

	def get_float(self, key, default=0.0):
		value = self.get(key)
		if value is None or isinstance(value, bool):
			return default
		try:
			return float(value)
		except (TypeError, ValueError):
			return default

	def get_str(self, key, default=""):
		value = self.get(key)
		return value if isinstance(value, str) else default

	def get_bool(self, key, default=False):
		value = self.get(key)
		return value if isinstance(value, bool) else default


class MemoryStore(KeyValueStore):
	"""Dict-backed store; nothing survives the process."""

	def __init__(self, initial=None):
		self._data = dict(initial or {})

	def get(self, key, default=None):
		return self._data.get(key, default)

	def set(self, key, value):
		self._data[key] = value

	def remove(self, key):
		self._data.pop(key, None)


class SqliteStore(KeyValueStore):
	"""Store backed by the `settings` table in the per-user SQLite file."""

	def __init__(self, path=None):
		self.path = path or db_path()
		self._schema_applied = False

	def connect(self):
		"""Open SQLite connection; the schema is applied on first use only."""
		conn = sqlite3.connect(self.path)
		conn.row_factory = sqlite3.Row
		if not self._schema_applied:
			with open(schema_path(), encoding="utf-8") as f:
				conn.executescript(f.read())
			self._schema_applied = True
		return conn

	def get(self, key, default=None):
		with closing(self.connect()) as conn:
			row = conn.execute("SELECT value FROM settings WHERE key=?", (key,)).fetchone()
		if row is None:
			return default
		try:
			return json.loads(row["value"])
		except ValueError:
			logger.warning("Unreadable value stored for %r, using default", key)
			return default

	def set(self, key, value):
		now = local_now().replace(microsecond=0).isoformat()
		with closing(self.connect()) as conn, conn:
			conn.execute(
				"""
				INSERT INTO settings (key, value, updated_at) VALUES (?, ?, ?)
				ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
				""",
				(key, json.dumps(value), now)
			)

	def remove(self, key):
		with closing(self.connect()) as conn, conn:
			conn.execute("DELETE FROM settings WHERE key=?", (key,))

	def keys(self):
		with closing(self.connect()) as conn:
			cur = conn.execute("SELECT key FROM settings ORDER BY key")
			return [row["key"] for row in cur.fetchall()]
