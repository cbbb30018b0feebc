"""Key-value persistence for the three independently stored entries.

Each key holds one JSON document in the ``app_state`` table:

- ``studyHistory``: list of ``{date, duration, workType}`` objects
- ``workTypes``: ordered list of unique strings
- ``darkMode``: boolean

Loaders never raise: a missing key gives the default, a corrupt one is logged
and also gives the default. Savers return False when the write fails so the
caller can keep its in-memory state.
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from BackEnd.core.errors import CorruptPersistedState
from BackEnd.core.models import StudySession
from BackEnd.core.paths import db_path

log = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent.parent / "SQL" / "schema.sql"

HISTORY_KEY = "studyHistory"
WORK_TYPES_KEY = "workTypes"
DARK_MODE_KEY = "darkMode"

DEFAULT_DARK_MODE = True


def connect(dbfile=None):
	"""Open SQLite connection and ensure schema is applied."""
	conn = sqlite3.connect(dbfile or db_path())
	conn.row_factory = sqlite3.Row
	try:
		with open(SCHEMA_PATH, encoding="utf-8") as f:
			conn.executescript(f.read())
	except BaseException:
		conn.close()
		raise
	return conn


@contextmanager
def _transaction(dbfile=None):
	conn = connect(dbfile)
	try:
		with conn:
			yield conn
	finally:
		conn.close()


def get_value(key, dbfile=None):
	"""Return the raw stored text for key, or None if absent."""
	with _transaction(dbfile) as conn:
		row = conn.execute("SELECT value FROM app_state WHERE key=?", (key,)).fetchone()
		return row["value"] if row else None


def set_value(key, value, dbfile=None):
	with _transaction(dbfile) as conn:
		conn.execute(
			"""
			INSERT INTO app_state(key, value) VALUES(?, ?)
			ON CONFLICT(key) DO UPDATE SET value=excluded.value
			""",
			(key, value),
		)


def delete_value(key, dbfile=None):
	with _transaction(dbfile) as conn:
		conn.execute("DELETE FROM app_state WHERE key=?", (key,))


def _read_json(key, dbfile=None):
	"""Return (found, document). Raises CorruptPersistedState on bad JSON."""
	raw = get_value(key, dbfile)
	if raw is None:
		return False, None
	try:
		return True, json.loads(raw)
	except (TypeError, ValueError) as e:
		raise CorruptPersistedState(key, f"stored {key} is not valid JSON: {e}") from e


def _load(key, decode, default, dbfile=None):
	try:
		found, doc = _read_json(key, dbfile)
		if not found:
			return default
		return decode(doc)
	except CorruptPersistedState as e:
		log.warning("Ignoring corrupt %s, using default: %s", e.key, e)
	except (sqlite3.Error, OSError) as e:
		log.warning("Could not read %s, using default: %s", key, e)
	return default


def _write_json(key, doc, dbfile=None):
	try:
		set_value(key, json.dumps(doc), dbfile)
		return True
	except (sqlite3.Error, OSError) as e:
		log.warning("Could not persist %s, keeping in-memory state: %s", key, e)
		return False


def _decode_history(doc):
	if not isinstance(doc, list):
		raise CorruptPersistedState(HISTORY_KEY, "study history must be a JSON array")
	return [StudySession.from_json(item) for item in doc]


def _decode_work_types(doc):
	if not isinstance(doc, list) or not all(isinstance(t, str) for t in doc):
		raise CorruptPersistedState(WORK_TYPES_KEY, "work types must be a JSON array of strings")
	unique = list(dict.fromkeys(doc))
	if len(unique) != len(doc):
		log.warning("Dropped %d duplicate work type(s) from storage", len(doc) - len(unique))
	return unique


def _decode_dark_mode(doc):
	if not isinstance(doc, bool):
		raise CorruptPersistedState(DARK_MODE_KEY, "dark mode must be a JSON boolean")
	return doc


def load_history(dbfile=None):
	return _load(HISTORY_KEY, _decode_history, [], dbfile)


def load_work_types(dbfile=None):
	return _load(WORK_TYPES_KEY, _decode_work_types, [], dbfile)


def load_dark_mode(dbfile=None):
	return _load(DARK_MODE_KEY, _decode_dark_mode, DEFAULT_DARK_MODE, dbfile)


def save_history(sessions, dbfile=None):
	"""Overwrite the stored history with the full sequence."""
	return _write_json(HISTORY_KEY, [s.to_json() for s in sessions], dbfile)


def save_work_types(work_types, dbfile=None):
	return _write_json(WORK_TYPES_KEY, list(work_types), dbfile)


def save_dark_mode(enabled, dbfile=None):
	return _write_json(DARK_MODE_KEY, bool(enabled), dbfile)
