import json
import logging
from dataclasses import dataclass, asdict
from BackEnd.core.clock import parse_date, last_n_days

logger = logging.getLogger(__name__)

TOTAL_FOCUS_KEY = "totalFocusTime"
TOTAL_SESSIONS_KEY = "totalSessions"
TODAY_SESSIONS_KEY = "todaySessions"
LAST_SESSION_DATE_KEY = "lastSessionDate"
WEEKLY_KEY = "weeklyData"

LEDGER_DAYS = 7


@dataclass
class DailyStat:
	date: str
	sessions: int
	minutes: float

	@property
	def day_of_week(self):
		d = parse_date(self.date)
		return d.strftime("%a") if d else ""

	@classmethod
	def from_dict(cls, raw):
		if not isinstance(raw, dict) or not isinstance(raw.get("date"), str):
			raise ValueError(f"not a daily stat: {raw!r}")
		sessions = raw.get("sessions", 0)
		minutes = raw.get("minutes", 0.0)
		# whole-number floats such as 2.0 are still a count
		if isinstance(sessions, float) and sessions.is_integer():
			sessions = int(sessions)
		if isinstance(sessions, bool) or not isinstance(sessions, int):
			raise ValueError(f"bad session count: {sessions!r}")
		if isinstance(minutes, bool) or not isinstance(minutes, (int, float)):
			raise ValueError(f"bad minutes: {minutes!r}")
		return cls(raw["date"], sessions, float(minutes))


def total_focus_seconds(store):
	return store.get_float(TOTAL_FOCUS_KEY, 0.0)

def total_sessions(store):
	return store.get_int(TOTAL_SESSIONS_KEY, 0)

def today_sessions(store):
	return store.get_int(TODAY_SESSIONS_KEY, 0)

def last_session_date(store):
	return store.get_str(LAST_SESSION_DATE_KEY, "")

def add_focus_seconds(store, seconds):
	store.set(TOTAL_FOCUS_KEY, total_focus_seconds(store) + float(seconds))

def increment_sessions(store):
	"""Bump lifetime and today's session counters by one."""
	store.set(TOTAL_SESSIONS_KEY, total_sessions(store) + 1)
	store.set(TODAY_SESSIONS_KEY, today_sessions(store) + 1)

def set_last_session_date(store, date_str):
	store.set(LAST_SESSION_DATE_KEY, date_str)

def roll_over_today(store, today_str):
	"""Zero today's counter if the last session happened on another day. Returns True if reset."""
	if last_session_date(store) != today_str:
		store.set(TODAY_SESSIONS_KEY, 0)
		return True
	return False


def decode_ledger(text):
	"""Parse ledger JSON text. Raises ValueError on anything malformed."""
	raw = json.loads(text)
	if not isinstance(raw, list):
		raise ValueError("ledger is not a list")
	merged = {}
	for item in raw:
		stat = DailyStat.from_dict(item)
		if stat.date in merged:
			merged[stat.date].sessions += stat.sessions
			merged[stat.date].minutes += stat.minutes
		else:
			merged[stat.date] = stat
	return list(merged.values())

def encode_ledger(entries):
	return json.dumps([asdict(e) for e in entries])

def load_ledger(store):
	"""Return stored ledger entries; corrupt data is replaced by an empty ledger."""
	text = store.get(WEEKLY_KEY)
	if text is None:
		return []
	try:
		if not isinstance(text, str):
			raise ValueError("ledger is not text")
		return decode_ledger(text)
	# deeply nested JSON exhausts the decoder stack
	except (ValueError, RecursionError) as e:
		logger.warning("Discarding corrupt weekly ledger: %s", e)
		store.set(WEEKLY_KEY, "[]")
		return []

def save_ledger(store, entries):
	store.set(WEEKLY_KEY, encode_ledger(entries))

def prune_ledger(entries, today):
	"""Keep only entries dated within the trailing window ending at `today` (a date)."""
	window = set(last_n_days(today, LEDGER_DAYS))
	return [e for e in entries if e.date in window]


def reset_all(store):
	"""Clear every persisted counter and empty the ledger."""
	for key in (TOTAL_FOCUS_KEY, TOTAL_SESSIONS_KEY, TODAY_SESSIONS_KEY, LAST_SESSION_DATE_KEY):
		store.remove(key)
	store.set(WEEKLY_KEY, "[]")
