from datetime import datetime, date, timedelta

def local_now():
	"""Return current local time (naive)."""
	return datetime.now()

def local_today_str(now=None):
	"""Return local date as YYYY-MM-DD string."""
	return (now or local_now()).date().isoformat()

def parse_date(value):
	"""Parse a YYYY-MM-DD string, returning None when it isn't one."""
	try:
		return date.fromisoformat(value)
	except (TypeError, ValueError):
		return None

def last_n_days(today: date, n: int = 7):
	"""Return the trailing n dates as YYYY-MM-DD strings, oldest first, ending at today."""
	return [(today - timedelta(days=offset)).isoformat() for offset in range(n - 1, -1, -1)]

def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS (minutes may exceed 59)."""
	seconds = max(int(seconds), 0)
	return f"{seconds // 60:02}:{seconds % 60:02}"

