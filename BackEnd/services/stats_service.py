import logging
from datetime import timedelta
from BackEnd.core.clock import local_now, parse_date, last_n_days
from BackEnd.repos import stats_repo
from BackEnd.repos.stats_repo import DailyStat

logger = logging.getLogger(__name__)


def current_streak(entries, today):
	"""Count consecutive days, walking back from `today`, that have a ledger entry.

	The cursor starts at today even when today has no entry yet, so a chain
	ending yesterday still counts. Each entry must fall on the cursor's day or
	the day before it; the first gap ends the walk.
	"""
	dates = sorted((d for d in (parse_date(e.date) for e in entries) if d), reverse=True)
	streak = 0
	cursor = today
	for d in dates:
		if d == cursor or d == cursor - timedelta(days=1):
			streak += 1
			cursor = d
		else:
			break
	return streak


class StatsService:
	"""Rolling 7-day ledger of completed focus sessions."""

	def __init__(self, store, now=local_now):
		self.store = store
		self._now = now

	def _today(self):
		return self._now().date()

	def prune(self):
		"""Load, drop out-of-window entries and write back. Returns the kept entries."""
		entries = stats_repo.prune_ledger(stats_repo.load_ledger(self.store), self._today())
		stats_repo.save_ledger(self.store, entries)
		return entries

	def record_completed_focus_session(self, elapsed_seconds):
		today = self._today()
		today_str = today.isoformat()
		minutes = max(float(elapsed_seconds), 0.0) / 60
		entries = stats_repo.load_ledger(self.store)
		for entry in entries:
			if entry.date == today_str:
				entry.sessions += 1
				entry.minutes += minutes
				stat = entry
				break
		else:
			stat = DailyStat(today_str, 1, minutes)
			entries.append(stat)
		entries = stats_repo.prune_ledger(entries, today)
		stats_repo.save_ledger(self.store, entries)
		logger.debug("Ledger %s: %d sessions, %.1f min", stat.date, stat.sessions, stat.minutes)
		return stat

	def get_weekly_data(self):
		"""Ledger entries ordered by date, oldest first."""
		return sorted(stats_repo.load_ledger(self.store), key=lambda e: e.date)

	def current_streak(self):
		return current_streak(stats_repo.load_ledger(self.store), self._today())

	def week_series(self):
		"""(date, minutes) for each of the trailing 7 days, zero-filled, oldest first."""
		by_date = {e.date: e.minutes for e in self.get_weekly_data()}
		return [(d, by_date.get(d, 0.0)) for d in last_n_days(self._today(), stats_repo.LEDGER_DAYS)]

	def weekly_summary(self):
		data = self.get_weekly_data()
		total_sessions = sum(e.sessions for e in data)
		return {
			"total_sessions": total_sessions,
			"total_minutes": sum(e.minutes for e in data),
			# first maximum wins on ties
			"best_day": max(data, key=lambda e: e.sessions) if data else None,
			"daily_average": total_sessions / len(data) if data else 0.0,
			"streak": current_streak(data, self._today()),
		}

	def reset(self):
		stats_repo.reset_all(self.store)
