import logging
from enum import Enum
from PySide6.QtCore import QObject, Signal
from BackEnd.core import config
from BackEnd.core.clock import local_now, local_today_str
from BackEnd.repos import stats_repo
from BackEnd.services.notifier import NullNotifier, completion_message
from BackEnd.services.scheduler import QtTickScheduler
from BackEnd.services.stats_service import StatsService

logger = logging.getLogger(__name__)

# every Nth completed focus session is followed by a long break
SESSIONS_PER_CYCLE = 4


class TimerMode(str, Enum):
	FOCUS = "focus"
	SHORT_BREAK = "short_break"
	LONG_BREAK = "long_break"

	@property
	def label(self):
		return {"focus": "Focus", "short_break": "Short Break", "long_break": "Long Break"}[self.value]


class TimerState(str, Enum):
	STOPPED = "stopped"
	RUNNING = "running"
	PAUSED = "paused"


class TimerService(QObject):
	"""Pomodoro session engine: countdown, mode transitions and session accounting.

	Counters and the weekly ledger live in `store`; ticks come from `scheduler`
	and completions are announced through `notifier`. Every mutation commits its
	state before any signal is emitted, so listeners always see a consistent
	snapshot. The engine halts at each transition; auto-start is up to the host.
	"""

	changed = Signal()
	tick = Signal(int)  # emits remaining seconds
	state_changed = Signal(str)  # emits 'stopped', 'running', 'paused'
	mode_changed = Signal(str)
	session_completed = Signal(str)  # emits the mode that just ended
	data_reset = Signal()

	def __init__(self, store, scheduler=None, notifier=None, now=local_now, parent=None):
		super().__init__(parent)
		self.store = store
		self.scheduler = scheduler or QtTickScheduler(self)
		self.notifier = notifier or NullNotifier()
		self._now = now
		self.stats = StatsService(store, now=now)

		self.mode = TimerMode.FOCUS
		self.state = TimerState.STOPPED
		self.completed_sessions = 0
		self.session_start = None

		if stats_repo.roll_over_today(store, local_today_str(self._now())):
			logger.info("New day, today's session count reset")
		self.stats.prune()
		self.time_remaining = self.duration_for(self.mode)

	# --- read access -------------------------------------------------

	def duration_for(self, mode) -> int:
		return config.duration_seconds(self.store, mode)

	@property
	def total_focus_seconds(self):
		return stats_repo.total_focus_seconds(self.store)

	@property
	def total_sessions(self):
		return stats_repo.total_sessions(self.store)

	@property
	def today_sessions(self):
		return stats_repo.today_sessions(self.store)

	@property
	def last_session_date(self):
		return stats_repo.last_session_date(self.store)

	def get_weekly_data(self):
		return self.stats.get_weekly_data()

	def current_streak(self):
		return self.stats.current_streak()

	# --- commands ----------------------------------------------------

	def start(self):
		if self.state == TimerState.RUNNING:
			return
		# resuming keeps the original start so elapsed time spans the pause
		if self.session_start is None:
			self.session_start = self._now()
		self.state = TimerState.RUNNING
		self.scheduler.arm(self._on_tick)
		self.state_changed.emit(self.state.value)
		self.changed.emit()

	def pause(self):
		self.scheduler.cancel()
		self.state = TimerState.PAUSED
		self.state_changed.emit(self.state.value)
		self.changed.emit()

	def stop(self):
		"""Abandon the current interval; nothing is recorded."""
		self.scheduler.cancel()
		self.state = TimerState.STOPPED
		self.session_start = None
		self.time_remaining = self.duration_for(self.mode)
		self.state_changed.emit(self.state.value)
		self.changed.emit()

	def skip(self):
		self._complete()

	def update_duration(self):
		"""Re-read the configured duration for the current mode."""
		duration = self.duration_for(self.mode)
		if self.state == TimerState.STOPPED:
			self.time_remaining = duration
		else:
			elapsed = self._elapsed_seconds()
			self.time_remaining = min(max(int(duration - elapsed), 0), duration)
		self.changed.emit()

	def reset_all_data(self):
		"""Wipe counters and ledger and return to a fresh Focus interval."""
		self.scheduler.cancel()
		self.stats.reset()
		self.completed_sessions = 0
		self.mode = TimerMode.FOCUS
		self.state = TimerState.STOPPED
		self.session_start = None
		self.time_remaining = self.duration_for(self.mode)
		logger.info("All session data reset")
		self.data_reset.emit()
		self.mode_changed.emit(self.mode.value)
		self.state_changed.emit(self.state.value)
		self.changed.emit()

	# --- internals ---------------------------------------------------

	def _elapsed_seconds(self):
		if self.session_start is None:
			return 0.0
		return max((self._now() - self.session_start).total_seconds(), 0.0)

	def _on_tick(self):
		if self.state != TimerState.RUNNING:
			return
		if self.time_remaining > 0:
			self.time_remaining -= 1
			self.tick.emit(self.time_remaining)
			self.changed.emit()
		else:
			self._complete()

	def _complete(self):
		self.scheduler.cancel()
		completed_mode = self.mode

		if completed_mode == TimerMode.FOCUS:
			self.completed_sessions += 1
			elapsed = self._elapsed_seconds()
			stats_repo.increment_sessions(self.store)
			stats_repo.add_focus_seconds(self.store, elapsed)
			self.stats.record_completed_focus_session(elapsed)
			stats_repo.set_last_session_date(self.store, local_today_str(self._now()))
			if self.completed_sessions % SESSIONS_PER_CYCLE == 0:
				self.mode = TimerMode.LONG_BREAK
			else:
				self.mode = TimerMode.SHORT_BREAK
		else:
			self.mode = TimerMode.FOCUS

		self.time_remaining = self.duration_for(self.mode)
		self.state = TimerState.STOPPED
		self.session_start = None
		logger.info("%s complete, next: %s", completed_mode.label, self.mode.label)

		self._notify(completed_mode)
		self.mode_changed.emit(self.mode.value)
		self.state_changed.emit(self.state.value)
		self.session_completed.emit(completed_mode.value)
		self.changed.emit()

	def _notify(self, completed_mode):
		title, body = completion_message(completed_mode)
		try:
			self.notifier.play_completion_sound()
		except Exception:
			logger.exception("Completion sound failed")
		try:
			self.notifier.show_notification(title, body)
		except Exception:
			logger.exception("Notification failed")
