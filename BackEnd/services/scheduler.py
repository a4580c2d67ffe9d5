from abc import ABC, abstractmethod
from PySide6.QtCore import QTimer


class TickScheduler(ABC):
	"""Repeating ~1 s callback source. At most one callback is armed at a time."""

	@abstractmethod
	def arm(self, callback) -> None:
		raise NotImplementedError

	@abstractmethod
	def cancel(self) -> None:
		raise NotImplementedError

	@abstractmethod
	def is_active(self) -> bool:
		raise NotImplementedError


class QtTickScheduler(TickScheduler):
	"""Drives ticks from a QTimer on the Qt event loop."""

	def __init__(self, parent=None, interval_ms=1000):
		self._callback = None
		self._timer = QTimer(parent)
		self._timer.setInterval(interval_ms)
		self._timer.timeout.connect(self._on_timeout)

	def arm(self, callback):
		self._callback = callback
		# QTimer.start() restarts an active timer instead of adding another
		self._timer.start()

	def cancel(self):
		self._timer.stop()

	def is_active(self):
		return self._timer.isActive()

	def _on_timeout(self):
		if self._callback is not None:
			self._callback()
