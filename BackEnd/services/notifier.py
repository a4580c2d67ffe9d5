from abc import ABC, abstractmethod

# completed mode -> (title, body)
COMPLETION_MESSAGES = {
	"focus": ("Focus Session Complete! 🎯", "Great work! Time for a well-deserved break."),
	"short_break": ("Break Complete! ☕️", "Refreshed and ready? Time for another focus session!"),
	"long_break": ("Long Break Complete! 🌟", "You've earned it! Ready for your next focus session?"),
}


def completion_message(mode):
	"""Title/body describing the mode that just finished."""
	return COMPLETION_MESSAGES[getattr(mode, "value", mode)]


class Notifier(ABC):
	"""Sound and desktop-notification capability supplied by the host."""

	@abstractmethod
	def play_completion_sound(self) -> None:
		raise NotImplementedError

	@abstractmethod
	def show_notification(self, title: str, body: str) -> None:
		raise NotImplementedError


class NullNotifier(Notifier):
	def play_completion_sound(self):
		pass

	def show_notification(self, title, body):
		pass
