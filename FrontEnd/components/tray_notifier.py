from PySide6.QtWidgets import QApplication, QSystemTrayIcon
from BackEnd.core import config
from BackEnd.services.notifier import Notifier


class TrayNotifier(Notifier):
    """Desktop notifications through the system tray, gated by the user's toggles."""

    def __init__(self, store, tray: QSystemTrayIcon = None, beep=QApplication.beep):
        self.store = store
        self.tray = tray
        self._beep = beep

    def play_completion_sound(self):
        if config.toggle(self.store, "enableSounds"):
            self._beep()

    def show_notification(self, title, body):
        # no tray means the platform has none; see ui_main.create_tray
        if self.tray is None or not config.toggle(self.store, "enableNotifications"):
            return
        self.tray.showMessage(title, body, QSystemTrayIcon.MessageIcon.Information, 5000)
