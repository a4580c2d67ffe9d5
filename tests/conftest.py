from datetime import datetime, timedelta

import pytest
from PySide6.QtCore import QCoreApplication

from BackEnd.repos.kv_store import MemoryStore
from BackEnd.services.notifier import Notifier
from BackEnd.services.scheduler import TickScheduler
from BackEnd.services.timer_service import TimerService


START = datetime(2026, 3, 11, 9, 0, 0)


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, start=START):
        self.current = start

    def __call__(self):
        return self.current

    def advance(self, seconds=0, minutes=0, days=0):
        self.current += timedelta(seconds=seconds, minutes=minutes, days=days)


class ManualScheduler(TickScheduler):
    def __init__(self):
        self.callback = None
        self.active = False
        self.arm_count = 0

    def arm(self, callback):
        self.callback = callback
        self.active = True
        self.arm_count += 1

    def cancel(self):
        self.active = False

    def is_active(self):
        return self.active

    def fire(self, times=1):
        for _ in range(times):
            if self.active:
                self.callback()


class RecordingNotifier(Notifier):
    def __init__(self):
        self.sounds = 0
        self.messages = []

    def play_completion_sound(self):
        self.sounds += 1

    def show_notification(self, title, body):
        self.messages.append((title, body))


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def engine(store, scheduler, notifier, clock):
    return TimerService(store, scheduler=scheduler, notifier=notifier, now=clock)
