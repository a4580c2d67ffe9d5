import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.log import setup_logging
from BackEnd.repos.kv_store import SqliteStore
from BackEnd.services.timer_service import TimerService
from FrontEnd.components.tray_notifier import TrayNotifier
from FrontEnd.ui_main import MainWindow, create_tray

def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Tempo")
    store = SqliteStore()
    tray = create_tray()
    # one engine for the whole process; reset happens on this instance
    engine = TimerService(store, notifier=TrayNotifier(store, tray))
    win = MainWindow(engine, tray=tray)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
