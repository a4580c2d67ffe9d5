import os
import sys
from pathlib import Path

APP_NAME = "Tempo"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux)."""
	if os.name == "nt":
		base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
	elif os.name == "posix":
		base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
	else:
		base = os.path.expanduser("~")
	path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def db_path():
	"""Return Path to tempo.db inside user data dir."""
	return user_data_dir() / "tempo.db"

def resource_path(relative_path):
	"""Path of a bundled resource; works in dev and in a PyInstaller .exe."""
	if hasattr(sys, "_MEIPASS"):
		return Path(sys._MEIPASS) / relative_path
	return Path(__file__).parent.parent.parent / relative_path

def schema_path():
	return resource_path("SQL/schema.sql")
