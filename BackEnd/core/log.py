import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging(level=logging.INFO):
	"""Configure the root logger once for the desktop app."""
	root = logging.getLogger()
	if root.handlers:
		root.setLevel(level)
		return
	logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
	# matplotlib is chatty at INFO about font caches
	logging.getLogger("matplotlib").setLevel(logging.WARNING)
