"""User-editable configuration: mode durations and host toggles."""

# mode value -> (store key, default minutes, min, max)
DURATIONS = {
	"focus": ("focusDuration", 25, 5, 60),
	"short_break": ("shortBreakDuration", 5, 1, 15),
	"long_break": ("longBreakDuration", 15, 5, 30),
}

# host-level toggles; the engine never reads these
TOGGLES = {
	"autoStartBreaks": True,
	"autoStartFocus": False,
	"enableNotifications": True,
	"enableSounds": True,
}


def _lookup(mode):
	key = getattr(mode, "value", mode)
	if key not in DURATIONS:
		raise ValueError(f"unknown timer mode: {mode!r}")
	return DURATIONS[key]


def duration_range(mode):
	_, _, lo, hi = _lookup(mode)
	return lo, hi


def duration_minutes(store, mode) -> int:
	"""Configured minutes for a mode, clamped into its range."""
	key, default, lo, hi = _lookup(mode)
	return min(max(store.get_int(key, default), lo), hi)


def duration_seconds(store, mode) -> int:
	return duration_minutes(store, mode) * 60


def set_duration(store, mode, minutes) -> int:
	"""Clamp and persist a new duration; returns the stored value."""
	key, _, lo, hi = _lookup(mode)
	value = min(max(int(minutes), lo), hi)
	store.set(key, value)
	return value


def toggle(store, name) -> bool:
	return store.get_bool(name, TOGGLES[name])


def set_toggle(store, name, enabled):
	if name not in TOGGLES:
		raise ValueError(f"unknown toggle: {name!r}")
	store.set(name, bool(enabled))


def reset_settings(store):
	"""Drop every configuration key so defaults apply again."""
	for key, *_ in DURATIONS.values():
		store.remove(key)
	for name in TOGGLES:
		store.remove(name)


def auto_start_enabled(store, next_mode) -> bool:
	"""Whether the host should start `next_mode` right after a transition."""
	if getattr(next_mode, "value", next_mode) == "focus":
		return toggle(store, "autoStartFocus")
	return toggle(store, "autoStartBreaks")
