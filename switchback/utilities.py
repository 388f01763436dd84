"""
General utility functions for Switchback.

Parsing and formatting helpers for the values the demo command line takes:
window sizes such as ``350x300`` and tick intervals such as ``250ms``.
"""

import re

_SIZE_RE = re.compile(r'^(\d+)[xX](\d+)$')

# Tick interval units and their millisecond multipliers
_INTERVAL_UNITS = {
	'ms': 1,
	's': 1000,
	'm': 60_000,
}


def parse_window_size(size_str):
	"""
	Parse a window size string into a (width, height) tuple.

	Accepts 'WIDTHxHEIGHT' with either 'x' or 'X', e.g. '350x300'.
	Returns None if parsing fails or either side is zero.
	"""
	if not size_str:
		return None
	match = _SIZE_RE.match(size_str.strip())
	if not match:
		return None
	width, height = int(match.group(1)), int(match.group(2))
	if width == 0 or height == 0:
		return None
	return (width, height)


def format_window_size(size):
	"""Format a (width, height) pair as 'WIDTHxHEIGHT'."""
	width, height = size
	return f"{width:g}x{height:g}"


def parse_tick_interval(interval_str):
	"""
	Parse a tick interval string into milliseconds.

	Supports:
	- Special value: 'default'
	- Single units: '250ms', '2s', '1m'
	- Multiple units: '1s500ms', '1m30s'
	- Numbers without units are milliseconds: '250' -> 250

	Returns None if parsing fails.
	"""
	if not interval_str:
		return None

	interval_str = interval_str.strip().lower()
	if interval_str == 'default':
		from .constants import DEFAULT_TICK_INTERVAL_MS
		return DEFAULT_TICK_INTERVAL_MS

	if re.match(r'^\d+$', interval_str):
		return int(interval_str)

	matches = re.findall(r'(\d+(?:\.\d+)?)(ms|[sm])', interval_str)
	if not matches:
		return None

	# The matches must account for the whole string
	if ''.join(f"{value}{unit}" for value, unit in matches) != interval_str:
		return None

	units = [unit for _, unit in matches]
	if len(units) != len(set(units)):
		return None

	return sum(round(float(value) * _INTERVAL_UNITS[unit]) for value, unit in matches)


def format_tick_interval(milliseconds):
	"""
	Convert milliseconds back to the most compact interval string.

	Examples:
	- 250 -> "250ms"
	- 1000 -> "1s"
	- 1500 -> "1s500ms"
	- 90000 -> "1m30s"
	"""
	if milliseconds == 0:
		return "0"
	parts = []
	remaining = milliseconds
	for unit, unit_value in sorted(_INTERVAL_UNITS.items(), key=lambda item: -item[1]):
		if remaining >= unit_value:
			count, remaining = divmod(remaining, unit_value)
			parts.append(f"{count}{unit}")
	return ''.join(parts)


def validate_tick_interval(milliseconds):
	"""
	Validate that a tick interval meets the host's minimum.
	Returns the interval in milliseconds if valid, None if invalid.
	"""
	if milliseconds is None:
		return None

	from .constants import MIN_TICK_INTERVAL_MS
	if milliseconds < MIN_TICK_INTERVAL_MS:
		return None

	return milliseconds
