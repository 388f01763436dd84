"""
Constants and configuration values for the Switchback layout engine.
"""

import os

# Layout directions
VERTICAL = "VERTICAL"			# Children are sequenced top to bottom
HORIZONTAL = "HORIZONTAL"		# Children are sequenced left to right
DIRECTIONS = (VERTICAL, HORIZONTAL)

# Default widget record geometry (before the first layout pass moves it)
DEFAULT_WIDGET_SIZE = {
	"height": 16,
	"width": 16,
	"x": 0,
	"y": 0,
}

# Name prefixes for anonymous nodes and widget records
BASE_NAME_PREFIX = "SWBase"
BASELESS_NAME_PREFIX = "SWBaseless"

# Win32 host settings
DEFAULT_TICK_INTERVAL_MS = 250		# Host update tick
MIN_TICK_INTERVAL_MS = 10
TAB_STRIP_HEIGHT = 24				# Height of the tab button strip
TAB_BUTTON_WIDTH = 80
TAB_BUTTON_ID_BASE = 0x4000			# Control IDs of the tab buttons
WIDGET_ID_BASE = 0x1000				# Control IDs of the widget controls

# Debugging
DEBUG_LAYOUT = bool(os.environ.get("SWITCHBACK_DEBUG"))
