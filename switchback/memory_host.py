"""
Headless host that keeps windows and widgets in memory.

Implements the same contract as a real windowing host: ``open_window`` takes
a window descriptor and returns a window handle with ``find_widget``,
``bring_to_front``, ``close``, ``width``/``height`` and ``tab_index``, and
calls the descriptor's ``on_close`` when it closes. Widget handles are plain
objects whose ``x``/``y``/``width``/``height`` the layout engine writes into.

Resizes, ticks and tab switches that a user would cause are simulated with
``resize()``, ``tick()`` and ``select_tab()``.
"""

from __future__ import annotations

from typing import Optional, Any


class MemoryWidget:
	"""A host widget created from one widget record."""

	def __init__(self, record: dict):
		self.record = record
		self.type = record.get('type')
		self.name = record.get('name')
		self.x = record.get('x', 0)
		self.y = record.get('y', 0)
		self.width = record.get('width', 0)
		self.height = record.get('height', 0)
		self.is_visible = True

	@property
	def rect(self):
		return (self.x, self.y, self.width, self.height)

	def __repr__(self):
		return f"MemoryWidget({self.type}, {self.name!r}, rect={self.rect})"


class MemoryWindow:
	def __init__(self, host: MemoryHost, descriptor: dict):
		self.host = host
		self.descriptor = descriptor
		self.title = descriptor.get('title')
		self.is_open = True
		self.front_count = 0
		self._on_update = descriptor.get('on_update')
		self._on_tab_change = descriptor.get('on_tab_change')
		self._on_close = descriptor.get('on_close')

		self.tabs = [[MemoryWidget(record) for record in tab.get('widgets') or ()]
					 for tab in descriptor.get('tabs') or ()]
		self.widgets = [MemoryWidget(record) for record in descriptor.get('widgets') or ()]
		self._widget_map = {widget.name: widget for widget in self.all_widgets() if widget.name}

		self.tab_index = 0 if self.tabs else None
		self.width = self.height = 0
		self.resize(descriptor.get('width') or host.default_size[0],
					descriptor.get('height') or host.default_size[1])
		self._show_active_tab()

	def all_widgets(self):
		yield from self.widgets
		for tab_widgets in self.tabs:
			yield from tab_widgets

	def find_widget(self, name) -> Optional[MemoryWidget]:
		return self._widget_map.get(name)

	def bring_to_front(self):
		self.front_count += 1

	def close(self):
		if self.is_open:
			self.is_open = False
			self.host.windows.remove(self)
			if self._on_close is not None:
				self._on_close()

	# --- user actions

	def resize(self, width, height):
		"""Change the window size, clamped to the descriptor's min/max bounds."""
		self.width = self._clamp(width, 'min_width', 'max_width')
		self.height = self._clamp(height, 'min_height', 'max_height')
		return self

	def _clamp(self, value, min_key, max_key):
		minimum = self.descriptor.get(min_key)
		maximum = self.descriptor.get(max_key)
		if minimum is not None:
			value = max(value, minimum)
		if maximum is not None:
			value = min(value, maximum)
		return value

	def tick(self):
		"""Fire one host update tick."""
		if self.is_open and self._on_update is not None:
			self._on_update()

	def select_tab(self, index):
		if not 0 <= index < len(self.tabs):
			raise IndexError(f"Tab index {index} out of range for {len(self.tabs)} tabs")
		self.tab_index = index
		self._show_active_tab()
		if self._on_tab_change is not None:
			self._on_tab_change()

	def _show_active_tab(self):
		for index, tab_widgets in enumerate(self.tabs):
			for widget in tab_widgets:
				widget.is_visible = index == self.tab_index


class MemoryHost:
	"""Host that opens MemoryWindows.

	Args:
		default_size: (width, height) for windows whose descriptor has none
	"""

	def __init__(self, default_size=(200, 200)):
		self.default_size = default_size
		self.windows: list[MemoryWindow] = []
		self.opened_count = 0

	def open_window(self, descriptor: dict[str, Any]) -> MemoryWindow:
		window = MemoryWindow(self, descriptor)
		self.windows.append(window)
		self.opened_count += 1
		return window
