"""
Native Win32 host for Switchback layouts.

Opens a real top-level window per window descriptor and creates one native
child control per widget record (BUTTON, STATIC, EDIT, COMBOBOX, LISTBOX).
The layout engine moves the controls through their widget handles. A window
timer drives the host update tick, and tabbed windows get a strip of tab
buttons across the top of the client area, below which the tab pages are
laid out.

Requires pywin32, and only works on Windows.
"""

from __future__ import annotations

import ctypes
from ctypes import wintypes
from typing import Optional, Any

import win32api, win32con, win32gui

from .constants import (DEFAULT_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS,
						TAB_STRIP_HEIGHT, TAB_BUTTON_WIDTH, TAB_BUTTON_ID_BASE, WIDGET_ID_BASE)

user32 = ctypes.windll.user32

TIMER_TICK_ID = 1

# Widget record type -> (window class, extra style)
CONTROL_CLASSES = {
	"button":		("BUTTON",		win32con.BS_PUSHBUTTON),
	"checkbox":		("BUTTON",		win32con.BS_AUTOCHECKBOX),
	"groupbox":		("BUTTON",		win32con.BS_GROUPBOX),
	"label":		("STATIC",		win32con.SS_LEFT),
	"textbox":		("EDIT",		win32con.WS_BORDER | win32con.ES_AUTOHSCROLL),
	"spinner":		("EDIT",		win32con.WS_BORDER | win32con.ES_AUTOHSCROLL),
	"dropdown":		("COMBOBOX",	win32con.CBS_DROPDOWNLIST | win32con.WS_VSCROLL),
	"listview":		("LISTBOX",		win32con.WS_BORDER | win32con.WS_VSCROLL | win32con.LBS_NOTIFY),
}
DEFAULT_CONTROL_CLASS = ("STATIC", win32con.SS_LEFT)

# Messages used to fill list-like controls
_ADD_STRING = {
	"COMBOBOX": win32con.CB_ADDSTRING,
	"LISTBOX": win32con.LB_ADDSTRING,
}

class MINMAXINFO(ctypes.Structure):
	_fields_ = [
		("ptReserved", wintypes.POINT),
		("ptMaxSize", wintypes.POINT),
		("ptMaxPosition", wintypes.POINT),
		("ptMinTrackSize", wintypes.POINT),
		("ptMaxTrackSize", wintypes.POINT),
	]


def _rect_field(index, doc):
	def getter(self):
		return self._rect[index]
	def setter(self, value):
		self._rect[index] = value
		self._move()
	return property(getter, setter, doc=doc)


class Win32WidgetHandle:
	"""Handle to one native child control.

	Positions are in layout coordinates; ``origin_y`` shifts them below any
	host chrome (the tab strip) when the control is moved.
	"""

	def __init__(self, hwnd: int, record: dict, origin_y=0):
		self.hwnd = hwnd
		self.name = record.get('name')
		self.type = record.get('type')
		self.origin_y = origin_y
		self._rect = [record.get('x', 0), record.get('y', 0), record.get('width', 0), record.get('height', 0)]

	x = _rect_field(0, "Left edge in layout coordinates.")
	y = _rect_field(1, "Top edge in layout coordinates.")
	width = _rect_field(2, "Width in pixels.")
	height = _rect_field(3, "Height in pixels.")

	def _move(self):
		x, y, width, height = self._rect
		# The layout engine passes negative sizes through; the control cannot have one
		win32gui.MoveWindow(self.hwnd, int(x), int(y) + self.origin_y,
							max(0, int(width)), max(0, int(height)), True)

	def set_rect(self, x, y, width, height):
		"""Move and resize the control with a single MoveWindow call."""
		self._rect = [x, y, width, height]
		self._move()

	def show(self, visible: bool):
		win32gui.ShowWindow(self.hwnd, win32con.SW_SHOW if visible else win32con.SW_HIDE)


class Win32WindowHandle:
	"""Handle to one native top-level window."""

	_window_style = win32con.WS_OVERLAPPEDWINDOW
	_window_style_ex = 0

	def __init__(self, host: Win32Host, descriptor: dict):
		self.host = host
		self.descriptor = descriptor
		self._on_update = descriptor.get('on_update')
		self._on_tab_change = descriptor.get('on_tab_change')
		self._on_close = descriptor.get('on_close')
		self._widget_map: dict[str, Win32WidgetHandle] = {}
		self._tab_widgets: list[list[Win32WidgetHandle]] = []
		self._last_size = (0, 0)

		tabs = descriptor.get('tabs') or ()
		self.tab_index = 0 if tabs else None
		self._origin_y = TAB_STRIP_HEIGHT if tabs else 0

		width, height = self._get_window_size_for_layout(
			descriptor.get('width') or host.default_size[0],
			(descriptor.get('height') or host.default_size[1]) + self._origin_y)
		print(f"Creating window '{descriptor.get('title', '')}' size {width}x{height}")

		hinstance = win32api.GetModuleHandle(None)
		self.hwnd = win32gui.CreateWindow(
			host.window_class_name,
			descriptor.get('title', ''),
			self._window_style,
			descriptor.get('x', win32con.CW_USEDEFAULT),
			descriptor.get('y', win32con.CW_USEDEFAULT),
			width, height,
			0, 0, hinstance, None
		)
		Win32Host._window_map[self.hwnd] = self

		control_id = WIDGET_ID_BASE
		for record in descriptor.get('widgets') or ():
			self._create_control(record, control_id)
			control_id += 1
		for index, tab in enumerate(tabs):
			self._create_tab_button(tab, index)
			tab_widgets = []
			for record in tab.get('widgets') or ():
				tab_widgets.append(self._create_control(record, control_id))
				control_id += 1
			self._tab_widgets.append(tab_widgets)
		self._show_active_tab()

		self._last_size = (self.width, self.height)
		user32.SetTimer(self.hwnd, TIMER_TICK_ID, host.tick_interval_ms, None)
		win32gui.ShowWindow(self.hwnd, win32con.SW_SHOWNORMAL)
		win32gui.UpdateWindow(self.hwnd)

	# ---

	def _get_window_size_for_layout(self, layout_width, layout_height):
		"""Given a client area size, return the total window size including borders and title."""
		rect = wintypes.RECT(0, 0, int(layout_width), int(layout_height))
		if not user32.AdjustWindowRectEx(ctypes.byref(rect), self._window_style, False, self._window_style_ex):
			raise ctypes.WinError()
		return rect.right - rect.left, rect.bottom - rect.top

	def _create_control(self, record: dict, control_id: int) -> Win32WidgetHandle:
		class_name, style = CONTROL_CLASSES.get(record.get('type'), DEFAULT_CONTROL_CLASS)
		hwnd = win32gui.CreateWindow(
			class_name,
			str(record.get('text') or ''),
			win32con.WS_CHILD | win32con.WS_VISIBLE | style,
			int(record.get('x', 0)), int(record.get('y', 0)) + self._origin_y,
			int(record.get('width', 0)), int(record.get('height', 0)),
			self.hwnd, control_id, win32api.GetModuleHandle(None), None
		)
		win32gui.SendMessage(hwnd, win32con.WM_SETFONT, win32gui.GetStockObject(win32con.DEFAULT_GUI_FONT), 0)
		add_string = _ADD_STRING.get(class_name)
		if add_string is not None:
			for item in record.get('items') or ():
				win32gui.SendMessage(hwnd, add_string, 0, str(item))
			if record.get('selectedIndex') is not None and class_name == "COMBOBOX":
				win32gui.SendMessage(hwnd, win32con.CB_SETCURSEL, record['selectedIndex'], 0)

		handle = Win32WidgetHandle(hwnd, record, self._origin_y)
		if handle.name:
			self._widget_map[handle.name] = handle
		return handle

	def _create_tab_button(self, tab: dict, index: int):
		title = tab.get('title') or f"Tab {index + 1}"
		win32gui.CreateWindow(
			"BUTTON", title,
			win32con.WS_CHILD | win32con.WS_VISIBLE | win32con.BS_PUSHBUTTON,
			index * TAB_BUTTON_WIDTH, 0, TAB_BUTTON_WIDTH, TAB_STRIP_HEIGHT,
			self.hwnd, TAB_BUTTON_ID_BASE + index, win32api.GetModuleHandle(None), None
		)

	def _show_active_tab(self):
		for index, tab_widgets in enumerate(self._tab_widgets):
			for widget in tab_widgets:
				widget.show(index == self.tab_index)

	# --- window handle contract

	@property
	def is_open(self) -> bool:
		return self.hwnd is not None

	@property
	def width(self):
		if self.hwnd is None:
			return self._last_size[0]
		left, top, right, bottom = win32gui.GetClientRect(self.hwnd)
		return right - left

	@property
	def height(self):
		if self.hwnd is None:
			return self._last_size[1]
		left, top, right, bottom = win32gui.GetClientRect(self.hwnd)
		return bottom - top - self._origin_y

	def find_widget(self, name) -> Optional[Win32WidgetHandle]:
		return self._widget_map.get(name)

	def bring_to_front(self):
		if self.hwnd is not None:
			win32gui.ShowWindow(self.hwnd, win32con.SW_RESTORE)
			win32gui.SetForegroundWindow(self.hwnd)

	def close(self):
		if self.hwnd is not None:
			win32gui.DestroyWindow(self.hwnd)

	def select_tab(self, index):
		self.tab_index = index
		self._show_active_tab()
		if self._on_tab_change is not None:
			self._on_tab_change()

	# --- messages

	def handle_message(self, msg: int, wparam: int, lparam: int) -> int | None:
		"""Handle a window message, returning None to allow default processing."""
		if msg == win32con.WM_TIMER and wparam == TIMER_TICK_ID:
			if self._on_update is not None:
				self._on_update()
			return 0
		elif msg == win32con.WM_SIZE:
			# Lay out straight away rather than waiting for the next tick
			if self._on_update is not None:
				self._on_update()
			return 0
		elif msg == win32con.WM_COMMAND:
			control_id = win32api.LOWORD(wparam)
			index = control_id - TAB_BUTTON_ID_BASE
			if 0 <= index < len(self._tab_widgets):
				self.select_tab(index)
				return 0
		elif msg == win32con.WM_GETMINMAXINFO:
			self._apply_size_limits(lparam)
			return 0
		elif msg == win32con.WM_DESTROY:
			self._destroyed()
			return 0
		return None

	def _apply_size_limits(self, lparam):
		descriptor = self.descriptor
		info = ctypes.cast(lparam, ctypes.POINTER(MINMAXINFO)).contents
		if descriptor.get('min_width') is not None or descriptor.get('min_height') is not None:
			width, height = self._get_window_size_for_layout(
				descriptor.get('min_width') or 0, (descriptor.get('min_height') or 0) + self._origin_y)
			info.ptMinTrackSize.x, info.ptMinTrackSize.y = width, height
		if descriptor.get('max_width') is not None or descriptor.get('max_height') is not None:
			width, height = self._get_window_size_for_layout(
				descriptor.get('max_width') or info.ptMaxTrackSize.x,
				(descriptor.get('max_height') or info.ptMaxTrackSize.y) + self._origin_y)
			info.ptMaxTrackSize.x, info.ptMaxTrackSize.y = width, height

	def _destroyed(self):
		self._last_size = (self.width, self.height)
		user32.KillTimer(self.hwnd, TIMER_TICK_ID)
		Win32Host._window_map.pop(self.hwnd, None)
		self.hwnd = None
		self._widget_map.clear()
		print("Window destroyed")
		if self._on_close is not None:
			self._on_close()
		if self.host.quit_on_last_close and not Win32Host._window_map:
			win32gui.PostQuitMessage(0)


class Win32Host:
	"""Host that opens native Win32 windows.

	Args:
		tick_interval_ms: how often the update tick fires
		default_size: (width, height) client size for descriptors without one
		quit_on_last_close: post WM_QUIT when the last window is destroyed
	"""

	window_class_name = "SwitchbackWindow"
	_window_class_registered = False
	_window_map: dict[int, Win32WindowHandle] = {}

	def __init__(self, tick_interval_ms=DEFAULT_TICK_INTERVAL_MS, default_size=(200, 200), quit_on_last_close=True):
		if tick_interval_ms < MIN_TICK_INTERVAL_MS:
			raise ValueError(f"Tick interval must be at least {MIN_TICK_INTERVAL_MS}ms (got {tick_interval_ms})")
		self.tick_interval_ms = tick_interval_ms
		self.default_size = default_size
		self.quit_on_last_close = quit_on_last_close
		if not Win32Host._window_class_registered:
			self._register_window_class()
			Win32Host._window_class_registered = True

	@classmethod
	def _register_window_class(cls):
		wc = win32gui.WNDCLASS()
		wc.lpfnWndProc = cls._window_proc
		wc.lpszClassName = cls.window_class_name
		wc.hInstance = win32api.GetModuleHandle(None)
		wc.hCursor = win32gui.LoadCursor(0, win32con.IDC_ARROW)
		wc.hbrBackground = win32con.COLOR_BTNFACE + 1
		wc.style = win32con.CS_HREDRAW | win32con.CS_VREDRAW
		try:
			print("Registering window class...")
			win32gui.RegisterClass(wc)
		except win32gui.error as e:
			if e.winerror != 1410:  # ERROR_CLASS_ALREADY_EXISTS
				print(f"Window class registration error: {e}")
				raise
			print("Window class already registered")

	@staticmethod
	def _window_proc(hwnd, msg, wparam, lparam):
		window = Win32Host._window_map.get(hwnd)
		if window is not None:
			try:
				result = window.handle_message(msg, wparam, lparam)
			except Exception as e:
				# Exceptions cannot cross the window procedure boundary
				print(f"Window procedure error: {e}")
				result = None
			if result is not None:
				return result
		return win32gui.DefWindowProc(hwnd, msg, wparam, lparam)

	def open_window(self, descriptor: dict[str, Any]) -> Win32WindowHandle:
		return Win32WindowHandle(self, descriptor)

	def run(self):
		"""Pump messages until the last window closes."""
		win32gui.PumpMessages()
