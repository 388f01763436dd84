from __future__ import annotations

"""
Size-negotiation layout engine.

A window's contents are described as a tree of nodes, each carrying a height
and width SizeSpec and a margin. Containers sequence their children along a
direction, inside their padding. Every resolution pass walks the tree from
the window down, turning those sizing intents into pixel rectangles and
pushing them into the host widgets the nodes are bound to.

	window = SwitchbackWindow(host, title="Demo", width=300, height=200)
	window.add_child(
		SwitchbackGroup.horizontal(height="100%", width="100%").add_children([
			SwitchbackWidget(create_button("Ok"), height="100%", width=40),
			SwitchbackWidget(create_button("Cancel"), height="100%", width="50%"),
		])
	)
	window.apply()
"""

from enum import Enum
from typing import NamedTuple, Optional

from .constants import VERTICAL, HORIZONTAL, DIRECTIONS, BASE_NAME_PREFIX, BASELESS_NAME_PREFIX, DEBUG_LAYOUT
from .dimensions import SizeSpec, BoundingBox, resolve_size, DEFAULT_WINDOW_PADDING
from .naming import NameGenerator


# -------
# Errors
# -------

class StructureError(ValueError):
	"""The node tree is put together in a way the engine cannot lay out."""

class WidgetBindingError(RuntimeError):
	"""A node could not be connected to its host widget."""

class NoParentWindowError(WidgetBindingError):
	pass

class UnboundWidgetError(WidgetBindingError):
	pass

class UnnamedWidgetError(WidgetBindingError):
	pass

class WidgetNotFoundError(WidgetBindingError):
	pass


# -------
# Layout results
# -------

class NodeKind(Enum):
	LEAF = "leaf"
	GROUP = "group"
	TAB = "tab"
	WINDOW = "window"

class Rect(NamedTuple):
	x: float
	y: float
	width: float
	height: float

class SizeChange(NamedTuple):
	"""Outcome of resolving one node.

	``absolute`` is the share of the parent the node consumes, which the
	parent uses to sequence the next sibling. ``effective`` is what is left
	after the node's margin, and is where a bound host widget is placed.
	"""
	absolute: Rect
	effective: Rect

_EMPTY_RECT = Rect(0, 0, 0, 0)


def is_resizable(obj) -> bool:
	"""True for objects that take part in layout passes."""
	return isinstance(obj, SwitchbackNode) and obj.is_resizable

def is_container(obj) -> bool:
	"""True for objects whose ``children`` are part of the tree."""
	return isinstance(obj, SwitchbackNode) and obj.is_container

def get_children_flat(children) -> list:
	"""Every descendant of ``children``, pre-order and in declaration order.

	A parent always comes before its own children. Only containers are
	descended into, so plain records in a children list are listed but not
	walked.
	"""
	result = []
	stack = list(reversed(children))
	while stack:
		child = stack.pop()
		result.append(child)
		if is_container(child):
			stack.extend(reversed(child.children))
	return result

def _widget_records(children) -> list:
	"""Host widget records of the bound nodes under ``children``."""
	return [node.base for node in get_children_flat(children)
			if isinstance(node, SwitchbackWidget) and node.base is not None]


# -------
# Nodes
# -------

class SwitchbackNode:
	"""A box that can size and place itself inside the space offered by its parent."""

	kind = NodeKind.LEAF
	is_resizable = True
	is_container = False

	def __init__(self, *, height=0, width=0, margin=None):
		self.height = height
		self.width = width
		self.margin = margin
		self._computed = SizeChange(_EMPTY_RECT, _EMPTY_RECT)

	# ---

	@property
	def height(self) -> SizeSpec:
		return self._height

	@height.setter
	def height(self, value):
		self._height = SizeSpec.parse(value)

	@property
	def width(self) -> SizeSpec:
		return self._width

	@width.setter
	def width(self, value):
		self._width = SizeSpec.parse(value)

	@property
	def margin(self) -> BoundingBox:
		return self._margin

	@margin.setter
	def margin(self, value):
		self._margin = BoundingBox.coerce(value)

	def set_height(self, value):
		"""Change the target height. Takes effect on the next layout pass.

		Args:
			value: a number for an absolute size, "<value>%" for a relative
				size, or a SizeSpec combining the two
		"""
		self.height = value
		return self

	def set_width(self, value):
		"""Change the target width. Takes effect on the next layout pass."""
		self.width = value
		return self

	def set_margin(self, value):
		self.margin = value
		return self

	# ---

	def react_to_parent_size_change(self, new_x, new_y, parent_height, parent_width) -> SizeChange:
		"""Resolve this node inside the space offered by its parent.

		Called by the parent during a layout pass; there is no need to call
		it by hand.

		Args:
			new_x: x position the parent places this node at
			new_y: y position the parent places this node at
			parent_height: height available inside the parent
			parent_width: width available inside the parent

		Returns:
			SizeChange with the absolute and the margin-trimmed rectangles
		"""
		absolute = Rect(new_x, new_y,
						resolve_size(self._width, parent_width),
						resolve_size(self._height, parent_height))
		return self._place(absolute)

	def _place(self, absolute: Rect) -> SizeChange:
		margin = self._margin
		effective = Rect(absolute.x + margin.left,
						 absolute.y + margin.top,
						 absolute.width - margin.horizontal,
						 absolute.height - margin.vertical)
		self._computed = SizeChange(absolute, effective)
		if DEBUG_LAYOUT:
			print(f"{type(self).__name__} {getattr(self, 'name', None)}: {absolute} -> {effective}")
		self._apply_effective(effective)
		return self._computed

	def _apply_effective(self, effective: Rect) -> None:
		"""Hook for nodes that mirror their rectangle somewhere else."""
		pass

	def get_computed_rect(self) -> Rect:
		"""Absolute rectangle (x, y, width, height) from the last layout pass."""
		return self._computed.absolute

	def get_effective_rect(self) -> Rect:
		"""Margin-trimmed rectangle from the last layout pass."""
		return self._computed.effective


class SwitchbackWidget(SwitchbackNode):
	"""A node optionally wrapping a host widget record.

	With a ``base`` record, every layout pass writes the node's effective
	rectangle into the matching host widget. Without one, the node is a
	spacer that only takes up room.
	"""

	def __init__(self, base: Optional[dict] = None, *, height=0, width=0, margin=None,
				 names: NameGenerator | None = None):
		super().__init__(height=height, width=width, margin=margin)
		self.base = base
		self.name = base.get('name') if base is not None else None
		self.parent_window = None	# Host window handle, set when the window opens
		self._widget = None			# Cached host widget handle
		if names is not None:
			self.assign_name(names)

	def assign_name(self, names: NameGenerator, taken=()) -> str:
		"""Give this node a name if it does not have one yet.

		Generated names found in ``taken`` are skipped. The name is written
		back into the base record so the host creates its widget under the
		same name.
		"""
		if not self.name:
			prefix = BASE_NAME_PREFIX if self.base is not None else BASELESS_NAME_PREFIX
			name = names.next(prefix)
			while name in taken:
				name = names.next(prefix)
			self.name = name
			if self.base is not None:
				self.base['name'] = self.name
		return self.name

	def bind_window(self, window_handle) -> None:
		self.parent_window = window_handle
		self._widget = None

	def unbind_window(self) -> None:
		self.parent_window = None
		self._widget = None

	def get_widget(self):
		"""The live host widget handle for this node.

		Raises:
			NoParentWindowError: the node's window has not been opened
			UnboundWidgetError: the node has no base widget record
			UnnamedWidgetError: the node has no name to look the widget up by
			WidgetNotFoundError: the host window has no widget of that name
		"""
		if self._widget is None:
			if self.parent_window is None:
				raise NoParentWindowError("Could not get widget: widget has not been assigned to a window.")
			if self.base is None:
				raise UnboundWidgetError("Could not get widget: widget has no base to find.")
			if not self.name:
				raise UnnamedWidgetError("Could not get widget: widget needs a name to be found.")
			widget = self.parent_window.find_widget(self.name)
			if widget is None:
				raise WidgetNotFoundError(f"Could not get widget: window has no widget named {self.name!r}.")
			self._widget = widget
		return self._widget

	def change_widget_size(self, x, y, height, width) -> None:
		widget = self.get_widget()
		set_rect = getattr(widget, 'set_rect', None)
		if set_rect is not None:
			# Hosts that can move a widget in one call
			set_rect(x, y, width, height)
			return
		widget.x = x
		widget.y = y
		widget.height = height
		widget.width = width

	def _apply_effective(self, effective: Rect) -> None:
		if self.base is not None:
			self.change_widget_size(effective.x, effective.y, effective.height, effective.width)

	def __repr__(self):
		return f"{type(self).__name__}(name={self.name!r}, height={self._height!r}, width={self._width!r})"


class SwitchbackGroup(SwitchbackWidget):
	"""A node that sequences its children along a direction, inside its padding.

	Every child is offered the same span (the group's size minus padding) and
	is placed right after the previous child's absolute rectangle, so siblings
	never overlap along the direction and all share the cross axis.
	"""

	kind = NodeKind.GROUP
	is_container = True

	def __init__(self, base: Optional[dict] = None, *, direction=VERTICAL, padding=None, children=(), **kwargs):
		super().__init__(base, **kwargs)
		if direction not in DIRECTIONS:
			raise ValueError(f"Direction must be one of {DIRECTIONS}, got {direction!r}")
		self._direction = direction
		self._padding = BoundingBox.coerce(padding)
		self.children = []
		self.add_children(children)

	@classmethod
	def horizontal(cls, base=None, **kwargs):
		return cls(base, direction=HORIZONTAL, **kwargs)

	@classmethod
	def vertical(cls, base=None, **kwargs):
		return cls(base, direction=VERTICAL, **kwargs)

	@property
	def direction(self) -> str:
		return self._direction

	@property
	def padding(self) -> BoundingBox:
		return self._padding

	def add_child(self, child):
		"""Add a child, returning this group for chaining."""
		self.children.append(child)
		return self

	def add_children(self, children):
		"""Add several children at once, returning this group for chaining."""
		for child in children:
			self.add_child(child)
		return self

	def react_to_parent_size_change(self, new_x, new_y, parent_height, parent_width) -> SizeChange:
		if self.kind is NodeKind.WINDOW:
			# The root always fills exactly what the host offers
			absolute = Rect(new_x, new_y, parent_width, parent_height)
			resized = self._computed = SizeChange(absolute, absolute)
		else:
			resized = super().react_to_parent_size_change(new_x, new_y, parent_height, parent_width)
		self._position_children(resized.absolute)
		return resized

	def _position_children(self, rect: Rect) -> None:
		padding = self._padding
		children_height = rect.height - padding.vertical
		children_width = rect.width - padding.horizontal

		sequence_x = rect.x + padding.left
		sequence_y = rect.y + padding.top
		for child in self.children:
			if not is_resizable(child):
				continue
			child_size = child.react_to_parent_size_change(
				sequence_x, sequence_y, children_height, children_width).absolute
			if self._direction == HORIZONTAL:
				sequence_x += child_size.width
			else:
				sequence_y += child_size.height


class SwitchbackTab(SwitchbackGroup):
	"""One page of a tabbed window.

	A tab always fills its window, and is only laid out while the host shows
	it. Extra keyword arguments (such as ``image``) are passed through to the
	host's tab descriptor.
	"""

	kind = NodeKind.TAB

	def __init__(self, *, direction=VERTICAL, padding=None, children=(), names=None, **tab_desc):
		super().__init__(None, height="100%", width="100%", direction=direction, padding=padding,
						 children=children, names=names)
		self.tab_desc = tab_desc

	def get_descriptor(self) -> dict:
		return {**self.tab_desc, 'widgets': _widget_records(self.children)}


class SwitchbackWindow(SwitchbackGroup):
	"""Root of a layout tree, bound to one host window.

	A window holds either groups (laid out as a single page) or tabs (only
	the active one is laid out), never both. Extra keyword arguments (title,
	classification, width, height, min/max bounds, ...) are passed through
	to the host when the window opens.
	"""

	kind = NodeKind.WINDOW

	def __init__(self, host, *, direction=VERTICAL, padding=None, children=(),
				 on_update=None, on_tab_change=None, **window_desc):
		super().__init__(None, direction=direction,
						 padding=DEFAULT_WINDOW_PADDING if padding is None else padding,
						 height=window_desc.get('height'), width=window_desc.get('width'))
		self.host = host
		self.tabs = []
		self.names = NameGenerator()
		self.window_desc = window_desc
		self.base_height = None		# Last known host window size
		self.base_width = None
		self._their_on_update = on_update
		self._their_on_tab_change = on_tab_change
		self._bound_nodes = []
		self.add_children(children)

	@property
	def is_open(self) -> bool:
		return self.base is not None

	def add_child(self, child):
		"""Add a group, or a tab, returning this window for chaining."""
		if isinstance(child, SwitchbackTab):
			self.tabs.append(child)
		else:
			self.children.append(child)
		return self

	def get_children_flat(self) -> list:
		"""Every node of this window, pre-order.

		Raises:
			StructureError: if the window has both tabs and other children
		"""
		if self.children and self.tabs:
			raise StructureError("Window cannot have both children and tabs. Either a window is composed of "
								 "widgets and groups as children, or tabs as children")
		return get_children_flat(self.tabs or self.children)

	def get_descriptor(self) -> dict:
		"""Window descriptor handed to the host, with the widget records of every bound node."""
		descriptor = dict(self.window_desc)
		if self.tabs:
			descriptor['tabs'] = [tab.get_descriptor() for tab in self.tabs]
			descriptor['on_tab_change'] = self._on_tab_change
		else:
			descriptor['widgets'] = _widget_records(self.children)
		descriptor['on_update'] = self._on_window_update
		descriptor['on_close'] = self._on_window_closed
		return descriptor

	@property
	def active_tab(self) -> SwitchbackTab | None:
		if self.base is None or not self.tabs:
			return None
		index = self.base.tab_index
		if index is None or not 0 <= index < len(self.tabs):
			return None
		return self.tabs[index]

	# ---

	def open(self):
		"""Open the host window, or bring it to the front if it is already open."""
		if self.base is not None:
			self.base.bring_to_front()
			return self

		nodes = [node for node in self.get_children_flat() if isinstance(node, SwitchbackWidget)]
		taken = set()
		for node in nodes:
			if node.name:
				if node.name in taken:
					raise StructureError(f"Window has more than one widget named {node.name!r}")
				taken.add(node.name)
		for node in nodes:
			taken.add(node.assign_name(self.names, taken))

		self.base = self.host.open_window(self.get_descriptor())
		self.base_height = self.base.height
		self.base_width = self.base.width

		self._bound_nodes = nodes
		for node in self._bound_nodes:
			node.bind_window(self.base)

		return self.apply()

	def close(self):
		"""Close the host window. Opening again builds a fresh one."""
		if self.base is not None:
			base = self.base
			self._on_window_closed()
			base.close()
		return self

	def apply(self):
		"""Lay the whole tree out against the current host window size, opening it first if needed."""
		if self.base is None:
			return self.open()
		if self.tabs:
			self._resolve_active_tab()
		else:
			self.react_to_parent_size_change(0, 0, self.base_height, self.base_width)
		return self

	def _resolve_active_tab(self) -> SizeChange | None:
		window_rect = Rect(0, 0, self.base_width, self.base_height)
		self._computed = SizeChange(window_rect, window_rect)
		tab = self.active_tab
		if tab is None:
			return None
		padding = self.padding
		return tab.react_to_parent_size_change(
			padding.left, padding.top,
			window_rect.height - padding.vertical,
			window_rect.width - padding.horizontal)

	def _on_window_update(self):
		if self.base is None:
			return
		if self.base.width != self.base_width or self.base.height != self.base_height:
			self.base_width = self.base.width
			self.base_height = self.base.height
			self.apply()
		if self.base is not None and self._their_on_update is not None:
			self._their_on_update()

	def _on_window_closed(self):
		# Also called by the host when the user closes the window
		self.base = None
		for node in self._bound_nodes:
			node.unbind_window()
		self._bound_nodes = []

	def _on_tab_change(self):
		if self.base is None:
			return
		self._resolve_active_tab()
		if self._their_on_tab_change is not None:
			self._their_on_tab_change()

	def __repr__(self):
		return f"{type(self).__name__}(title={self.window_desc.get('title')!r}, open={self.is_open})"
