"""
Switchback - a size-negotiation layout engine for host windowing systems.

Describe a window's contents as a tree of groups and widgets with absolute
and relative sizes, margins and padding; the window re-computes pixel
rectangles for every widget whenever the host window is resized.

The native Win32 host lives in ``switchback.win32_host`` and is not imported
here, since it needs pywin32 on Windows.
"""

from .constants import VERTICAL, HORIZONTAL
from .dimensions import (SizeSpec, BoundingBox, resolve_size,
						 DEFAULT_GROUP_BOX_PADDING, DEFAULT_WINDOW_PADDING)
from .naming import NameGenerator
from .window_layout import (
	NodeKind, Rect, SizeChange,
	SwitchbackNode, SwitchbackWidget, SwitchbackGroup, SwitchbackTab, SwitchbackWindow,
	get_children_flat, is_resizable, is_container,
	StructureError, WidgetBindingError, NoParentWindowError, UnboundWidgetError,
	UnnamedWidgetError, WidgetNotFoundError,
)
from .widgets import (create_button, create_checkbox, create_color_picker, create_dropdown,
					  create_group_box, create_label, create_list_view, create_spinner,
					  create_text_box, create_viewport)
from .memory_host import MemoryHost

__version__ = "0.1.0"
