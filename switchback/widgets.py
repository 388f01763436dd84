"""
Factory helpers for host widget records.

Each helper returns a plain dict describing one host widget, ready to be
wrapped in a SwitchbackWidget. Records start at the default 16x16 size at
0,0; the first layout pass moves them into place.

A record built without a ``name`` gets one when its window opens. Pass a
NameGenerator as ``names`` to name it straight away with a per-kind prefix.
"""

from .constants import DEFAULT_WIDGET_SIZE
from .naming import NameGenerator


def _record(type_name, prefix, name, names: NameGenerator | None, **fields) -> dict:
	if name is None and names is not None:
		name = names.next(prefix)
	return {"type": type_name, **fields, "name": name, **DEFAULT_WIDGET_SIZE}

def create_button(title, name=None, *, names=None):
	return _record("button", "SWButton", name, names, text=title)

def create_checkbox(text=None, name=None, *, names=None):
	return _record("checkbox", "SWCheckbox", name, names, text=text)

def create_color_picker(color=None, name=None, *, names=None):
	return _record("colourpicker", "SWColorPicker", name, names, colour=color)

def create_dropdown(items=None, selected_index=None, name=None, *, names=None):
	return _record("dropdown", "SWDropDown", name, names, items=items, selectedIndex=selected_index)

def create_group_box(text=None, name=None, *, names=None):
	return _record("groupbox", "SWGroupBox", name, names, text=text)

def create_label(text=None, text_align=None, name=None, *, names=None):
	return _record("label", "SWLabel", name, names, text=text, textAlign=text_align)

def create_list_view(scrollbars=None, is_striped=None, show_column_headers=None, columns=None,
					 items=None, selected_cell=None, can_select=None, name=None, *, names=None):
	return _record("listview", "SWListView", name, names,
				   scrollbars=scrollbars,
				   isStriped=is_striped,
				   showColumnHeaders=show_column_headers,
				   columns=columns,
				   items=items,
				   selectedCell=selected_cell,
				   canSelect=can_select)

def create_spinner(text=None, name=None, *, names=None):
	return _record("spinner", "SWSpinner", name, names, text=text)

def create_text_box(text=None, name=None, *, names=None):
	return _record("textbox", "SWTextBox", name, names, text=text)

def create_viewport(viewport=None, name=None, *, names=None):
	return _record("viewport", "SWViewport", name, names, viewport=viewport)
