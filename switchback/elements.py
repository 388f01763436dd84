"""
Declarative element builders.

A thin layer over the node constructors so a layout can be written as one
nested expression:

	window(host, group(
		widget(button("Ok"), height="100%", width=40),
		widget(button("Cancel"), height="100%", width="50%"),
		direction=HORIZONTAL, height="100%", width="100%",
	), title="Demo", width=300, height=200)

Nested lists and tuples of children are flattened, ``None`` children are
dropped, and a string child of a text widget becomes its ``text``.
"""

from . import widgets
from .window_layout import SwitchbackWidget, SwitchbackGroup, SwitchbackTab, SwitchbackWindow


def flatten_children(children) -> list:
	result = []
	for child in children:
		if child is None:
			continue
		if isinstance(child, (list, tuple)):
			result.extend(flatten_children(child))
		else:
			result.append(child)
	return result

def _text_from(children, text):
	"""The last string child wins over the ``text`` prop."""
	for child in flatten_children(children):
		if isinstance(child, str):
			text = child
	return text

# --- layout elements

def window(host, *children, **props) -> SwitchbackWindow:
	return SwitchbackWindow(host, children=flatten_children(children), **props)

def group(*children, base=None, **props) -> SwitchbackGroup:
	return SwitchbackGroup(base, children=flatten_children(children), **props)

def tab(*children, **props) -> SwitchbackTab:
	return SwitchbackTab(children=flatten_children(children), **props)

def widget(*children, **props) -> SwitchbackWidget:
	"""Wrap exactly one widget record in a node."""
	children = flatten_children(children)
	if len(children) != 1:
		raise ValueError(f"Widget can have only 1 child, got {len(children)}")
	return SwitchbackWidget(children[0], **props)

def spacer(**props) -> SwitchbackWidget:
	return SwitchbackWidget(None, **props)

# --- widget records

def button(*children, text="", name=None):
	return widgets.create_button(_text_from(children, text), name)

def checkbox(*children, text="", name=None):
	return widgets.create_checkbox(_text_from(children, text), name)

def color_picker(*children, color=None, name=None):
	return widgets.create_color_picker(color, name)

def dropdown(*children, items=None, selected_index=None, name=None):
	return widgets.create_dropdown(items, selected_index, name)

def group_box(*children, text="", name=None):
	return widgets.create_group_box(_text_from(children, text), name)

def label(*children, text="", text_align=None, name=None):
	return widgets.create_label(_text_from(children, text), text_align, name)

def list_view(*children, scrollbars=None, is_striped=None, show_column_headers=None, columns=None,
			  items=None, selected_cell=None, can_select=None, name=None):
	return widgets.create_list_view(scrollbars, is_striped, show_column_headers, columns,
									items, selected_cell, can_select, name)

def spinner(*children, text="", name=None):
	return widgets.create_spinner(_text_from(children, text), name)

def text_box(*children, text="", name=None):
	return widgets.create_text_box(_text_from(children, text), name)

def viewport(*children, viewport=None, name=None):
	return widgets.create_viewport(viewport, name)
