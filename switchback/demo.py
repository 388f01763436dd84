"""
Demo layouts and a layout dump.

Builds the sizing examples (relative widths, relative heights, padding,
margins) and a page showing every widget kind, either side by side in one
window or as two tabs.
"""

from .constants import HORIZONTAL, VERTICAL
from .dimensions import BoundingBox, SizeSpec, DEFAULT_GROUP_BOX_PADDING
from .window_layout import (SwitchbackWidget, SwitchbackGroup, SwitchbackTab, SwitchbackWindow,
							is_container)
from .utilities import format_window_size
from .widgets import (create_button, create_checkbox, create_color_picker, create_dropdown,
					  create_group_box, create_label, create_list_view, create_spinner,
					  create_text_box, create_viewport)

DEMO_WINDOW_DESC = {
	"classification": "switchback-demo",
	"title": "Switchback Demo",
	"width": 350,
	"height": 300,
	"min_width": 300,
	"max_width": 500,
	"min_height": 200,
	"max_height": 400,
}


def build_sizing_examples():
	"""Four group boxes, each a quarter of the height, showing one sizing feature."""
	return SwitchbackGroup.vertical(
		height="100%",
		width=SizeSpec(relative=100, absolute=-75),
		padding=BoundingBox(right=4),
		children=(
			SwitchbackGroup.horizontal(create_group_box("Relative Width Buttons:"),
				height="25%", width="100%", padding=DEFAULT_GROUP_BOX_PADDING,
				children=(
					SwitchbackWidget(create_button("100% - 40px"), height="100%",
									 width=SizeSpec(relative=100, absolute=-40)),
					SwitchbackWidget(create_button("40px"), height="100%", width=40),
				)),
			SwitchbackGroup.vertical(create_group_box("Relative Height Buttons:"),
				height="25%", width="100%", padding=DEFAULT_GROUP_BOX_PADDING,
				children=(
					SwitchbackWidget(create_button("50%"), height="50%", width="100%"),
					SwitchbackWidget(create_button("50%"), height="50%", width="100%"),
				)),
			SwitchbackGroup.vertical(create_group_box("Padding Example:"),
				height="25%", width="100%", padding=20,
				children=(
					SwitchbackWidget(create_button("Button affected by padding"), height="100%", width="100%"),
				)),
			SwitchbackGroup.horizontal(create_group_box("Margin Example:"),
				height="25%", width="100%", padding=DEFAULT_GROUP_BOX_PADDING,
				children=(
					SwitchbackWidget(create_button("Top margin"), height="100%", width="50%",
									 margin=BoundingBox(top=10)),
					SwitchbackWidget(create_button("Bottom margin"), height="100%", width="50%",
									 margin=BoundingBox(bottom=10)),
				)),
		)
	)


def build_widget_gallery(width=75):
	"""One of every widget kind, stacked in a group box."""
	return SwitchbackGroup.vertical(create_group_box("Widgets:", "Gbox5"),
		height="100%", width=width, padding=DEFAULT_GROUP_BOX_PADDING,
		children=(
			SwitchbackWidget(create_button("Button"), height=20, width="100%"),
			SwitchbackWidget(create_checkbox("Checkbox"), height=20, width="100%"),
			SwitchbackGroup.horizontal(height=16, width="100%", children=(
				SwitchbackWidget(create_color_picker(27), height=16, width=16),
				SwitchbackWidget(create_label("Label", "left"), height=16,
								 width=SizeSpec(relative=100, absolute=-16)),
			)),
			SwitchbackWidget(create_dropdown(["Dropdown", "-----", "Item 1", "Item 2"], 0),
							 height=16, width="100%", margin=BoundingBox(bottom=2)),
			SwitchbackWidget(create_spinner("Spinner"), height=16, width="100%"),
			SwitchbackWidget(create_text_box("Text Box"), height=16, width="100%"),
			SwitchbackWidget(create_list_view("vertical", True, True, [{"header": "Header 1"}],
											  ["Item 1", "Item 2", "Item 3"]),
							 height=50, width="100%"),
			SwitchbackWidget(create_viewport(), height=30, width="100%"),
			SwitchbackGroup.vertical(create_group_box("Empty Box", "Gbox6"), height=20, width="100%"),
		)
	)


def build_demo_window(host, *, tabs=False, **window_desc):
	"""Demo window; ``tabs`` puts the two pages on separate tabs instead of side by side."""
	desc = {**DEMO_WINDOW_DESC, **window_desc}
	if tabs:
		return SwitchbackWindow(host, direction=VERTICAL, children=(
			SwitchbackTab(title="Sizing", children=(build_sizing_examples(),)),
			SwitchbackTab(title="Widgets", children=(build_widget_gallery(),)),
		), **desc)
	return SwitchbackWindow(host, direction=HORIZONTAL, children=(
		build_sizing_examples(),
		build_widget_gallery(),
	), **desc)

# -------

def dump_layout(window: SwitchbackWindow, indent="  ") -> list[str]:
	"""One line per node with its effective rectangle, indented by depth."""
	lines = []

	def dump_node(node, depth):
		if not isinstance(node, SwitchbackWidget):
			return
		x, y, w, h = node.get_effective_rect()
		kind = node.base.get('type') if node.base is not None else node.kind.value
		lines.append(f"{indent * depth}{kind} {node.name}: x={x:g}, y={y:g}, width={w:g}, height={h:g}")
		if is_container(node):
			for child in node.children:
				dump_node(child, depth + 1)

	x, y, w, h = window.get_computed_rect()
	lines.append(f"window: x={x:g}, y={y:g}, width={w:g}, height={h:g}")
	for child in (window.tabs or window.children):
		dump_node(child, 1)
	return lines


def run_demo(host, *, tabs=False, resize=None, size=None):
	"""Open the demo window and print its layout, optionally again after a resize.

	Returns the opened window.
	"""
	window_desc = {}
	if size is not None:
		window_desc['width'], window_desc['height'] = size
	window = build_demo_window(host, tabs=tabs, **window_desc)
	window.apply()

	print("Layout at open:")
	for line in dump_layout(window):
		print(line)

	if resize is not None:
		window.base.resize(*resize)
		window.base.tick()
		size = format_window_size((window.base.width, window.base.height))
		print(f"\nLayout after resize to {size}:")
		for line in dump_layout(window):
			print(line)
	return window
