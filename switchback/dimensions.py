from __future__ import annotations

"""
Sizing primitives for the layout engine.

SizeSpec describes how much of its parent a node claims along one axis, and
BoundingBox describes a 4-sided inset (margin outside a node, padding inside a
container). Both are immutable tuples, so they can be shared freely between
nodes and compared by value.
"""

import re
from collections.abc import Mapping

# A size string is a plain percentage, e.g. "50%" or "12.5%"
_PERCENT_RE = re.compile(r'^\d+(\.\d+)?%$')
_PERCENT_VALUE_RE = re.compile(r'(\d+)(?:\.\d+)?%')


class SizeSpec(tuple):
	"""Size along one axis, as an absolute pixel count and/or a percentage.

	The two parts are additive: ``SizeSpec(absolute=-40, relative=100)`` is
	"the whole parent span minus 40 pixels". An unset part contributes 0.
	"""
	__slots__ = ()

	def __new__(cls, absolute=None, relative=None):
		return tuple.__new__(cls, (absolute, relative))

	@property
	def absolute(self):
		return self[0]

	@property
	def relative(self):
		return self[1]

	@classmethod
	def parse(cls, value) -> SizeSpec:
		"""Convert a convenience size value into a SizeSpec.

		- numbers are pure absolute sizes
		- strings must look like "<number>%" and are pure relative sizes
		- SizeSpec instances are returned unchanged
		- anything else (a mapping or an object with absolute/relative) is
		  copied through as-is

		Raises:
			TypeError: if a string is not a percentage
		"""
		if isinstance(value, SizeSpec):
			return value
		if isinstance(value, bool):
			value = int(value)
		if isinstance(value, (int, float)):
			return cls(absolute=value)
		if isinstance(value, str):
			if not _PERCENT_RE.match(value):
				raise TypeError(f'Size value expected a number or a string in the form of "[value]%" '
								f'(where [value] is a number), but got {value!r}.')
			return cls(relative=int(_PERCENT_VALUE_RE.search(value).group(1)))
		if isinstance(value, Mapping):
			return cls(absolute=value.get('absolute'), relative=value.get('relative'))
		return cls(absolute=getattr(value, 'absolute', None), relative=getattr(value, 'relative', None))

	def resolve(self, parent_span):
		"""Resolve this size against the span offered by the parent."""
		return resolve_size(self, parent_span)

	def __repr__(self):
		parts = []
		if self.absolute is not None:
			parts.append(f"absolute={self.absolute}")
		if self.relative is not None:
			parts.append(f"relative={self.relative}")
		return f"SizeSpec({', '.join(parts)})"


def resolve_size(spec: SizeSpec, parent_span):
	"""Pixel size of ``spec`` within ``parent_span``.

	``parent_span * relative / 100 + absolute``, with each missing term as 0.
	"""
	size = parent_span * (spec.relative / 100.0) if spec.relative else 0
	if spec.absolute:
		size += spec.absolute
	return size


class BoundingBox(tuple):
	"""Offsets from the top, bottom, left and right of a space.

	Unset sides read as 0.
	"""
	__slots__ = ()

	def __new__(cls, top=None, bottom=None, left=None, right=None):
		return tuple.__new__(cls, (top, bottom, left, right))

	@classmethod
	def coerce(cls, value) -> BoundingBox:
		"""Build a BoundingBox from None, a BoundingBox, a mapping of sides, or a single number."""
		if value is None:
			return cls()
		if isinstance(value, BoundingBox):
			return value
		if isinstance(value, Mapping):
			return cls(**value)
		if isinstance(value, (int, float)):
			return cls(value, value, value, value)
		raise TypeError(f"Cannot make a BoundingBox from {type(value).__name__}: {value!r}")

	@property
	def top(self):
		return self[0] or 0

	@property
	def bottom(self):
		return self[1] or 0

	@property
	def left(self):
		return self[2] or 0

	@property
	def right(self):
		return self[3] or 0

	@property
	def vertical(self):
		"""Combined top and bottom inset."""
		return self.top + self.bottom

	@property
	def horizontal(self):
		"""Combined left and right inset."""
		return self.left + self.right

	def __repr__(self):
		sides = zip(("top", "bottom", "left", "right"), self)
		return f"BoundingBox({', '.join(f'{k}={v}' for k, v in sides if v is not None)})"


# Default padding of a group box widget, leaving room for its caption
DEFAULT_GROUP_BOX_PADDING = BoundingBox(top=12, bottom=4, left=4, right=4)

# Default padding inside a window, leaving room for its title bar
DEFAULT_WINDOW_PADDING = BoundingBox(top=16, bottom=16, left=4, right=4)
