"""
Unique name generation for anonymous widgets and layout nodes.
"""

import itertools


class NameGenerator:
	"""Monotonic counter handing out names such as ``SWButton0``, ``SWBase1``.

	A generator never reuses a number, whatever prefix is asked for. Each
	window owns one, so names are unique within the window that binds them.
	"""

	def __init__(self, start=0):
		self._counter = itertools.count(start)

	def next(self, prefix=None) -> str:
		return f"{prefix or ''}{next(self._counter)}"

	__call__ = next
