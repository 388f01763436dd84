#!/usr/bin/env python3
"""
Unit tests for window size and tick interval parsing.

This module tests the parse/format helpers in switchback/utilities.py.
"""

import unittest
import sys
import os

# Add the project root to the path so we can import switchback
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from switchback.utilities import (parse_window_size, format_window_size, parse_tick_interval,
								  format_tick_interval, validate_tick_interval)

class TestWindowSizeParsing(unittest.TestCase):
	"""Test the parse_window_size function."""

	def test_valid_sizes(self):
		self.assertEqual(parse_window_size("350x300"), (350, 300))
		self.assertEqual(parse_window_size("350X300"), (350, 300))
		self.assertEqual(parse_window_size(" 1x1 "), (1, 1))

	def test_invalid_sizes(self):
		"""Test that malformed or empty sizes are rejected."""
		for value in ("", None, "350", "350x", "x300", "350*300", "-1x10", "1.5x2", "abc"):
			with self.subTest(value=value):
				self.assertIsNone(parse_window_size(value))

	def test_zero_sides_rejected(self):
		self.assertIsNone(parse_window_size("0x300"))
		self.assertIsNone(parse_window_size("350x0"))

	def test_format(self):
		self.assertEqual(format_window_size((350, 300)), "350x300")
		self.assertEqual(format_window_size((267.0, 68.0)), "267x68")

class TestTickIntervalParsing(unittest.TestCase):
	"""Test the parse_tick_interval function."""

	def test_valid_milliseconds(self):
		self.assertEqual(parse_tick_interval("250ms"), 250)
		self.assertEqual(parse_tick_interval("250"), 250)
		self.assertEqual(parse_tick_interval("0"), 0)

	def test_valid_seconds(self):
		self.assertEqual(parse_tick_interval("1s"), 1000)
		self.assertEqual(parse_tick_interval("0.5s"), 500)

	def test_valid_minutes(self):
		self.assertEqual(parse_tick_interval("1m"), 60_000)

	def test_combined_units(self):
		"""Test parsing intervals with more than one unit."""
		self.assertEqual(parse_tick_interval("1s500ms"), 1500)
		self.assertEqual(parse_tick_interval("1m30s"), 90_000)
		self.assertEqual(parse_tick_interval("1M30S"), 90_000)

	def test_default(self):
		self.assertEqual(parse_tick_interval("default"), 250)
		self.assertEqual(parse_tick_interval(" DEFAULT "), 250)

	def test_invalid_formats(self):
		"""Test that invalid formats return None."""
		for value in ("", None, "1h", "abc", "1s1s", "2s x", "ms", "-5ms", "1.5"):
			with self.subTest(value=value):
				self.assertIsNone(parse_tick_interval(value))

class TestTickIntervalFormatting(unittest.TestCase):
	"""Test the format_tick_interval function."""

	def test_format(self):
		self.assertEqual(format_tick_interval(250), "250ms")
		self.assertEqual(format_tick_interval(1000), "1s")
		self.assertEqual(format_tick_interval(1500), "1s500ms")
		self.assertEqual(format_tick_interval(90_000), "1m30s")
		self.assertEqual(format_tick_interval(0), "0")

	def test_format_parses_back(self):
		for milliseconds in (10, 250, 1000, 61_001):
			with self.subTest(milliseconds=milliseconds):
				self.assertEqual(parse_tick_interval(format_tick_interval(milliseconds)), milliseconds)

class TestTickIntervalValidation(unittest.TestCase):
	"""Test the validate_tick_interval function."""

	def test_minimum(self):
		self.assertIsNone(validate_tick_interval(5))
		self.assertEqual(validate_tick_interval(10), 10)
		self.assertEqual(validate_tick_interval(1000), 1000)

	def test_none_passes_through(self):
		self.assertIsNone(validate_tick_interval(None))

if __name__ == '__main__':
	unittest.main()
