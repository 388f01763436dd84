#!/usr/bin/env python3
"""
Test suite for argument validation in switchback-demo.py

This module tests the command-line argument parsing and validation logic,
and runs the demo end to end on the memory host.
"""

import unittest
import sys
import os
from unittest.mock import patch
from io import StringIO

# Add the project root to the path so we can import switchback
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

# switchback-demo.py is not importable by name
import importlib.util
demo_script_path = os.path.join(project_root, "switchback-demo.py")
spec = importlib.util.spec_from_file_location("switchback_demo", demo_script_path)
if spec and spec.loader:
	switchback_demo = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(switchback_demo)
else:
	raise ImportError("Could not load switchback-demo.py module")

class TestArgumentValidation(unittest.TestCase):
	"""Test the argument parsing validation functions."""

	def assertRejected(self, argv):
		with self.assertRaises(SystemExit):  # argparse raises SystemExit on error
			with patch('sys.stderr', new_callable=StringIO):  # Suppress error output
				switchback_demo.parse_arguments(argv)

	def test_defaults(self):
		args = switchback_demo.parse_arguments([])
		self.assertEqual(args.host, 'memory')
		self.assertFalse(args.tabs)
		self.assertIsNone(args.size)
		self.assertIsNone(args.resize)
		self.assertEqual(args.tick, 250)

	def test_sys_argv_used_by_default(self):
		with patch('sys.argv', ['switchback-demo.py', '--tabs']):
			args = switchback_demo.parse_arguments()
			self.assertTrue(args.tabs)

	def test_window_sizes(self):
		args = switchback_demo.parse_arguments(['--size', '400x300', '--resize', '500X350'])
		self.assertEqual(args.size, (400, 300))
		self.assertEqual(args.resize, (500, 350))

	def test_invalid_window_sizes(self):
		self.assertRejected(['--size', 'big'])
		self.assertRejected(['--size', '0x300'])
		self.assertRejected(['--resize', '300'])

	def test_tick_intervals(self):
		self.assertEqual(switchback_demo.parse_arguments(['--tick', '100ms']).tick, 100)
		self.assertEqual(switchback_demo.parse_arguments(['--tick', '1s']).tick, 1000)
		self.assertEqual(switchback_demo.parse_arguments(['--tick', 'default']).tick, 250)

	def test_tick_below_minimum_rejected(self):
		self.assertRejected(['--tick', '5ms'])
		self.assertRejected(['--tick', '0'])
		self.assertRejected(['--tick', 'often'])

	def test_unknown_host_rejected(self):
		self.assertRejected(['--host', 'x11'])

	def test_resize_needs_memory_host(self):
		self.assertRejected(['--host', 'win32', '--resize', '400x300'])

class TestDemoMain(unittest.TestCase):
	"""Run the demo on the memory host."""

	def test_main_prints_layout(self):
		with patch('sys.stdout', new_callable=StringIO) as stdout:
			self.assertEqual(switchback_demo.main([]), 0)
		output = stdout.getvalue()
		self.assertIn("Layout at open:", output)
		self.assertIn("window: x=0, y=0, width=350, height=300", output)
		self.assertNotIn("Layout after resize", output)

	def test_main_with_resize(self):
		with patch('sys.stdout', new_callable=StringIO) as stdout:
			self.assertEqual(switchback_demo.main(['--resize', '500x350']), 0)
		output = stdout.getvalue()
		self.assertIn("Layout after resize to 500x350:", output)
		self.assertIn("window: x=0, y=0, width=500, height=350", output)

	def test_main_with_tabs(self):
		with patch('sys.stdout', new_callable=StringIO) as stdout:
			self.assertEqual(switchback_demo.main(['--tabs', '--size', '400x300']), 0)
		self.assertIn("window: x=0, y=0, width=400, height=300", stdout.getvalue())

if __name__ == '__main__':
	unittest.main()
