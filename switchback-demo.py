"""
switchback-demo.py - Switchback layout engine demo entry point

Opens the Switchback demo window and prints the layout the engine computed
for it. The headless memory host (default) works anywhere and can simulate a
resize; the Win32 host opens a real window on Windows and keeps laying it out
as it is resized, until it is closed.
"""

import sys, argparse

from switchback.constants import DEFAULT_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS
from switchback.utilities import (parse_window_size, parse_tick_interval, validate_tick_interval,
								  format_tick_interval)

# --- Core Functions ---

def parse_arguments(argv=None):
	"""Parse command line arguments."""
	default_tick = format_tick_interval(DEFAULT_TICK_INTERVAL_MS)
	minimum_tick = format_tick_interval(MIN_TICK_INTERVAL_MS)

	parser = argparse.ArgumentParser(
		description='Switchback - layout engine demo',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog=f"""
Examples:
  --size 400x300              Open the window with a 400x300 client area
  --resize 500x350            Re-lay out after a simulated resize (memory host)
  --host win32 --tick 100ms   Native window, laid out every 100 milliseconds
Note: Tick intervals must be at least {minimum_tick}.
		""".strip()
	)

	def window_size(value):
		"""Validate a WIDTHxHEIGHT window size."""
		size = parse_window_size(value)
		if size is None:
			raise argparse.ArgumentTypeError(f"Invalid window size '{value}', expected WIDTHxHEIGHT (e.g. 350x300)")
		return size

	def tick_interval(value):
		"""Validate a tick interval such as 250ms or 1s."""
		interval = validate_tick_interval(parse_tick_interval(value))
		if interval is None:
			raise argparse.ArgumentTypeError(f"Invalid tick interval '{value}' (minimum {minimum_tick})")
		return interval

	parser.add_argument('--host', choices=('memory', 'win32'), default='memory',
			help='Host to open the window with (default: memory)')
	parser.add_argument('--tabs', action='store_true',
			help='Put the demo pages on separate tabs')
	parser.add_argument('--size', type=window_size, metavar='WxH',
			help='Initial client size of the window')
	parser.add_argument('--resize', type=window_size, metavar='WxH',
			help='Simulate a resize after opening (memory host only)')
	parser.add_argument('--tick', type=tick_interval, default=DEFAULT_TICK_INTERVAL_MS, metavar='INTERVAL',
			help=f'Host update tick interval (default: {default_tick}, win32 host only)')

	args = parser.parse_args(argv)
	if args.resize is not None and args.host != 'memory':
		parser.error("--resize is only supported with the memory host")
	return args

# --- Main Logic ---

def main(argv=None):
	args = parse_arguments(argv)

	from switchback.demo import run_demo
	if args.host == 'win32':
		from switchback.win32_host import Win32Host
		host = Win32Host(tick_interval_ms=args.tick)
		run_demo(host, tabs=args.tabs, size=args.size)
		print("Close the window to exit.")
		host.run()
	else:
		from switchback.memory_host import MemoryHost
		run_demo(MemoryHost(), tabs=args.tabs, size=args.size, resize=args.resize)
	return 0

if __name__ == '__main__':
	sys.exit(main())
