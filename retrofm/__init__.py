"""RetroFM: a keyboard-driven terminal file manager."""
import logging

__version__ = "0.3.0"

# Keep warnings off the curses screen unless __main__ configures a log file.
logging.getLogger(__name__).addHandler(logging.NullHandler())
