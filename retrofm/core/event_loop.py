"""Main loop helpers for RetroFM."""

import curses

from .actions import AppSignal


def draw_frame(app):
    """Render a full frame before reading input."""
    app.stdscr.erase()
    app.controller.draw(app.stdscr)
    app.stdscr.noutrefresh()
    curses.doupdate()


def read_input_key(stdscr):
    """Block for one key from curses, returning None on error."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def dispatch_input(app, key):
    """Dispatch one input event; returns the resulting AppSignal."""
    if key is None:
        return AppSignal.NONE

    if isinstance(key, int) and key == curses.KEY_RESIZE:
        curses.update_lines_cols()
        return AppSignal.NONE

    signal = app.controller.dispatch_key(key)
    if signal == AppSignal.EXIT:
        app.running = False
    return signal


def run_app_loop(app):
    """Run main draw/input loop with terminal cleanup on exit."""
    try:
        while app.running:
            draw_frame(app)
            key = read_input_key(app.stdscr)
            dispatch_input(app, key)
    finally:
        app.cleanup()
