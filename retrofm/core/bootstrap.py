"""Terminal bootstrap helpers for RetroFM startup and cleanup."""

import curses


def configure_terminal(stdscr):
    """Apply core curses terminal setup: blocking reads, keypad, no echo."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    stdscr.timeout(-1)
    # Make a lone Esc press arrive without the default one second delay.
    set_escdelay = getattr(curses, 'set_escdelay', None)
    if callable(set_escdelay):
        set_escdelay(25)
