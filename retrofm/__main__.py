"""
Entry point for RetroFM.
"""
import curses
import locale
import logging
import os
from pathlib import Path

from .core.app import FileManagerApp

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def default_log_path():
    """Return log file path (~/.cache/retrofm/retrofm.log unless RETROFM_LOG is set)."""
    override = os.environ.get('RETROFM_LOG')
    if override:
        return Path(override).expanduser()
    return Path.home() / '.cache' / 'retrofm' / 'retrofm.log'


def configure_logging():
    """Send debug records to a file; the terminal belongs to curses."""
    if not os.environ.get('RETROFM_DEBUG'):
        return None
    log_path = default_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    logging.basicConfig(
        filename=str(log_path),
        level=logging.DEBUG,
        format='[%(levelname)s] %(name)s: %(message)s'
    )
    return log_path


def main(stdscr):
    app = FileManagerApp(stdscr)
    app.run()


def run():
    """Run RetroFM and return process exit code."""
    configure_logging()
    try:
        curses.wrapper(main)
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        # Top-level crash guard is intentionally broad to restore terminal state.
        try:
            curses.endwin()
        except curses.error:
            pass
        logging.getLogger(__name__).exception('RetroFM crashed')
        print(f'\nError: {e}')
        return 1


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
