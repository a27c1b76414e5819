"""
Main RetroFM Application Class.
"""
import logging

from ..constants import MIN_TERM_HEIGHT, MIN_TERM_WIDTH
from ..filesystem.engine import FileSystemEngine
from ..theme import get_theme
from ..utils import init_colors
from .bootstrap import configure_terminal
from .config import load_config
from .controller import Controller
from .event_loop import run_app_loop

LOGGER = logging.getLogger(__name__)


def build_engine(config):
    """Create the filesystem engine from user configuration."""
    return FileSystemEngine(
        config.start_path,
        show_hidden=config.show_hidden,
        sort_mode=config.sort_mode,
        dir_placement=config.dir_placement,
        follow_process_cwd=config.follow_process_cwd,
    )


class FileManagerApp:
    """Main application class."""

    def __init__(self, stdscr, config=None):
        self.stdscr = stdscr
        self.running = True
        self.config = config if config is not None else load_config()
        self.theme = get_theme(self.config.theme)

        configure_terminal(stdscr)
        self._validate_terminal_size()
        init_colors(self.theme)

        self.engine = build_engine(self.config)
        self.controller = Controller(self.engine)
        LOGGER.debug('Started in %s', self.engine.current_path)

    def _validate_terminal_size(self):
        """Fail fast when terminal is too small for the explorer layout."""
        h, w = self.stdscr.getmaxyx()
        if h < MIN_TERM_HEIGHT or w < MIN_TERM_WIDTH:
            raise ValueError(
                f'Terminal too small ({w}x{h}). '
                f'Minimum supported size is {MIN_TERM_WIDTH}x{MIN_TERM_HEIGHT}.'
            )

    def run(self):
        run_app_loop(self)

    def cleanup(self):
        """Close any open popups so their exit hooks run."""
        while self.controller.popup_stack:
            popup = self.controller.popup_stack.pop()
            popup.exit(self.engine)
        self.controller.active_base_view.exit(self.engine)
