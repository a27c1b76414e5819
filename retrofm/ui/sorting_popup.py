"""Sort mode picker."""
import curses

from ..constants import KEY_CR, KEY_ESC, KEY_LF
from ..core.actions import AppSignal
from ..filesystem.entries import SortMode
from ..utils import normalize_key_code
from .popup import Popup, move_highlight

SORT_CHOICES = (
    ('Size', '↓', 'v', SortMode.SIZE_DESC),
    ('Size', '↑', '^', SortMode.SIZE_ASC),
    ('Name', '↓', 'v', SortMode.NAME_DESC),
    ('Name', '↑', '^', SortMode.NAME_ASC),
)


class SortingPopup(Popup):
    """Four-item menu applying a SortMode to the engine on Enter."""

    title = 'Sort by'
    width = 22
    height = len(SORT_CHOICES) + 4

    def __init__(self):
        super().__init__()
        self.selected = 0

    def enter(self, engine):
        for idx, choice in enumerate(SORT_CHOICES):
            if choice[3] == engine.sort_mode:
                self.selected = idx
                break

    def labels(self):
        return [
            f'{name} {arrow if self.use_unicode else ascii_arrow}'
            for name, arrow, ascii_arrow, _ in SORT_CHOICES
        ]

    def selected_mode(self):
        return SORT_CHOICES[self.selected][3]

    def handle_key(self, key, engine):
        key_code = normalize_key_code(key)

        if key_code in (curses.KEY_UP, ord('k')):
            self.selected = move_highlight(self.selected, -1, len(SORT_CHOICES))
        elif key_code in (curses.KEY_DOWN, ord('j')):
            self.selected = move_highlight(self.selected, 1, len(SORT_CHOICES))
        elif key_code in (curses.KEY_ENTER, KEY_LF, KEY_CR):
            engine.set_sort(self.selected_mode())
            return AppSignal.CLOSE_POPUP
        elif key_code == KEY_ESC:
            return AppSignal.CLOSE_POPUP
        return AppSignal.NONE

    def draw(self, canvas, engine):
        y, x, _, w = self.draw_frame(canvas)
        self.draw_menu(canvas, y + 2, x + 2, w - 4, self.labels(), self.selected)
