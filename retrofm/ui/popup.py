"""
Shared frame and menu drawing for modal popups.
"""
import curses

from ..utils import check_unicode_support, draw_box, fit_text_to_cells, safe_addstr, theme_attr
from .state import State


def move_highlight(index, delta, count):
    """Move a menu highlight by ``delta`` without wrapping past the ends."""
    if count <= 0:
        return 0
    return max(0, min(count - 1, index + delta))


class Popup(State):
    """Centered box drawn over whatever is below it."""

    title = ''
    width = 30
    height = 8

    def __init__(self):
        self.use_unicode = check_unicode_support()
        self._popup_x = 0
        self._popup_y = 0

    def _size(self, canvas):
        max_h, max_w = canvas.getmaxyx()
        return min(self.height, max_h), min(self.width, max_w)

    def draw_frame(self, canvas, title=None):
        """Draw shadow, background, border and title. Returns (y, x, h, w)."""
        max_h, max_w = canvas.getmaxyx()
        h, w = self._size(canvas)
        x = max(0, (max_w - w) // 2)
        y = max(0, (max_h - h) // 2)

        attr = theme_attr('dialog')
        title_attr = theme_attr('window_title') | curses.A_BOLD

        # Shadow
        for row in range(h):
            safe_addstr(canvas, y + row + 1, x + 2, ' ' * w, curses.A_DIM)

        for row in range(h):
            safe_addstr(canvas, y + row, x, ' ' * w, attr)

        draw_box(canvas, y, x, h, w, attr, double=True, use_unicode=self.use_unicode)

        text = title if title is not None else self.title
        if text:
            safe_addstr(canvas, y, x + 1, f' {text} '[: w - 2], title_attr)

        self._popup_x = x
        self._popup_y = y
        return y, x, h, w

    def draw_menu(self, canvas, y, x, width, items, selected):
        """Draw one row per item, highlighting ``selected``."""
        for i, label in enumerate(items):
            if i == selected:
                row_attr = theme_attr('button_selected') | curses.A_BOLD
                marker = '>'
            else:
                row_attr = theme_attr('button')
                marker = ' '
            safe_addstr(canvas, y + i, x, fit_text_to_cells(f'{marker} {label}', width), row_attr)
