"""
Single-line text entry popup.

The requester's outbound text becomes the prompt title; the committed text
is handed back when the popup closes.
"""
import curses

from ..constants import KEY_CR, KEY_CTRL_H, KEY_CTRL_U, KEY_DEL, KEY_ESC, KEY_LF
from ..core.actions import AppSignal, Message
from ..utils import key_char, safe_addstr, theme_attr
from .popup import Popup


def _erase_is_ctrl_h():
    """True when the terminal sends ^H for plain Backspace."""
    try:
        return curses.erasechar() == b"\b"
    except curses.error:
        return False


class TextFieldPopup(Popup):
    """Line editor: type, Backspace, Ctrl+Backspace clears, Enter commits, Esc cancels."""

    width = 44
    height = 5

    def __init__(self):
        super().__init__()
        self.prompt = ''
        self.value = ''
        self._committed = ''

    @property
    def title(self):
        return f'{self.prompt} name:' if self.prompt else 'Name:'

    def handle_inbound_message(self, message, engine):
        text = message.text_value() if message is not None else None
        if text is not None:
            self.prompt = text

    def get_outbound_message(self):
        if not self._committed:
            return None
        return Message.text(self._committed)

    def handle_key(self, key, engine):
        if isinstance(key, str):
            return self._handle_char(key)
        if key in (curses.KEY_ENTER, KEY_LF, KEY_CR):
            return self._commit()
        if key == KEY_ESC:
            return self._cancel()
        if key == KEY_CTRL_U or (key == KEY_CTRL_H and not _erase_is_ctrl_h()):
            self.value = ''
        elif key in (curses.KEY_BACKSPACE, KEY_DEL, KEY_CTRL_H):
            self.value = self.value[:-1]
        else:
            ch = key_char(key)
            if ch is not None:
                self.value += ch
        return AppSignal.NONE

    def _handle_char(self, ch):
        if ch in ('\n', '\r'):
            return self._commit()
        if ch == '\x1b':
            return self._cancel()
        if ch == '\x15' or (ch == '\b' and not _erase_is_ctrl_h()):
            self.value = ''
        elif ch in ('\x7f', '\b'):
            self.value = self.value[:-1]
        elif len(ch) == 1 and ch.isprintable():
            self.value += ch
        return AppSignal.NONE

    def _commit(self):
        self._committed = self.value
        self.value = ''
        return AppSignal.CLOSE_POPUP

    def _cancel(self):
        self.value = ''
        return AppSignal.CLOSE_POPUP

    def draw(self, canvas, engine):
        y, x, _, w = self.draw_frame(canvas)
        input_w = max(1, w - 4)
        attr = theme_attr('window_body')
        display_val = self.value[-(input_w - 1):] if len(self.value) >= input_w else self.value
        safe_addstr(canvas, y + 2, x + 2, ' ' * input_w, attr)
        safe_addstr(canvas, y + 2, x + 2, display_val, attr)
        safe_addstr(canvas, y + 2, x + 2 + len(display_val), ' ', attr | curses.A_REVERSE)
