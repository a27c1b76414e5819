"""Yes/No confirmation popup."""
import curses

from ..constants import KEY_CR, KEY_ESC, KEY_LF
from ..core.actions import AppSignal, Message
from ..utils import safe_addstr, theme_attr, normalize_key_code
from .popup import Popup

CONFIRMATION_CHOICES = ('No', 'Yes')


def _wrap_prompt(text, inner_w):
    """Word-wrap the prompt into lines no wider than inner_w."""
    lines = []
    for paragraph in str(text).split('\n'):
        words = paragraph.split()
        if not words:
            lines.append('')
            continue
        line = ''
        for word in words:
            needs_space = 1 if line else 0
            if len(line) + len(word) + needs_space <= inner_w:
                line = f'{line} {word}' if line else word
            else:
                lines.append(line)
                line = word
        lines.append(line)
    return lines or ['']


class ConfirmationPopup(Popup):
    """Shows the inbound prompt and hands back flag(choice) on Enter."""

    title = 'Confirm'
    width = 46

    def __init__(self):
        super().__init__()
        self.prompt = ''
        self.selected = 0          # "No"
        self._choice = None

    @property
    def height(self):
        return len(_wrap_prompt(self.prompt, self.width - 6)) + 7

    @property
    def confirmed(self):
        return CONFIRMATION_CHOICES[self.selected] == 'Yes'

    def handle_inbound_message(self, message, engine):
        text = message.text_value() if message is not None else None
        if text is not None:
            self.prompt = text

    def get_outbound_message(self):
        if self._choice is None:
            return None
        return Message.flag(self._choice)

    def handle_key(self, key, engine):
        key_code = normalize_key_code(key)

        if key_code in (curses.KEY_UP, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_RIGHT,
                        ord('k'), ord('j')):
            self.selected = 1 - self.selected
        elif key_code in (curses.KEY_ENTER, KEY_LF, KEY_CR):
            self._choice = self.confirmed
            return AppSignal.CLOSE_POPUP
        elif key_code == KEY_ESC:
            self._choice = None
            return AppSignal.CLOSE_POPUP
        return AppSignal.NONE

    def draw(self, canvas, engine):
        y, x, h, w = self.draw_frame(canvas)
        attr = theme_attr('dialog')
        for i, line in enumerate(_wrap_prompt(self.prompt, w - 6)):
            safe_addstr(canvas, y + 2 + i, x + 3, line, attr)

        btn_y = y + h - 3
        btn_x = x + (w - 20) // 2
        for i, label in enumerate(CONFIRMATION_CHOICES):
            if i == self.selected:
                btn_attr = theme_attr('button_selected') | curses.A_BOLD
                text = f'> {label} <'
            else:
                btn_attr = theme_attr('button')
                text = f'[ {label} ]'
            safe_addstr(canvas, btn_y, btn_x, text, btn_attr)
            btn_x += len(text) + 4
