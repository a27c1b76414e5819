"""File/Folder chooser that asks a text field for the new name."""
import curses
import logging

from ..constants import KEY_CR, KEY_ESC, KEY_LF
from ..core.actions import AppSignal, Message
from ..filesystem.errors import FileSystemError
from ..utils import normalize_key_code
from .popup import Popup, move_highlight

LOGGER = logging.getLogger(__name__)

NEW_ENTRY_KINDS = ('File', 'Folder')


class NewFilePopup(Popup):
    """Two-item menu; Enter opens a name prompt, the reply creates the entry."""

    title = 'Create'
    width = 22
    height = len(NEW_ENTRY_KINDS) + 4

    def __init__(self):
        super().__init__()
        self.selected = 0
        self._awaiting_name = False

    @property
    def selected_kind(self):
        return NEW_ENTRY_KINDS[self.selected]

    def handle_key(self, key, engine):
        key_code = normalize_key_code(key)

        if key_code in (curses.KEY_UP, ord('k')):
            self.selected = move_highlight(self.selected, -1, len(NEW_ENTRY_KINDS))
        elif key_code in (curses.KEY_DOWN, ord('j')):
            self.selected = move_highlight(self.selected, 1, len(NEW_ENTRY_KINDS))
        elif key_code in (curses.KEY_ENTER, KEY_LF, KEY_CR):
            self._awaiting_name = True
            return AppSignal.OPEN_TEXT_FIELD
        elif key_code == KEY_ESC:
            return AppSignal.CLOSE_POPUP
        return AppSignal.NONE

    def get_outbound_message(self):
        if self._awaiting_name:
            return Message.text(self.selected_kind)
        return None

    def handle_inbound_message(self, message, engine):
        if not self._awaiting_name:
            return
        self._awaiting_name = False
        name = message.text_value() if message is not None else None
        if not name:
            return

        try:
            if self.selected_kind == 'Folder':
                engine.create_folder(name)
            else:
                engine.create_file(name)
        except FileSystemError as exc:
            LOGGER.warning('Create %s failed: %s', self.selected_kind.lower(), exc)
            engine.set_status(str(exc), error=True)
            return
        engine.set_status(f'Created {self.selected_kind.lower()} {name}')

    def draw(self, canvas, engine):
        y, x, _, w = self.draw_frame(canvas)
        self.draw_menu(canvas, y + 2, x + 2, w - 4, NEW_ENTRY_KINDS, self.selected)
