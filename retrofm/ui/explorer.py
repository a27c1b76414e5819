"""
Explorer base view: the directory table and its key bindings.
"""
import curses
import logging
import os
from enum import Enum

from ..constants import (
    EXPLORER_FOOTER_ROWS,
    EXPLORER_HEADER_ROWS,
    SELECTION_MARK,
    SIZE_COLUMN_WIDTH,
)
from ..core.actions import AppSignal, Message
from ..filesystem.entries import DirPlacement, EntryKind, SortMode
from ..filesystem.errors import FileSystemError
from ..utils import (
    check_unicode_support,
    draw_box,
    fit_text_to_cells,
    normalize_key_code,
    safe_addstr,
    theme_attr,
)
from .state import State

LOGGER = logging.getLogger(__name__)

SORT_LABELS = {
    SortMode.UNSORTED: 'unsorted',
    SortMode.SIZE_DESC: 'size desc',
    SortMode.SIZE_ASC: 'size asc',
    SortMode.NAME_DESC: 'name desc',
    SortMode.NAME_ASC: 'name asc',
}

PLACEMENT_LABELS = {
    DirPlacement.NONE: 'mixed',
    DirPlacement.FIRST: 'first',
    DirPlacement.LAST: 'last',
}

KIND_SUFFIX = {
    EntryKind.DIRECTORY: '/',
    EntryKind.SYMLINK: '@',
    EntryKind.OTHER: '|',
    EntryKind.UNKNOWN: '?',
}

DELETE_PROMPT = 'The selected files will be deleted permanently, are you sure?'


class PendingRequest(str, Enum):
    """Which action is waiting for a popup reply."""

    NONE = "none"
    DELETE_CONFIRMATION = "delete_confirmation"


class ExplorerView(State):
    """Directory listing with a highlighted row and vim-style bindings."""

    def __init__(self):
        self.use_unicode = check_unicode_support()
        self.selected_index = 0
        self.scroll_offset = 0
        self._pending = PendingRequest.NONE
        self._outbound = None
        self._delete_target = None

    # ------------------------------------------------------------------
    # Highlight helpers
    # ------------------------------------------------------------------

    def _clamp_selection(self, engine):
        count = len(engine.entries)
        if count == 0:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = max(0, min(self.selected_index, count - 1))

    def highlighted_entry(self, engine):
        """Return the highlighted DirectoryEntry or None."""
        try:
            return engine.get_entry(self.selected_index)
        except FileSystemError:
            return None

    def _move(self, delta, engine):
        count = len(engine.entries)
        if count == 0:
            self.selected_index = None
            return
        if self.selected_index is None:
            self.selected_index = count - 1
            return
        self.selected_index = (self.selected_index + delta) % count

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _descend(self, engine):
        entry = self.highlighted_entry(engine)
        if entry is None or not entry.is_navigable:
            return
        if engine.change_directory(entry.path):
            self.selected_index = 0
            self.scroll_offset = 0

    def _ascend(self, engine):
        previous = os.path.basename(engine.current_path)
        if engine.change_directory(os.pardir):
            idx = engine.index_of(previous)
            self.selected_index = idx if idx is not None else 0
            self.scroll_offset = 0

    def _select_highlighted(self, engine):
        entry = self.highlighted_entry(engine)
        if entry is None:
            return
        try:
            engine.add_to_selection(entry.path)
        except FileSystemError as exc:
            LOGGER.warning('Selection failed: %s', exc)
            engine.set_status(str(exc), error=True)
            return
        engine.set_status(f'{len(engine.selection)} item(s) selected')

    def _paste(self, engine):
        if not engine.selection:
            engine.set_status('Nothing to paste')
            return
        try:
            count = engine.paste_selection()
        except FileSystemError as exc:
            engine.set_status(str(exc), error=True)
            return
        engine.clear_selection()
        engine.set_status(f'Pasted {count} item(s)')

    def _request_delete(self, engine):
        if engine.selection:
            self._delete_target = None
            prompt = DELETE_PROMPT
        else:
            entry = self.highlighted_entry(engine)
            if entry is None:
                return AppSignal.NONE
            self._delete_target = entry.path
            prompt = f'{entry.name} will be deleted permanently, are you sure?'
        self._pending = PendingRequest.DELETE_CONFIRMATION
        self._outbound = Message.text(prompt)
        return AppSignal.OPEN_CONFIRMATION

    def _delete(self, engine):
        target, self._delete_target = self._delete_target, None
        try:
            if target is None:
                removed = engine.delete_selection()
                engine.set_status(f'Deleted {removed} item(s)')
            else:
                engine.delete(target)
                engine.set_status(f'Deleted {os.path.basename(target)}')
        except FileSystemError as exc:
            LOGGER.warning('Delete failed: %s', exc)
            engine.set_status(str(exc), error=True)

    # ------------------------------------------------------------------
    # State protocol
    # ------------------------------------------------------------------

    def enter(self, engine):
        engine.refresh()
        self._clamp_selection(engine)

    def get_outbound_message(self):
        message, self._outbound = self._outbound, None
        return message

    def handle_inbound_message(self, message, engine):
        pending, self._pending = self._pending, PendingRequest.NONE
        if pending == PendingRequest.DELETE_CONFIRMATION:
            if message is not None and message.flag_value() is True:
                self._delete(engine)
            else:
                self._delete_target = None
                engine.set_status('Deletion cancelled')
        self._clamp_selection(engine)

    def handle_key(self, key, engine):
        key_code = normalize_key_code(key)
        if key_code is None:
            return AppSignal.NONE
        engine.clear_status()

        if key_code == ord('q'):
            return AppSignal.EXIT
        if key_code == ord('s'):
            return AppSignal.OPEN_SORTING
        if key_code == ord('m'):
            return AppSignal.OPEN_KEY_MAPPING
        if key_code == ord('n'):
            return AppSignal.OPEN_NEW_FILE
        if key_code == ord('x'):
            return self._request_delete(engine)

        if key_code == ord('d'):
            placement = engine.cycle_dir_placement()
            engine.refresh()
            engine.set_status(f'Folders: {PLACEMENT_LABELS[placement]}')
        elif key_code in (curses.KEY_DOWN, ord('j')):
            self._move(1, engine)
        elif key_code in (curses.KEY_UP, ord('k')):
            self._move(-1, engine)
        elif key_code in (curses.KEY_RIGHT, ord('l')):
            self._descend(engine)
        elif key_code in (curses.KEY_LEFT, ord('h')):
            self._ascend(engine)
        elif key_code == ord('y'):
            self._select_highlighted(engine)
        elif key_code == ord('c'):
            engine.clear_selection()
            engine.set_status('Selection cleared')
        elif key_code == ord('v'):
            self._paste(engine)
        elif key_code == ord('g'):
            shown = engine.toggle_hidden()
            engine.set_status('Hidden files shown' if shown else 'Hidden files hidden')

        self._clamp_selection(engine)
        return AppSignal.NONE

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    @staticmethod
    def visible_rows(height):
        return max(0, height - EXPLORER_HEADER_ROWS - EXPLORER_FOOTER_ROWS)

    def _ensure_visible(self, rows):
        if self.selected_index is None or rows <= 0:
            self.scroll_offset = 0
            return
        if self.selected_index < self.scroll_offset:
            self.scroll_offset = self.selected_index
        elif self.selected_index >= self.scroll_offset + rows:
            self.scroll_offset = self.selected_index - rows + 1

    def _row_attr(self, entry, idx, marked):
        if idx == self.selected_index:
            return theme_attr('row_highlight') | curses.A_BOLD
        if marked:
            return theme_attr('file_marked')
        if entry.kind == EntryKind.DIRECTORY:
            return theme_attr('file_directory') | curses.A_BOLD
        if entry.kind == EntryKind.SYMLINK:
            return theme_attr('file_symlink')
        return theme_attr('window_body')

    def draw(self, canvas, engine):
        max_h, max_w = canvas.getmaxyx()
        body_attr = theme_attr('window_body')
        border_attr = theme_attr('window_border')

        for row in range(max_h):
            safe_addstr(canvas, row, 0, ' ' * max_w, body_attr)
        draw_box(canvas, 0, 0, max_h - 1, max_w, border_attr, double=True, use_unicode=self.use_unicode)

        title = f' FILE EXPLORER  {engine.current_path} '
        safe_addstr(canvas, 0, 2, title[: max(0, max_w - 4)], theme_attr('window_title') | curses.A_BOLD)

        inner_w = max(0, max_w - 2)
        name_w = max(0, inner_w - SIZE_COLUMN_WIDTH - 1)
        header = fit_text_to_cells('  FILENAME', name_w) + 'SIZE'.rjust(SIZE_COLUMN_WIDTH)
        safe_addstr(canvas, 1, 1, header, theme_attr('header') | curses.A_BOLD)

        entries = engine.entries
        rows = self.visible_rows(max_h)
        self._ensure_visible(rows)
        if not entries and rows > 0:
            safe_addstr(canvas, EXPLORER_HEADER_ROWS, 3, '(empty directory)', body_attr | curses.A_DIM)

        for i in range(rows):
            idx = self.scroll_offset + i
            if idx >= len(entries):
                break
            entry = entries[idx]
            marked = engine.is_selected(entry.path)
            mark = SELECTION_MARK if marked else ' '
            label = f'{mark} {entry.name}{KIND_SUFFIX.get(entry.kind, "")}'
            line = fit_text_to_cells(label, name_w) + entry.size_text().rjust(SIZE_COLUMN_WIDTH)
            safe_addstr(canvas, EXPLORER_HEADER_ROWS + i, 1, line, self._row_attr(entry, idx, marked))

        info = (
            f' sort: {SORT_LABELS[engine.sort_mode]} | folders: {PLACEMENT_LABELS[engine.dir_placement]}'
            f' | hidden: {"on" if engine.show_hidden else "off"} | selected: {len(engine.selection)} '
        )
        help_text = ' Key Mappings:<m> '
        footer_y = max_h - 2
        safe_addstr(canvas, footer_y, 2, info[: max(0, max_w - len(help_text) - 4)], border_attr)
        if max_w > len(info) + len(help_text) + 4:
            safe_addstr(canvas, footer_y, max_w - len(help_text) - 2, help_text, border_attr | curses.A_BOLD)

        status = engine.status or f'{len(entries)} item(s)'
        status_attr = theme_attr('status_error' if engine.status_is_error else 'status')
        safe_addstr(canvas, max_h - 1, 0, fit_text_to_cells(f' {status}', max(0, max_w - 1)), status_attr)
