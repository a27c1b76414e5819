"""
Filesystem engine: directory snapshot, ordering, selection buffer and
mutating operations for the explorer view.
"""
import logging
import os
import shutil
from pathlib import Path

from .copying import copy_file_exclusive, copy_symlink, copy_tree
from .entries import DirPlacement, SortMode, list_directory
from .errors import (
    FileOperationError,
    FileSystemError,
    NotFoundError,
    PasteError,
    ResolutionError,
    UnsupportedEntryKindError,
)
from .sorting import apply_dir_placement, sort_entries

LOGGER = logging.getLogger(__name__)


class FileSystemEngine:
    """Owns the active directory listing and every operation that changes it.

    The active directory is an internal path; filesystem calls receive it
    explicitly. With ``follow_process_cwd`` the process working directory is
    kept in sync as well.
    """

    def __init__(self, start_path=None, *, show_hidden=False,
                 sort_mode=SortMode.UNSORTED, dir_placement=DirPlacement.NONE,
                 follow_process_cwd=False):
        self._current_path = os.path.abspath(start_path or os.getcwd())
        self._show_hidden = bool(show_hidden)
        self._sort_mode = SortMode(sort_mode)
        self._dir_placement = DirPlacement(dir_placement)
        self._follow_process_cwd = bool(follow_process_cwd)
        self._listing = []          # OS order
        self._sorted = []           # primary sort applied
        self._entries = ()          # placement applied
        self._selection = {}        # ordered set of absolute paths
        self._status = None
        self._status_is_error = False
        self.refresh()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def current_path(self):
        return self._current_path

    @property
    def entries(self):
        return self._entries

    @property
    def sort_mode(self):
        return self._sort_mode

    @property
    def dir_placement(self):
        return self._dir_placement

    @property
    def show_hidden(self):
        return self._show_hidden

    @property
    def selection(self):
        return tuple(self._selection)

    @property
    def status(self):
        return self._status

    @property
    def status_is_error(self):
        return self._status_is_error

    def set_status(self, text, error=False):
        """Publish a transient one-line message for the status bar."""
        self._status = str(text) if text else None
        self._status_is_error = bool(error and self._status)

    def clear_status(self):
        self._status = None
        self._status_is_error = False

    def get_entry(self, index):
        """Return the snapshot entry at ``index``."""
        if index is None or not 0 <= index < len(self._entries):
            raise NotFoundError(f'No entry at index {index}')
        return self._entries[index]

    def index_of(self, name):
        """Return snapshot position of ``name`` or None."""
        for idx, entry in enumerate(self._entries):
            if entry.name == name:
                return idx
        return None

    def _absolute(self, path):
        return os.path.normpath(os.path.join(self._current_path, os.fspath(path)))

    def _canonical(self, path):
        parent, name = os.path.split(self._absolute(path))
        if not name:
            return parent
        return os.path.join(os.path.realpath(parent), name)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def _apply_order(self):
        self._sorted = sort_entries(self._listing, self._sort_mode)
        self._entries = tuple(apply_dir_placement(self._sorted, self._dir_placement))

    def _sync_process_cwd(self):
        if not self._follow_process_cwd:
            return
        try:
            os.chdir(self._current_path)
        except OSError:
            LOGGER.warning('Could not change process directory to %s', self._current_path, exc_info=True)

    def change_directory(self, path):
        """Make ``path`` the active directory.

        Returns False and leaves every piece of state untouched when the
        directory cannot be listed.
        """
        target = self._absolute(path)
        try:
            listing = list_directory(target, self._show_hidden)
        except OSError as exc:
            LOGGER.warning('change_directory(%s) failed: %s', target, exc)
            self.set_status(f'Cannot open {target}: {exc.strerror or exc}', error=True)
            return False

        self._current_path = target
        self._listing = listing
        self._apply_order()
        self._sync_process_cwd()
        LOGGER.debug('Active directory is now %s (%d entries)', target, len(listing))
        return True

    def refresh(self):
        """Re-list the active directory, walking up if it no longer exists."""
        path = self._current_path
        while True:
            try:
                self._listing = list_directory(path, self._show_hidden)
                break
            except OSError as exc:
                parent = os.path.dirname(path)
                if parent == path:
                    LOGGER.warning('Cannot list %s: %s', path, exc)
                    self._listing = []
                    break
                LOGGER.warning('Cannot list %s (%s); moving to %s', path, exc, parent)
                path = parent
        if path != self._current_path:
            self._current_path = path
            self._sync_process_cwd()
        self._apply_order()

    def set_sort(self, mode):
        """Apply a primary sort mode followed by directory placement."""
        self._sort_mode = SortMode(mode)
        self._apply_order()

    def set_dir_placement(self, placement):
        self._dir_placement = DirPlacement(placement)
        self._entries = tuple(apply_dir_placement(self._sorted, self._dir_placement))

    def cycle_dir_placement(self):
        """Advance NONE -> FIRST -> LAST -> NONE without re-sorting."""
        self.set_dir_placement(self._dir_placement.next())
        return self._dir_placement

    def toggle_hidden(self):
        self._show_hidden = not self._show_hidden
        self.refresh()
        return self._show_hidden

    # ------------------------------------------------------------------
    # Selection buffer
    # ------------------------------------------------------------------

    def resolve_path(self, path):
        """Return canonical absolute form of ``path``.

        The parent directory is fully resolved; the leaf name is kept so a
        symlink stays a symlink.
        """
        absolute = self._absolute(path)
        parent, name = os.path.split(absolute)
        if not name:
            return parent
        try:
            parent = str(Path(parent).resolve(strict=True))
        except (OSError, RuntimeError) as exc:
            raise ResolutionError(f'Cannot resolve {absolute}: {exc}') from exc
        resolved = os.path.join(parent, name)
        if not os.path.lexists(resolved):
            raise ResolutionError(f'Cannot resolve {absolute}: no such file or directory')
        return resolved

    def add_to_selection(self, path):
        resolved = self.resolve_path(path)
        self._selection[resolved] = None
        LOGGER.debug('Selected %s (%d in buffer)', resolved, len(self._selection))
        return resolved

    def clear_selection(self):
        self._selection.clear()

    def set_selection(self, path):
        """Replace the buffer with ``path`` alone."""
        resolved = self.resolve_path(path)
        self._selection = {resolved: None}
        return resolved

    def is_selected(self, path):
        return self._canonical(path) in self._selection

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    def _contains_active_directory(self, src):
        real_src = os.path.realpath(src)
        real_cwd = os.path.realpath(self._current_path)
        return os.path.commonpath([real_src, real_cwd]) == real_src

    def _paste_one(self, src):
        name = os.path.basename(src)
        dest = os.path.join(self._current_path, name)
        try:
            if os.path.islink(src):
                copy_symlink(src, dest)
            elif os.path.isdir(src):
                if self._contains_active_directory(src):
                    raise FileSystemError(f'Cannot paste {name} into itself')
                skipped = copy_tree(src, dest)
                if skipped:
                    LOGGER.warning('Skipped %d unsupported entries while copying %s', skipped, src)
            elif os.path.isfile(src):
                copy_file_exclusive(src, dest)
            elif not os.path.lexists(src):
                raise NotFoundError(f'{src} no longer exists')
            else:
                raise UnsupportedEntryKindError(f'Cannot copy {src}: unsupported entry kind')
        except OSError as exc:
            raise FileOperationError.from_os_error('paste', name, exc) from exc

    def paste_selection(self):
        """Copy every selected path into the active directory.

        Stops at the first failure without undoing earlier copies. The
        snapshot is rebuilt either way.
        """
        completed = 0
        try:
            for src in list(self._selection):
                self._paste_one(src)
                completed += 1
        except FileSystemError as exc:
            LOGGER.warning('Paste aborted after %d item(s): %s', completed, exc)
            raise PasteError(
                f'Paste aborted after {completed} item(s): {exc}',
                completed=completed,
                cause=exc,
            ) from exc
        finally:
            self.refresh()
        LOGGER.debug('Pasted %d item(s) into %s', completed, self._current_path)
        return completed

    def _delete_path(self, target):
        try:
            if os.path.islink(target) or os.path.isfile(target):
                os.remove(target)
            elif os.path.isdir(target):
                shutil.rmtree(target)
            elif not os.path.lexists(target):
                raise NotFoundError(f'No such file or directory: {target}')
            else:
                raise UnsupportedEntryKindError(f'Cannot delete {target}: unsupported entry kind')
        except OSError as exc:
            raise FileOperationError.from_os_error('delete', target, exc) from exc
        self._selection.pop(self._canonical(target), None)

    def delete(self, path):
        """Remove a file, symlink or whole directory tree."""
        target = self._absolute(path)
        try:
            self._delete_path(target)
        finally:
            self.refresh()
        LOGGER.debug('Deleted %s', target)

    def delete_selection(self):
        """Delete every selected path; the buffer is cleared on success."""
        removed = 0
        try:
            for target in list(self._selection):
                self._delete_path(target)
                removed += 1
        finally:
            self.refresh()
        self._selection.clear()
        return removed

    def create_file(self, path):
        """Create an empty file, making missing parent directories."""
        target = self._absolute(path)
        try:
            os.makedirs(os.path.dirname(target), exist_ok=True)
            with open(target, 'x'):
                pass
        except OSError as exc:
            raise FileOperationError.from_os_error('create', target, exc) from exc
        self.refresh()
        return target

    def create_folder(self, path):
        """Create a directory, making missing parent directories."""
        target = self._absolute(path)
        try:
            os.makedirs(target)
        except OSError as exc:
            raise FileOperationError.from_os_error('create', target, exc) from exc
        self.refresh()
        return target
