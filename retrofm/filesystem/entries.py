"""
Core data structures for directory listings.
"""
import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional

LOGGER = logging.getLogger(__name__)


class EntryKind(str, Enum):
    """Filesystem object kind, read without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    UNKNOWN = "unknown"


class SortMode(str, Enum):
    """Primary ordering of a directory snapshot."""

    UNSORTED = "unsorted"
    SIZE_DESC = "size_desc"
    SIZE_ASC = "size_asc"
    NAME_DESC = "name_desc"
    NAME_ASC = "name_asc"


class DirPlacement(str, Enum):
    """Where directories are pinned after the primary sort."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"

    def next(self):
        order = (DirPlacement.NONE, DirPlacement.FIRST, DirPlacement.LAST)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class DirectoryEntry:
    """One filesystem object as seen when the directory was listed."""

    name: str
    path: str
    kind: EntryKind
    size: Optional[int] = None
    links_to_dir: bool = False

    @property
    def is_dir(self):
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_navigable(self):
        """True when descending into this entry makes sense."""
        return self.is_dir or (self.kind == EntryKind.SYMLINK and self.links_to_dir)

    @property
    def is_hidden(self):
        return self.name.startswith('.')

    def size_text(self):
        if self.kind != EntryKind.FILE or self.size is None:
            return ''
        return format_size(self.size)


def format_size(size):
    """Return a short human readable size."""
    if size > 1048576:
        return f'{size / 1048576:.1f}M'
    elif size > 1024:
        return f'{size / 1024:.1f}K'
    else:
        return f'{size}B'


def _kind_from_mode(mode):
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def entry_from_dir_entry(dir_entry):
    """Build a DirectoryEntry from an os.DirEntry.

    Unreadable metadata yields a degraded UNKNOWN entry instead of an error.
    """
    path = os.path.abspath(dir_entry.path)
    try:
        st = dir_entry.stat(follow_symlinks=False)
    except OSError as exc:
        LOGGER.debug('metadata unavailable for %s: %s', path, exc)
        return DirectoryEntry(dir_entry.name, path, EntryKind.UNKNOWN)

    kind = _kind_from_mode(st.st_mode)
    size = st.st_size if kind == EntryKind.FILE else None
    links_to_dir = False
    if kind == EntryKind.SYMLINK:
        try:
            links_to_dir = dir_entry.is_dir(follow_symlinks=True)
        except OSError:
            links_to_dir = False
    return DirectoryEntry(dir_entry.name, path, kind, size, links_to_dir)


def list_directory(path, show_hidden=False):
    """Return entries of ``path`` in OS listing order.

    Raises OSError when the directory itself cannot be read.
    """
    entries = []
    with os.scandir(path) as it:
        for dir_entry in it:
            if not show_hidden and dir_entry.name.startswith('.'):
                continue
            entries.append(entry_from_dir_entry(dir_entry))
    return entries
