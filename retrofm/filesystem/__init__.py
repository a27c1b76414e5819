"""Filesystem engine used by the RetroFM views."""
from .engine import FileSystemEngine
from .entries import DirectoryEntry, DirPlacement, EntryKind, SortMode
from .errors import (
    FileOperationError,
    FileSystemError,
    NotFoundError,
    PasteError,
    ResolutionError,
    UnsupportedEntryKindError,
)

__all__ = [
    'FileSystemEngine', 'DirectoryEntry', 'DirPlacement', 'EntryKind', 'SortMode',
    'FileSystemError', 'FileOperationError', 'NotFoundError', 'PasteError',
    'ResolutionError', 'UnsupportedEntryKindError',
]
