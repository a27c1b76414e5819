"""Error taxonomy raised by the filesystem engine."""


class FileSystemError(Exception):
    """Base class for every failure reported by the engine."""


class NotFoundError(FileSystemError):
    """Snapshot index out of range or path missing."""


class ResolutionError(FileSystemError):
    """Path could not be turned into a canonical absolute path."""


class UnsupportedEntryKindError(FileSystemError):
    """Entry is neither a regular file, a directory nor a symlink."""


class FileOperationError(FileSystemError):
    """Create/copy/remove failed at the OS level."""

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    @property
    def errno(self):
        return getattr(self.cause, 'errno', None)

    @classmethod
    def from_os_error(cls, action, path, exc):
        reason = exc.strerror or str(exc)
        return cls(f'Cannot {action} {path}: {reason}', cause=exc)


class PasteError(FileSystemError):
    """Paste aborted part-way; items already copied are kept."""

    def __init__(self, message, completed=0, cause=None):
        super().__init__(message)
        self.completed = completed
        self.cause = cause
