"""Stable ordering passes for directory snapshots."""
from .entries import DirPlacement, EntryKind, SortMode


def _size_key(entry):
    return entry.size or 0


def _name_key(entry):
    return entry.name


_SORT_KEYS = {
    SortMode.SIZE_DESC: (_size_key, True),
    SortMode.SIZE_ASC: (_size_key, False),
    SortMode.NAME_DESC: (_name_key, True),
    SortMode.NAME_ASC: (_name_key, False),
}


def sort_entries(entries, mode):
    """Return entries ordered by ``mode``; ties keep their incoming order."""
    sort_key = _SORT_KEYS.get(SortMode(mode))
    if sort_key is None:
        return list(entries)
    key, reverse = sort_key
    # sorted() is stable for reverse=True as well.
    return sorted(entries, key=key, reverse=reverse)


def apply_dir_placement(entries, placement):
    """Group directories at the front or back, preserving relative order."""
    placement = DirPlacement(placement)
    if placement == DirPlacement.NONE:
        return list(entries)
    dirs = [e for e in entries if e.kind == EntryKind.DIRECTORY]
    others = [e for e in entries if e.kind != EntryKind.DIRECTORY]
    if placement == DirPlacement.FIRST:
        return dirs + others
    return others + dirs
