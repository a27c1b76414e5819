"""
Copy helpers used by paste.

Directory trees are copied with an explicit work-list instead of recursion,
and symlinks are recreated from their stored target string.
"""
import logging
import os
import shutil

LOGGER = logging.getLogger(__name__)


def copy_file_exclusive(src, dest):
    """Copy file bytes, failing with FileExistsError if ``dest`` exists."""
    with open(src, 'rb') as fsrc, open(dest, 'xb') as fdst:
        shutil.copyfileobj(fsrc, fdst)


def copy_symlink(src, dest):
    """Recreate symlink ``src`` at ``dest`` pointing at the same target string."""
    target = os.readlink(src)
    os.symlink(target, dest, target_is_directory=os.path.isdir(src))


def copy_tree(src, dest):
    """Recreate directory ``src`` at ``dest`` including its whole subtree.

    Returns the number of entries skipped because their kind cannot be copied.
    """
    os.mkdir(dest)
    skipped = 0
    pending = ['.']
    while pending:
        relative = pending.pop()
        current_src = os.path.normpath(os.path.join(src, relative))
        with os.scandir(current_src) as it:
            children = sorted(it, key=lambda e: e.name)

        for child in children:
            child_relative = os.path.join(relative, child.name)
            src_entry = os.path.normpath(os.path.join(src, child_relative))
            dest_entry = os.path.normpath(os.path.join(dest, child_relative))

            if child.is_symlink():
                copy_symlink(src_entry, dest_entry)
            elif child.is_dir(follow_symlinks=False):
                os.mkdir(dest_entry)
                pending.append(child_relative)
            elif child.is_file(follow_symlinks=False):
                copy_file_exclusive(src_entry, dest_entry)
            else:
                LOGGER.warning('Skipping unsupported entry while copying: %s', src_entry)
                skipped += 1
    return skipped
