"""Filesystem adapter for houndtree.

Reads directories with os.scandir and snapshots each child with a single
stat call, so every entry handed to the walker is complete and immutable.
"""

import logging
import os
from typing import Iterator, List

from ..._common.entry import FileEntry
from ...errors import InvalidPathError, ListingError, StatError
from ..core.adapter import EntryAdapter


logger = logging.getLogger(__name__)


def scan_directory(entry: FileEntry, follow_symlinks: bool = True) -> List[FileEntry]:
    """List a directory and snapshot every child, sorted by name.

    Shared by the sync adapter and, through a worker thread, by the async
    adapter.

    Args:
        entry: Directory to list
        follow_symlinks: Stat link targets rather than the links themselves

    Returns:
        Child entries sorted lexicographically by name

    Raises:
        ListingError: If the directory cannot be enumerated
        StatError: If a child's metadata cannot be read
    """
    try:
        with os.scandir(entry.path) as iterator:
            dir_entries = sorted(iterator, key=lambda item: item.name)
    except OSError as e:
        raise ListingError(entry.path, cause=e) from e

    children = []
    child_depth = entry.depth + 1
    for dir_entry in dir_entries:
        child_path = os.path.join(entry.path, dir_entry.name)
        try:
            st = dir_entry.stat(follow_symlinks=follow_symlinks)
        except OSError as e:
            raise StatError(child_path, cause=e) from e
        children.append(FileEntry.from_stat(child_path, st, depth=child_depth))
    return children


def stat_root(path: str, depth: int, follow_symlinks: bool = True) -> FileEntry:
    """Snapshot a search root.

    Raises:
        InvalidPathError: If the root does not exist or cannot be read
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        raise InvalidPathError(path, cause=e) from e
    return FileEntry.from_stat(path, st, depth=depth)


class FileSystemAdapter(EntryAdapter):
    """Adapter for filesystem traversal.

    Symlinks are followed by default, so a link to a directory is walked
    like a directory. No cycle detection is performed.
    """

    def __init__(self, follow_symlinks: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Whether to stat link targets instead of links
        """
        self.follow_symlinks = follow_symlinks

    def create_entry(self, path: str) -> FileEntry:
        return stat_root(path, self.get_depth(path), self.follow_symlinks)

    def get_children(self, entry: FileEntry) -> Iterator[FileEntry]:
        """Get child entries of a directory, sorted by name."""
        if not entry.is_directory():
            return iter(())

        children = scan_directory(entry, self.follow_symlinks)
        logger.debug("Listed %d entries in %s", len(children), entry.path)
        return iter(children)

    def __repr__(self) -> str:
        return f"FileSystemAdapter(follow_symlinks={self.follow_symlinks})"
