"""Test fixtures for houndtree consumers.

Helpers for laying out small directory trees in a temporary directory so
queries can be exercised against a known structure.
"""

import os
import time
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .._common.entry import EntryKind, FileEntry
from ..errors import InvalidPathError, ListingError
from ..sync.core.adapter import EntryAdapter


Layout = Dict[str, Union[str, bytes, int, 'Layout']]


def build_tree(base: Union[str, Path], layout: Layout) -> Path:
    """Create files and directories under ``base`` from a nested dict.

    Keys are entry names. A dict value is a sub-directory, ``str`` and
    ``bytes`` values are file contents and an ``int`` is a size in bytes
    (the file is filled with zero bytes).

    Example:
        >>> build_tree(tmp_path, {
        ...     'a.json': 10,
        ...     'nested': {'b.json': '{}', '.hidden': {}},
        ... })

    Returns:
        ``base`` as a Path
    """
    base = Path(base)
    base.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        target = base / name
        if isinstance(content, dict):
            build_tree(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        elif isinstance(content, int):
            target.write_bytes(b'\0' * content)
        else:
            target.write_text(content)
    return base


def set_times(path: Union[str, Path],
              modified: Optional[float] = None,
              accessed: Optional[float] = None,
              age: Optional[float] = None) -> None:
    """Set a file's access and modification times.

    Args:
        path: File to touch
        modified: Absolute mtime (defaults to now)
        accessed: Absolute atime (defaults to ``modified``)
        age: Seconds in the past; overrides ``modified`` when given
    """
    if age is not None:
        modified = time.time() - age
    if modified is None:
        modified = time.time()
    if accessed is None:
        accessed = modified
    os.utime(path, (accessed, modified))


def make_entry(path: str, kind: EntryKind = EntryKind.FILE, **kwargs) -> FileEntry:
    """Build a FileEntry without touching the filesystem."""
    return FileEntry(path, kind, **kwargs)


def relative_paths(paths: List[str], base: Union[str, Path]) -> List[str]:
    """Strip ``base`` from result paths and use ``/`` separators."""
    return [os.path.relpath(path, base).replace(os.sep, '/') for path in paths]


class MemoryAdapter(EntryAdapter):
    """EntryAdapter serving a nested dict instead of the filesystem.

    Uses the same layout format as ``build_tree`` (int values are sizes,
    other leaves count their length). Directory listings are recorded in
    ``listed`` so tests can check which directories were entered.

    Args:
        tree: Nested dict; top-level keys are the usable roots
        failing: Directory paths whose listing raises ListingError
    """

    def __init__(self, tree: Layout, failing: Iterable[str] = ()):
        self.tree = tree
        self.failing = set(failing)
        self.listed: List[str] = []

    def _lookup(self, path: str):
        node = self.tree
        for part in path.split(os.sep):
            if not isinstance(node, dict) or part not in node:
                raise InvalidPathError(path)
            node = node[part]
        return node

    @staticmethod
    def _entry(path: str, node) -> FileEntry:
        if isinstance(node, dict):
            return FileEntry(path, EntryKind.DIRECTORY)
        size = node if isinstance(node, int) else len(node)
        return FileEntry(path, EntryKind.FILE, size=size)

    def create_entry(self, path: str) -> FileEntry:
        return self._entry(path, self._lookup(path))

    def get_children(self, entry: FileEntry) -> Iterator[FileEntry]:
        if not entry.is_directory():
            return iter(())
        if entry.path in self.failing:
            raise ListingError(entry.path)
        self.listed.append(entry.path)
        node = self._lookup(entry.path)
        return iter([
            self._entry(os.path.join(entry.path, name), node[name])
            for name in sorted(node)
        ])
