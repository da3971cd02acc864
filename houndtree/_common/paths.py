"""Search root normalisation and subdirectory elimination.

Walking a directory already visits everything beneath it, so when several
search roots are given any root nested inside another one is dropped.
Root counts are expected to be small; the check is quadratic in the number
of roots and linear in path depth.
"""

import os
from typing import Iterable, List


def get_root(path: str) -> str:
    """Return the filesystem root that ``path`` lives under.

    ``/`` on POSIX, ``<drive>:\\`` on Windows.
    """
    if os.name == 'nt':
        return path.split(os.sep)[0] + os.sep
    return os.sep


def _has_parent(path: str) -> bool:
    return bool(path) and path != get_root(path) and path != os.curdir


def is_subdirectory(base: str, candidate: str) -> bool:
    """Check whether ``base`` is reached by ascending from ``candidate``.

    The candidate itself counts, so ``is_subdirectory(p, p)`` is True.

    Args:
        base: Possible ancestor path
        candidate: Path to ascend from

    Returns:
        True if ``base`` is ``candidate`` or one of its ancestors
    """
    parent = candidate
    while True:
        if parent == base:
            return True
        if not _has_parent(parent):
            return False
        # a bare relative name has '.' as its parent
        parent = os.path.dirname(parent) or os.curdir


def find_subdirectories(paths: List[str]) -> List[str]:
    """Return every path in ``paths`` that is nested inside another one."""
    nested = []
    for base in paths:
        for candidate in paths:
            if base != candidate and is_subdirectory(base, candidate):
                nested.append(candidate)
    return nested


def reduce_paths(paths: List[str]) -> List[str]:
    """Drop search roots that are descendants of other search roots.

    The result keeps the caller's declaration order.

    Example:
        >>> reduce_paths(['a', 'a/b', 'c'])
        ['a', 'c']
    """
    if len(paths) == 1:
        return list(paths)

    nested = set(find_subdirectories(sorted(paths)))
    return [path for path in paths if path not in nested]


def normalize_paths(paths: Iterable[str]) -> List[str]:
    """Normalise paths and remove duplicates, keeping first occurrences.

    Comparison is case-sensitive and purely lexical (``os.path.normpath``);
    symlinks are not resolved.
    """
    seen = set()
    normalized = []
    for path in paths:
        path = os.path.normpath(os.fspath(path))
        if path not in seen:
            seen.add(path)
            normalized.append(path)
    return normalized
