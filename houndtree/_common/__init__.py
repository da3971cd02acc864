"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both walkers. It should NOT be imported directly by users.

Components here include:
- Walk configuration (WalkConfig)
- The FileEntry snapshot
- Search root reduction and size/date comparators

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import WalkConfig
from .entry import EntryKind, FileEntry, TargetKind, kind_from_mode, structural_depth
from .paths import (
    find_subdirectories,
    get_root,
    is_subdirectory,
    normalize_paths,
    reduce_paths,
)
from .compare import Comparison, parse_date_expression, parse_size_expression

__all__ = [
    'WalkConfig',
    'EntryKind',
    'FileEntry',
    'TargetKind',
    'kind_from_mode',
    'structural_depth',
    'find_subdirectories',
    'get_root',
    'is_subdirectory',
    'normalize_paths',
    'reduce_paths',
    'Comparison',
    'parse_date_expression',
    'parse_size_expression',
]
