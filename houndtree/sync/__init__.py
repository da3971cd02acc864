"""Synchronous implementation of houndtree.

Everything here blocks the calling thread; ``Query.execute_sync`` is built
on these components.
"""

from .core.adapter import EntryAdapter
from .core.walker import SyncWalker
from .adapters.filesystem import FileSystemAdapter, scan_directory, stat_root

__all__ = [
    'EntryAdapter',
    'SyncWalker',
    'FileSystemAdapter',
    'scan_directory',
    'stat_root',
]
