"""Asynchronous implementation of houndtree.

Walkers here fan out over subdirectories as asyncio tasks; blocking I/O is
moved to worker threads by the adapters.
"""

from .core import AsyncEntryAdapter, AsyncWalker, gather_ordered
from .adapters import AsyncFileSystemAdapter

__all__ = [
    'AsyncEntryAdapter',
    'AsyncWalker',
    'gather_ordered',
    'AsyncFileSystemAdapter',
]
