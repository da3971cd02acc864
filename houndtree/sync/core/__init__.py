"""Core abstractions for synchronous walking."""

from .adapter import EntryAdapter
from .walker import SyncWalker

__all__ = [
    'EntryAdapter',
    'SyncWalker',
]
