"""Core abstractions for async walking.

All components use async/await patterns for non-blocking I/O.
"""

from .adapter import AsyncEntryAdapter
from .walker import AsyncWalker, gather_ordered

__all__ = [
    # Adapter
    'AsyncEntryAdapter',
    # Walker
    'AsyncWalker',
    'gather_ordered',
]
