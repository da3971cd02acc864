"""Async adapters bridging storage backends to the async walker."""

from .filesystem import AsyncFileSystemAdapter

__all__ = [
    'AsyncFileSystemAdapter',
]
