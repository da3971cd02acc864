"""Async entry adapter abstraction.

Same contract as the sync EntryAdapter, with every filesystem call
awaitable so that walkers for different roots and sibling subtrees can
make progress while one of them waits on I/O.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import List, Optional, Set

from ..._common.entry import FileEntry, structural_depth


class AsyncEntryAdapter(ABC):
    """Abstract base class for async entry adapters.

    Concurrency is bounded by a semaphore shared by every walker using
    this adapter instance.
    """

    def __init__(self, max_concurrent: int = 100):
        """Initialize adapter with concurrency control.

        Args:
            max_concurrent: Maximum concurrent I/O operations
        """
        if max_concurrent <= 0:
            raise ValueError("max_concurrent must be positive")
        self.max_concurrent = max_concurrent
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._capabilities = self._define_capabilities()

    @property
    def semaphore(self) -> asyncio.Semaphore:
        # Created lazily so the adapter can be built outside a running loop
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.max_concurrent)
        return self._semaphore

    @abstractmethod
    async def create_entry(self, path: str) -> FileEntry:
        """Build the entry for a search root.

        Raises:
            InvalidPathError: If the root does not exist or cannot be read
        """
        pass

    @abstractmethod
    async def get_children(self, entry: FileEntry) -> List[FileEntry]:
        """Get the children of a directory, sorted by name.

        The whole listing is returned at once; the walker needs it to fan
        out over children while keeping their order.

        Raises:
            ListingError: If the directory cannot be enumerated
            StatError: If a child's metadata cannot be read
        """
        pass

    def get_depth(self, path: str) -> int:
        """Structural depth of a path (number of components)."""
        return structural_depth(path)

    def supports_capability(self, capability: str) -> bool:
        return capability in self._capabilities

    def _define_capabilities(self) -> Set[str]:
        """Define adapter capabilities.

        Override in subclasses to declare supported features.
        """
        return {
            'create_entry',
            'get_children',
            'get_depth',
        }

    async def close(self):
        """Clean up adapter resources."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
