"""Async walker for houndtree.

Same traversal as SyncWalker, but the subdirectories of each directory are
walked concurrently as tasks. Each task owns its own result list and the
lists are joined in child order, so concurrency changes when work happens,
never the order in which results are reported.
"""

import asyncio
import logging
from typing import List, Optional, Union

from ..._common.config import WalkConfig
from ..._common.entry import FileEntry
from ...errors import InvalidPathError, ListingError
from ...predicates import FilePredicate
from .adapter import AsyncEntryAdapter


logger = logging.getLogger(__name__)


async def gather_ordered(tasks: List['asyncio.Task']) -> None:
    """Wait for all tasks; on the first failure cancel the rest and re-raise.

    Args:
        tasks: Tasks created by the caller

    Raises:
        The first exception raised by any task
    """
    if not tasks:
        return
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Let cancelled tasks unwind before the error leaves this subtree
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class AsyncWalker:
    """Walks one root asynchronously and collects matching entries.

    Example:
        >>> walker = AsyncWalker('src', ext('py'), WalkConfig(), AsyncFileSystemAdapter())
        >>> entries = await walker.walk()
    """

    def __init__(self,
                 root: str,
                 matcher: FilePredicate,
                 config: Optional[WalkConfig] = None,
                 adapter: Optional[AsyncEntryAdapter] = None):
        """Initialize walker.

        Args:
            root: Normalised search root
            matcher: Composed predicate deciding which entries are reported
            config: Depth, hidden-directory and directories-only settings
            adapter: Entry provider (defaults to AsyncFileSystemAdapter)
        """
        if adapter is None:
            from ..adapters.filesystem import AsyncFileSystemAdapter
            adapter = AsyncFileSystemAdapter()
        self.root = root
        self.matcher = matcher
        self.config = config or WalkConfig()
        self.adapter = adapter

    async def walk(self) -> List[FileEntry]:
        """Traverse the root.

        Returns:
            Matching entries in depth-first, name-sorted order

        Raises:
            InvalidPathError: If the root cannot be read or listed
            ListingError: If a directory cannot be enumerated
            StatError: If an entry's metadata cannot be read
        """
        root = await self.adapter.create_entry(self.root)
        results = await self._visit(root, root, root.depth)
        logger.debug("Finished walking %s (%d matches)", self.root, len(results))
        return results

    async def _list(self, entry: FileEntry, root: FileEntry) -> List[FileEntry]:
        """List children; an unreadable root is reported as an invalid path."""
        try:
            return await self.adapter.get_children(entry)
        except ListingError as e:
            if entry is root:
                raise InvalidPathError(root.path, cause=e.cause) from e
            raise

    def _report(self, entry: FileEntry, root: FileEntry) -> List[FileEntry]:
        """Apply the reporting rule to a single, unpruned entry."""
        if self.config.directories_only:
            if entry.is_directory() and entry is not root and self.matcher.test(entry):
                return [entry]
        elif not entry.is_directory() and self.matcher.test(entry):
            return [entry]
        return []

    async def _visit(self, entry: FileEntry, root: FileEntry, root_depth: int) -> List[FileEntry]:
        if not entry.is_directory():
            return self._report(entry, root)

        if self.config.should_prune(entry, root_depth):
            logger.debug("Pruned %s", entry.path)
            return []

        results = self._report(entry, root)
        children = await self._list(entry, root)

        parts: List[Union[List[FileEntry], 'asyncio.Task']] = []
        tasks = []
        for child in children:
            if child.is_directory():
                task = asyncio.ensure_future(self._visit(child, root, root_depth))
                tasks.append(task)
                parts.append(task)
            else:
                parts.append(self._report(child, root))

        await gather_ordered(tasks)

        for part in parts:
            results.extend(part.result() if isinstance(part, asyncio.Future) else part)
        return results
