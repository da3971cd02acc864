"""Synchronous walker for houndtree.

Depth-first, pre-order traversal of one search root. Directories are
visited in name order, so the output is reproducible across runs and
identical to the AsyncWalker's.
"""

import logging
from typing import Iterator, Optional

from ..._common.config import WalkConfig
from ..._common.entry import FileEntry
from ...errors import InvalidPathError, ListingError
from ...predicates import FilePredicate
from .adapter import EntryAdapter


logger = logging.getLogger(__name__)


class SyncWalker:
    """Walks one root and yields the entries accepted by a matcher.

    Example:
        >>> walker = SyncWalker('src', ext('py'), WalkConfig(), FileSystemAdapter())
        >>> for entry in walker.walk():
        ...     print(entry.path)
    """

    def __init__(self,
                 root: str,
                 matcher: FilePredicate,
                 config: Optional[WalkConfig] = None,
                 adapter: Optional[EntryAdapter] = None):
        """Initialize walker.

        Args:
            root: Normalised search root
            matcher: Composed predicate deciding which entries are reported
            config: Depth, hidden-directory and directories-only settings
            adapter: Entry provider (defaults to FileSystemAdapter)
        """
        if adapter is None:
            from ..adapters.filesystem import FileSystemAdapter
            adapter = FileSystemAdapter()
        self.root = root
        self.matcher = matcher
        self.config = config or WalkConfig()
        self.adapter = adapter

    def walk(self) -> Iterator[FileEntry]:
        """Traverse the root lazily.

        Yields:
            Matching entries in depth-first, name-sorted order

        Raises:
            InvalidPathError: If the root cannot be read or listed
            ListingError: If a directory cannot be enumerated
            StatError: If an entry's metadata cannot be read
        """
        root = self.adapter.create_entry(self.root)
        yield from self._visit(root, root, root.depth)
        logger.debug("Finished walking %s", self.root)

    def _visit(self, entry: FileEntry, root: FileEntry, root_depth: int) -> Iterator[FileEntry]:
        is_directory = entry.is_directory()

        if is_directory and self.config.should_prune(entry, root_depth):
            logger.debug("Pruned %s", entry.path)
            return

        if self.config.directories_only:
            if is_directory and entry is not root and self.matcher.test(entry):
                yield entry
        elif not is_directory and self.matcher.test(entry):
            yield entry

        if is_directory:
            for child in self._list(entry, root):
                yield from self._visit(child, root, root_depth)

    def _list(self, entry: FileEntry, root: FileEntry) -> Iterator[FileEntry]:
        """List children; an unreadable root is reported as an invalid path."""
        try:
            return self.adapter.get_children(entry)
        except ListingError as e:
            if entry is root:
                raise InvalidPathError(root.path, cause=e.cause) from e
            raise
