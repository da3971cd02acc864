"""EntryAdapter abstraction for houndtree.

The walker never touches the filesystem itself. It asks an adapter for
the root entry and for the children of each directory, which keeps the
traversal logic independent of where entries come from.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from ..._common.entry import FileEntry, structural_depth


class EntryAdapter(ABC):
    """Abstract adapter providing entries to a SyncWalker."""

    @abstractmethod
    def create_entry(self, path: str) -> FileEntry:
        """Build the entry for a search root.

        Args:
            path: Normalised root path

        Returns:
            FileEntry snapshot of the root

        Raises:
            InvalidPathError: If the root does not exist or cannot be read
        """
        pass

    @abstractmethod
    def get_children(self, entry: FileEntry) -> Iterator[FileEntry]:
        """Get the children of a directory, sorted by name.

        Args:
            entry: The parent entry

        Returns:
            Iterator of child entries; empty for non-directories

        Raises:
            ListingError: If the directory cannot be enumerated
            StatError: If a child's metadata cannot be read
        """
        pass

    def get_depth(self, path: str) -> int:
        """Structural depth of a path (number of components)."""
        return structural_depth(path)
