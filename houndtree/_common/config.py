"""Walk configuration for houndtree.

This module defines how a query tells a walker where to stop descending and
which entries are candidates for matching.
"""

from dataclasses import dataclass
from typing import List, Optional

from .entry import FileEntry


@dataclass
class WalkConfig:
    """Configuration shared by SyncWalker and AsyncWalker."""

    max_depth: Optional[int] = None          # None = unbounded
    directories_only: bool = False           # Report directories, not files
    ignore_hidden_directories: bool = False  # Never enter dot-directories

    def is_beyond_depth(self, depth: int) -> bool:
        """Check if a directory at this relative depth is past the limit.

        Args:
            depth: Depth relative to the search root

        Returns:
            True if the directory must not be entered
        """
        return self.max_depth is not None and depth > self.max_depth

    def should_prune(self, directory: FileEntry, root_depth: int) -> bool:
        """Check if a directory must be treated as a leaf.

        Pruned directories are neither descended into nor reported, whatever
        the matcher would say about them.

        Args:
            directory: Directory entry being visited
            root_depth: Structural depth of the search root

        Returns:
            True if the walker must skip this directory
        """
        if self.is_beyond_depth(directory.depth_relative_to(root_depth)):
            return True
        return self.ignore_hidden_directories and directory.is_hidden()

    @property
    def reduces_paths(self) -> bool:
        """Nested roots are merged only when depth is unbounded.

        A depth limit is relative to each stated root, so dropping a nested
        root would change the result.
        """
        return self.max_depth is None

    @classmethod
    def shallow(cls, max_depth: int = 0) -> 'WalkConfig':
        """Config for looking only at the top of each root."""
        return cls(max_depth=max_depth)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        return errors
