"""Entry adapters for specific storage backends.

Adapters implement the EntryAdapter interface, turning paths into
FileEntry snapshots and listing directory children.
"""

from .filesystem import FileSystemAdapter, scan_directory, stat_root

__all__ = [
    "FileSystemAdapter",
    "scan_directory",
    "stat_root",
]
