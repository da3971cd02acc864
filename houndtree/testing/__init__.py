"""Testing utilities for houndtree consumers."""

from .fixtures import MemoryAdapter, build_tree, make_entry, relative_paths, set_times

__all__ = ['MemoryAdapter', 'build_tree', 'make_entry', 'relative_paths', 'set_times']
