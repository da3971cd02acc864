"""Filesystem entry snapshot shared by the sync and aio walkers.

A FileEntry is a pure data container. It is built by an adapter from a
single ``stat`` call when the walker first reaches a path and is never
mutated afterwards, so predicates can read it from any walker without
locking and the prune check and match check always agree.
"""

import os
import stat as stat_module
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class EntryKind(Enum):
    """File type of an entry, as reported by stat."""
    FILE = "file"
    DIRECTORY = "directory"
    SOCKET = "socket"
    SYMLINK = "symlink"
    OTHER = "other"


class TargetKind(Enum):
    """Which kind of entry a predicate is meant to select.

    A DIRECTORY-kind matcher switches the walker into directories-only mode.
    """
    REGULAR = "regular"
    DIRECTORY = "directory"


def kind_from_mode(mode: int) -> EntryKind:
    """Map a ``st_mode`` value to an EntryKind."""
    if stat_module.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat_module.S_ISREG(mode):
        return EntryKind.FILE
    if stat_module.S_ISSOCK(mode):
        return EntryKind.SOCKET
    if stat_module.S_ISLNK(mode):
        return EntryKind.SYMLINK
    return EntryKind.OTHER


def structural_depth(path: str) -> int:
    """Count the components of a normalised path.

    Only differences between two depths are meaningful, so relative and
    absolute paths both work as long as a root and its descendants are
    spelled the same way.
    """
    drive, rest = os.path.splitdrive(os.path.normpath(path))
    parts = [part for part in rest.split(os.sep) if part and part != os.curdir]
    return len(parts)


class FileEntry:
    """Immutable snapshot of one filesystem path.

    Attributes:
        path: Path string as reached from the search root
        name: Final path component
        kind: EntryKind of the entry
        size: Size in bytes
        modified_time: st_mtime
        accessed_time: st_atime
        changed_time: st_ctime
        depth: Structural depth of ``path``
    """

    __slots__ = (
        'path', 'name', 'kind', 'size',
        'modified_time', 'accessed_time', 'changed_time', 'depth',
    )

    def __init__(self,
                 path: str,
                 kind: EntryKind,
                 size: int = 0,
                 modified_time: float = 0.0,
                 accessed_time: float = 0.0,
                 changed_time: float = 0.0,
                 depth: Optional[int] = None):
        set_attr = object.__setattr__
        set_attr(self, 'path', path)
        set_attr(self, 'name', os.path.basename(path) or path)
        set_attr(self, 'kind', kind)
        set_attr(self, 'size', size)
        set_attr(self, 'modified_time', modified_time)
        set_attr(self, 'accessed_time', accessed_time)
        set_attr(self, 'changed_time', changed_time)
        set_attr(self, 'depth', structural_depth(path) if depth is None else depth)

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result,
                  depth: Optional[int] = None) -> 'FileEntry':
        """Build an entry from a stat result."""
        return cls(
            path,
            kind_from_mode(st.st_mode),
            size=st.st_size,
            modified_time=st.st_mtime,
            accessed_time=st.st_atime,
            changed_time=st.st_ctime,
            depth=depth,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def identifier(self) -> str:
        return self.path

    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_socket(self) -> bool:
        return self.kind is EntryKind.SOCKET

    def is_hidden(self) -> bool:
        """True when the entry name starts with a dot (``.`` and ``..`` excluded)."""
        return self.name.startswith('.') and self.name not in (os.curdir, os.pardir)

    def extension(self) -> str:
        """Extension without the leading dot, or an empty string."""
        return os.path.splitext(self.name)[1][1:]

    def depth_relative_to(self, ancestor_depth: int) -> int:
        return self.depth - ancestor_depth

    def metadata(self) -> Dict[str, Any]:
        """Return the snapshot as a dictionary."""
        return {
            'path': self.path,
            'name': self.name,
            'type': self.kind.value,
            'size': self.size,
            'mtime': self.modified_time,
            'mtime_dt': datetime.fromtimestamp(self.modified_time),
            'atime': self.accessed_time,
            'atime_dt': datetime.fromtimestamp(self.accessed_time),
            'ctime': self.changed_time,
            'ctime_dt': datetime.fromtimestamp(self.changed_time),
            'depth': self.depth,
            'hidden': self.is_hidden(),
            'extension': self.extension(),
        }

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"FileEntry(path={self.path!r}, kind={self.kind.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileEntry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)
