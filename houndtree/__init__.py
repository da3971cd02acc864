"""houndtree - Composable filesystem queries.

houndtree finds files (or directories) below one or more search roots by
combining small predicates (extension, glob, regex, size, timestamps,
custom callables) into a single matcher and walking the roots with it.

Choose your execution model:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from houndtree import Query
    files = Query().paths('src').ext('py').execute_sync()

Asynchronous:
    from houndtree import Query
    files = await Query().paths('src').ext('py').execute()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both produce the same results in the same order for the same tree.
"""

__version__ = "0.1.0"

from . import sync
from . import aio
from . import predicates
from ._common import (
    EntryKind,
    FileEntry,
    TargetKind,
    WalkConfig,
    find_subdirectories,
    is_subdirectory,
    reduce_paths,
)
from .errors import (
    ExpressionError,
    FileSystemError,
    HoundError,
    InvalidPathError,
    InvalidQueryError,
    ListingError,
    StatError,
)
from .events import CallbackObserver, QueryObserver, RecordingObserver
from .matcher import MatchBuilder
from .predicates import FilePredicate
from .query import Query

__all__ = [
    "__version__",
    "sync",
    "aio",
    "predicates",
    # Query
    "Query",
    "MatchBuilder",
    "FilePredicate",
    # Entries and configuration
    "FileEntry",
    "EntryKind",
    "TargetKind",
    "WalkConfig",
    # Paths
    "reduce_paths",
    "find_subdirectories",
    "is_subdirectory",
    # Observers
    "QueryObserver",
    "CallbackObserver",
    "RecordingObserver",
    # Errors
    "HoundError",
    "FileSystemError",
    "InvalidPathError",
    "ListingError",
    "StatError",
    "ExpressionError",
    "InvalidQueryError",
]
