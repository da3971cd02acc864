"""Query orchestration for houndtree.

A Query is a mutable configuration object: search roots, predicates and
walk options are accumulated through chained method calls, then
``execute()`` (asyncio) or ``execute_sync()`` runs one walker per search
root and merges their results in root order.

Example:
    >>> files = Query().paths('src', 'tests').ext('py').size('>1kb').execute_sync()
    >>> files = await Query().paths('docs').glob('*.md').depth(1).execute()
"""

import asyncio
import dataclasses
import logging
import os
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from . import predicates
from ._common.config import WalkConfig
from ._common.entry import TargetKind
from ._common.paths import normalize_paths, reduce_paths
from .aio.adapters.filesystem import AsyncFileSystemAdapter
from .aio.core.adapter import AsyncEntryAdapter
from .aio.core.walker import AsyncWalker, gather_ordered
from .errors import InvalidQueryError
from .events import QueryObserver
from .matcher import MatchBuilder
from .predicates import FilePredicate
from .sync.adapters.filesystem import FileSystemAdapter
from .sync.core.adapter import EntryAdapter
from .sync.core.walker import SyncWalker


logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']


class Query:
    """Builder and executor for one filesystem search.

    Every configuration method returns the same instance. The composed
    matcher is rebuilt on each execution, so a query can be modified and
    executed again.
    """

    def __init__(self,
                 adapter: Optional[EntryAdapter] = None,
                 async_adapter: Optional[AsyncEntryAdapter] = None):
        """Initialize an empty query searching the current directory.

        Args:
            adapter: Entry provider for ``execute_sync`` (default
                FileSystemAdapter)
            async_adapter: Entry provider for ``execute`` (default: a new
                AsyncFileSystemAdapter per execution)
        """
        self._search_paths: List[str] = [os.getcwd()]
        self._builder = MatchBuilder()
        self.config = WalkConfig()
        self._adapter = adapter
        self._async_adapter = async_adapter

    @classmethod
    def create(cls, **kwargs) -> 'Query':
        return cls(**kwargs)

    new_query = create

    # Search roots

    def paths(self, *paths: Union[PathLike, Iterable[PathLike]]) -> 'Query':
        """Replace the search roots (var-args or a single list)."""
        self._search_paths = normalize_paths(predicates.from_args(paths))
        return self

    def path(self, path: PathLike) -> 'Query':
        return self.paths(path)

    def get_search_paths(self) -> List[str]:
        """Return a copy of the roots that an execution would walk.

        Nested roots are dropped unless a maximum depth is configured.
        """
        if self.config.reduces_paths:
            return reduce_paths(self._search_paths)
        return list(self._search_paths)

    # Predicates

    def add(self, *filters: FilePredicate) -> 'Query':
        self._builder.add(*filters)
        return self

    def match(self, *items: Union[FilePredicate, str, Callable[..., Any]]) -> 'Query':
        """Add predicates, glob patterns or ``entry -> bool`` callables.

        Args:
            *items: Any mix of FilePredicate, glob string and callable

        Raises:
            TypeError: For any other kind of argument
        """
        for item in predicates.from_args(items):
            if isinstance(item, FilePredicate):
                self._builder.add(item)
            elif isinstance(item, str):
                self._builder.add(predicates.glob(item))
            elif callable(item):
                self._builder.add(predicates.custom_filter(item))
            else:
                raise TypeError(f"Cannot match on {type(item).__name__}")
        return self

    def add_filter(self, fn: Union[FilePredicate, Callable[..., Any]]) -> 'Query':
        return self.match(fn)

    def glob(self, pattern: str) -> 'Query':
        return self.add(predicates.glob(pattern))

    def like(self, pattern: str) -> 'Query':
        return self.add(predicates.like(pattern))

    def ext(self, *extensions: Union[str, Iterable[str]]) -> 'Query':
        return self.add(predicates.ext(*extensions))

    def discard(self, *patterns: Union[str, Iterable[str]]) -> 'Query':
        """Reject paths matching any of the regex patterns.

        Each pattern becomes its own filter, so all of them must fail to
        match for an entry to be kept.
        """
        for pattern in predicates.from_args(patterns):
            self.add(predicates.discard(pattern))
        return self

    def size(self, expression: Union[str, int, float]) -> 'Query':
        return self.add(predicates.size(expression))

    def is_empty(self) -> 'Query':
        return self.add(predicates.is_empty())

    def modified(self, expression: Union[str, int]) -> 'Query':
        return self.add(predicates.modified(expression))

    def accessed(self, expression: Union[str, int]) -> 'Query':
        return self.add(predicates.accessed(expression))

    def changed(self, expression: Union[str, int]) -> 'Query':
        return self.add(predicates.changed(expression))

    def socket(self) -> 'Query':
        return self.add(predicates.socket())

    def ignore_hidden_files(self) -> 'Query':
        return self.add(predicates.ignore_hidden_files())

    def ignore_hidden_path(self) -> 'Query':
        return self.add(predicates.ignore_hidden_path())

    def negate_all(self) -> 'Query':
        """Invert the whole composed matcher."""
        self._builder.negate_all()
        return self

    not_ = negate_all

    # Walk options

    def directory(self, exclude_hidden: bool = False) -> 'Query':
        """Report sub-directories instead of files."""
        self.config.directories_only = True
        return self.add(predicates.directories(exclude_hidden=exclude_hidden))

    def ignore_hidden_directories(self) -> 'Query':
        """Never descend into (or report) dot-directories, hidden roots included."""
        self.config.ignore_hidden_directories = True
        return self

    def depth(self, max_depth: int) -> 'Query':
        """Limit descent; ``depth(0)`` only looks inside the roots themselves."""
        self.config.max_depth = max_depth
        return self

    # Execution

    def _prepare(self) -> Tuple[FilePredicate, WalkConfig, List[str]]:
        """Validate, build the matcher and snapshot the walk configuration."""
        errors = self.config.validate()
        if errors:
            raise InvalidQueryError(errors)

        matcher = self._builder.build()
        directories_only = (
            self.config.directories_only
            or self._builder.target_kind is TargetKind.DIRECTORY
        )
        config = dataclasses.replace(self.config, directories_only=directories_only)
        roots = self.get_search_paths()
        logger.debug("Searching %s with %r", roots, matcher)
        return matcher, config, roots

    def iter_sync(self) -> Iterator[str]:
        """Lazily yield matching paths, root by root.

        Raises:
            InvalidQueryError: If the configuration is invalid
            HoundError: On the first filesystem failure
        """
        matcher, config, roots = self._prepare()
        adapter = self._adapter or FileSystemAdapter()
        for root in roots:
            for entry in SyncWalker(root, matcher, config, adapter).walk():
                yield entry.path

    def execute_sync(self, observer: Optional[QueryObserver] = None) -> List[str]:
        """Run the search synchronously, one root after the other.

        Args:
            observer: Optional match/error/end notification receiver

        Returns:
            Matching paths, roots in declaration order, each root in
            depth-first name order

        Raises:
            InvalidQueryError: If the configuration is invalid
            HoundError: On the first filesystem failure
        """
        observer = observer or QueryObserver()
        results = []
        try:
            for path in self.iter_sync():
                results.append(path)
                observer.on_match(path)
        except Exception as e:
            logger.warning("Search failed: %s", e)
            observer.on_error(e)
            raise
        finally:
            observer.on_end()
        return results

    async def execute(self, observer: Optional[QueryObserver] = None) -> List[str]:
        """Run the search with one concurrent walker per root.

        A failing root does not stop the others, but once any root has
        failed no further results are collected; every failure is passed to
        ``observer.on_error`` and the first one is raised after ``on_end``.

        Args:
            observer: Optional match/error/end notification receiver

        Returns:
            The same list ``execute_sync`` returns for the same tree

        Raises:
            InvalidQueryError: If the configuration is invalid
            HoundError: The first failure, in root order
        """
        observer = observer or QueryObserver()
        matcher, config, roots = self._prepare()
        adapter = self._async_adapter or AsyncFileSystemAdapter()

        tasks = [
            asyncio.ensure_future(AsyncWalker(root, matcher, config, adapter).walk())
            for root in roots
        ]
        results: List[str] = []
        errors: List[Exception] = []
        try:
            for root, task in zip(roots, tasks):
                try:
                    entries = await task
                except Exception as e:
                    logger.warning("Search of %s failed: %s", root, e)
                    errors.append(e)
                    observer.on_error(e)
                    continue

                if errors:
                    continue
                for entry in entries:
                    results.append(entry.path)
                    observer.on_match(entry.path)
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            observer.on_end()

        if errors:
            raise errors[0]
        return results

    # Aggregation

    @staticmethod
    async def any(*queries: Any) -> List[str]:
        """Concatenate the results of several queries.

        Accepts Query instances, awaitables already running (such as
        ``query.execute()`` coroutines or tasks) and plain result lists,
        as var-args or a single list.
        """
        async def resolve(item):
            if isinstance(item, Query):
                return await item.execute()
            if isinstance(item, list):
                return item
            return await item

        tasks = [asyncio.ensure_future(resolve(item)) for item in predicates.from_args(queries)]
        await gather_ordered(tasks)
        return [path for task in tasks for path in task.result()]

    @staticmethod
    def any_sync(*queries: Any) -> List[str]:
        """Synchronous form of ``any`` for Query instances and result lists."""
        results = []
        for item in predicates.from_args(queries):
            if isinstance(item, Query):
                results.extend(item.execute_sync())
            else:
                results.extend(item)
        return results

    def __repr__(self) -> str:
        return (
            f"Query(paths={self._search_paths!r}, predicates={len(self._builder)}, "
            f"config={self.config!r})"
        )
