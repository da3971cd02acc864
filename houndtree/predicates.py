"""Composable predicates over filesystem entries.

Every predicate is an immutable object with a pure ``test(entry)`` method
and a target kind. Combinators (And, Or, Not) build new predicates without
touching their operands, so one predicate can be shared by several queries
and by concurrently running walkers.

Example:
    >>> from houndtree.predicates import ext, size, glob
    >>> big_json = ext('json').and_(size('>1kb'))
    >>> not_tmp = glob('*.tmp').not_()
"""

import fnmatch
import functools
import os
import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Pattern, Tuple, Union

from cachetools import LRUCache, cached

from ._common.compare import parse_date_expression, parse_size_expression
from ._common.entry import FileEntry, TargetKind


_HIDDEN_SEGMENT = re.compile(r'(^|/)\.[^/.]')


@cached(LRUCache(maxsize=256))
def compile_glob(pattern: str) -> Pattern:
    """Compile a glob pattern once and share the regex between predicates.

    Matching is case-sensitive on every platform.
    """
    return re.compile(fnmatch.translate(pattern))


def _combined_kind(*predicates: 'FilePredicate') -> TargetKind:
    for predicate in predicates:
        if predicate.target_kind is TargetKind.DIRECTORY:
            return TargetKind.DIRECTORY
    return TargetKind.REGULAR


def from_args(args: Tuple[Any, ...]) -> List[Any]:
    """Accept both var-args and a single list/tuple/set argument."""
    if len(args) == 1 and isinstance(args[0], (list, tuple, set, frozenset)):
        return list(args[0])
    return list(args)


def clean_extension(extension: str) -> str:
    """Strip one leading dot: ``'.json'`` and ``'json'`` are equivalent."""
    if extension.startswith('.'):
        return extension[1:]
    return extension


class FilePredicate(ABC):
    """Abstract base class for entry predicates.

    Subclasses implement ``test``. The boolean algebra is provided here
    both as methods (``and_``, ``or_``, ``not_``) and as the ``&``, ``|``
    and ``~`` operators.
    """

    target_kind: TargetKind = TargetKind.REGULAR

    @abstractmethod
    def test(self, entry: FileEntry) -> bool:
        """Return True if the entry satisfies this predicate.

        Must be free of side effects.
        """
        pass

    def and_(self, other: 'FilePredicate') -> 'FilePredicate':
        return And(self, other)

    def or_(self, other: 'FilePredicate') -> 'FilePredicate':
        return Or(self, other)

    def not_(self) -> 'FilePredicate':
        return Not(self)

    def __and__(self, other: 'FilePredicate') -> 'FilePredicate':
        if not isinstance(other, FilePredicate):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: 'FilePredicate') -> 'FilePredicate':
        if not isinstance(other, FilePredicate):
            return NotImplemented
        return self.or_(other)

    def __invert__(self) -> 'FilePredicate':
        return self.not_()

    def __call__(self, entry: FileEntry) -> bool:
        return self.test(entry)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# Combinators

class And(FilePredicate):
    """True when both operands are true."""

    def __init__(self, left: FilePredicate, right: FilePredicate):
        self.left = left
        self.right = right
        self.target_kind = _combined_kind(left, right)

    def test(self, entry: FileEntry) -> bool:
        return self.left.test(entry) and self.right.test(entry)

    def __repr__(self) -> str:
        return f"And({self.left!r}, {self.right!r})"


class Or(FilePredicate):
    """True when either operand is true."""

    def __init__(self, left: FilePredicate, right: FilePredicate):
        self.left = left
        self.right = right
        self.target_kind = _combined_kind(left, right)

    def test(self, entry: FileEntry) -> bool:
        return self.left.test(entry) or self.right.test(entry)

    def __repr__(self) -> str:
        return f"Or({self.left!r}, {self.right!r})"


class Not(FilePredicate):
    """Negation of the inner predicate, keeping its target kind."""

    def __init__(self, inner: FilePredicate):
        self.inner = inner
        self.target_kind = inner.target_kind

    def test(self, entry: FileEntry) -> bool:
        return not self.inner.test(entry)

    def __repr__(self) -> str:
        return f"Not({self.inner!r})"


# Atomic predicates

class Everything(FilePredicate):
    def test(self, entry: FileEntry) -> bool:
        return True


class Nothing(FilePredicate):
    """Rejects every entry. Used as the matcher of an empty query."""

    def test(self, entry: FileEntry) -> bool:
        return False


class Extension(FilePredicate):
    """Matches entries whose extension is one of ``extensions``."""

    def __init__(self, extensions: Iterable[str]):
        self.extensions = frozenset(clean_extension(e) for e in extensions)

    def test(self, entry: FileEntry) -> bool:
        return entry.extension() in self.extensions

    def __repr__(self) -> str:
        return f"Extension({sorted(self.extensions)!r})"


class Glob(FilePredicate):
    """Glob match on the entry path.

    Patterns without a slash are matched against the entry name only;
    patterns with one are matched against the whole path, ``/``-separated.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.match_base = '/' not in pattern
        self._regex = compile_glob(pattern)

    def test(self, entry: FileEntry) -> bool:
        if self.match_base:
            return self._regex.match(entry.name) is not None
        return self._regex.match(entry.path.replace(os.sep, '/')) is not None

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"


class TextMatch(FilePredicate):
    """Regular expression search anywhere in the entry path."""

    def __init__(self, pattern: str, flags: int = 0):
        self.pattern = pattern
        self._regex = re.compile(pattern, flags)

    def test(self, entry: FileEntry) -> bool:
        return self._regex.search(entry.path) is not None

    def __repr__(self) -> str:
        return f"TextMatch({self.pattern!r})"


class Size(FilePredicate):
    def __init__(self, expression: Union[str, int, float]):
        self.expression = expression
        self._compare = parse_size_expression(expression)

    def test(self, entry: FileEntry) -> bool:
        return self._compare(entry.size)

    def __repr__(self) -> str:
        return f"Size({self.expression!r})"


class _TimePredicate(FilePredicate):
    """Base for predicates comparing one of the entry timestamps."""

    attribute = 'modified_time'

    def __init__(self, expression: Union[str, int], now: Optional[float] = None):
        self.expression = expression
        self._compare = parse_date_expression(expression, now=now)

    def test(self, entry: FileEntry) -> bool:
        return self._compare(getattr(entry, self.attribute))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.expression!r})"


class Modified(_TimePredicate):
    attribute = 'modified_time'


class Accessed(_TimePredicate):
    attribute = 'accessed_time'


class Changed(_TimePredicate):
    attribute = 'changed_time'


class Socket(FilePredicate):
    def test(self, entry: FileEntry) -> bool:
        return entry.is_socket()


class Directory(FilePredicate):
    """Selects directories; switches a query into directories-only mode."""

    target_kind = TargetKind.DIRECTORY

    def __init__(self, exclude_hidden: bool = False):
        self.exclude_hidden = exclude_hidden

    def test(self, entry: FileEntry) -> bool:
        if self.exclude_hidden and entry.is_hidden():
            return False
        return entry.is_directory()

    def __repr__(self) -> str:
        return f"Directory(exclude_hidden={self.exclude_hidden})"


class IgnoreHiddenFile(FilePredicate):
    def test(self, entry: FileEntry) -> bool:
        return not entry.is_hidden()


class IgnoreHiddenPath(FilePredicate):
    """Rejects entries with a hidden component anywhere in their path."""

    def test(self, entry: FileEntry) -> bool:
        path = entry.path.replace(os.sep, '/')
        return _HIDDEN_SEGMENT.search(path) is None and not entry.is_hidden()


class CustomFilter(FilePredicate):
    """Wraps a plain ``entry -> bool`` callable."""

    def __init__(self, fn: Callable[[FileEntry], Any]):
        self.fn = fn

    def test(self, entry: FileEntry) -> bool:
        return bool(self.fn(entry))

    def __repr__(self) -> str:
        name = getattr(self.fn, '__name__', repr(self.fn))
        return f"CustomFilter({name})"


# Factory functions

def ext(*extensions: Union[str, Iterable[str]]) -> FilePredicate:
    """Match any of the given extensions (var-args or a single list)."""
    return Extension(from_args(extensions))


def glob(pattern: str) -> FilePredicate:
    return Glob(pattern)


def like(pattern: str, flags: int = 0) -> FilePredicate:
    return TextMatch(pattern, flags)


def discard(*patterns: Union[str, Iterable[str]]) -> FilePredicate:
    """Reject entries whose path matches any of the regex ``patterns``."""
    patterns = from_args(patterns)
    if not patterns:
        raise ValueError("discard() needs at least one pattern")
    if len(patterns) == 1:
        return TextMatch(patterns[0]).not_()
    matches = [TextMatch(pattern) for pattern in patterns]
    return functools.reduce(lambda a, b: a.or_(b), matches).not_()


def size(expression: Union[str, int, float]) -> FilePredicate:
    return Size(expression)


def is_empty() -> FilePredicate:
    return Size(0)


def modified(expression: Union[str, int]) -> FilePredicate:
    return Modified(expression)


def accessed(expression: Union[str, int]) -> FilePredicate:
    return Accessed(expression)


def changed(expression: Union[str, int]) -> FilePredicate:
    return Changed(expression)


def socket() -> FilePredicate:
    return Socket()


def directories(exclude_hidden: bool = False) -> FilePredicate:
    return Directory(exclude_hidden=exclude_hidden)


def ignore_hidden_files() -> FilePredicate:
    return IgnoreHiddenFile()


def ignore_hidden_path() -> FilePredicate:
    return IgnoreHiddenPath()


def custom_filter(fn: Callable[[FileEntry], Any]) -> FilePredicate:
    return CustomFilter(fn)


def everything() -> FilePredicate:
    return Everything()


def nothing() -> FilePredicate:
    return Nothing()
