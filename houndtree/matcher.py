"""Predicate builder for houndtree queries.

A MatchBuilder collects the predicates supplied by a caller and produces
the single composed matcher used for one query execution.
"""

import functools
from typing import List

from ._common.entry import TargetKind
from .predicates import FilePredicate, Nothing


class MatchBuilder:
    """Accumulates predicates and composes them with AND.

    The builder stays mutable; ``build()`` takes a snapshot so a matcher
    that is already in use never changes underneath a running walker.
    """

    def __init__(self):
        self._predicates: List[FilePredicate] = []
        self._negate = False
        self._target_kind = TargetKind.REGULAR

    @property
    def target_kind(self) -> TargetKind:
        """DIRECTORY once any directory-kind predicate was added."""
        return self._target_kind

    @property
    def negated(self) -> bool:
        return self._negate

    @property
    def predicates(self) -> List[FilePredicate]:
        return list(self._predicates)

    def add(self, *predicates: FilePredicate) -> 'MatchBuilder':
        """Add predicates to the AND-reduction.

        Args:
            *predicates: FilePredicate instances

        Returns:
            This builder, for chaining

        Raises:
            TypeError: If an argument is not a FilePredicate
        """
        for predicate in predicates:
            if not isinstance(predicate, FilePredicate):
                raise TypeError(
                    f"Expected a FilePredicate, got {type(predicate).__name__}"
                )
            if predicate.target_kind is TargetKind.DIRECTORY:
                self._target_kind = TargetKind.DIRECTORY
            self._predicates.append(predicate)
        return self

    def negate_all(self) -> 'MatchBuilder':
        """Wrap the composed matcher in Not on the next ``build()``."""
        self._negate = True
        return self

    def build(self) -> FilePredicate:
        """Compose the added predicates into one matcher.

        Returns:
            ``Nothing`` when no predicates were added, otherwise the
            AND-reduction of all predicates (negated if requested)
        """
        if not self._predicates:
            return Nothing()

        matcher = functools.reduce(lambda a, b: a.and_(b), self._predicates)
        if self._negate:
            return matcher.not_()
        return matcher

    def __len__(self) -> int:
        return len(self._predicates)
