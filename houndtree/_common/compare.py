"""Comparator parser for size and date expressions.

Size expressions look like ``"<10kb"``, ``">= 1 mb"`` or ``20`` (a bare
number means equality, in bytes). Date expressions look like ``"< 2 days"``
or ``"> 8 hours"``: ``<`` selects timestamps more recent than the given
amount of time ago, ``>`` older ones and ``==`` those falling in the same
whole unit.

Both parsers return a callable ``value -> bool``; predicates only ever call
the result.
"""

import operator
import re
import time
from typing import Callable, Optional, Union

from ..errors import ExpressionError


OPERATORS = {
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
    '==': operator.eq,
    '=': operator.eq,
}

SIZE_UNITS = {
    '': 1,
    'b': 1,
    'k': 1024,
    'kb': 1024,
    'm': 1024 ** 2,
    'mb': 1024 ** 2,
    'g': 1024 ** 3,
    'gb': 1024 ** 3,
    't': 1024 ** 4,
    'tb': 1024 ** 4,
}

TIME_UNITS = {
    'second': 1,
    'seconds': 1,
    'minute': 60,
    'minutes': 60,
    'hour': 3600,
    'hours': 3600,
    'day': 86400,
    'days': 86400,
    'week': 7 * 86400,
    'weeks': 7 * 86400,
}

_SIZE_PATTERN = re.compile(r'^\s*(<=|>=|==|=|<|>)?\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$')
_DATE_PATTERN = re.compile(r'^\s*(<=|>=|==|=|<|>)?\s*(\d+)\s*([a-zA-Z]*)\s*$')


class Comparison:
    """A parsed expression, callable on the value to test."""

    def __init__(self, expression: str, op: str, test: Callable[[float], bool]):
        self.expression = expression
        self.operator = op
        self._test = test

    def __call__(self, value: float) -> bool:
        return self._test(value)

    def __repr__(self) -> str:
        return f"Comparison({self.expression!r})"


def parse_size_expression(expression: Union[str, int, float]) -> Comparison:
    """Parse a size expression into a byte-count comparator.

    Args:
        expression: e.g. ``20``, ``"==20"``, ``"<10kb"``, ``">= 1.5 mb"``

    Returns:
        Comparison accepting a size in bytes

    Raises:
        ExpressionError: If the expression is malformed or the unit unknown
    """
    text = str(expression)
    match = _SIZE_PATTERN.match(text)
    if match is None:
        raise ExpressionError(expression, "invalid size expression")

    op, amount, unit = match.groups()
    op = op or '=='
    unit = unit.lower()
    if unit not in SIZE_UNITS:
        raise ExpressionError(expression, f"unknown size unit {unit!r}")

    limit = float(amount) * SIZE_UNITS[unit]
    compare = OPERATORS[op]
    return Comparison(text, op, lambda size: compare(size, limit))


def parse_date_expression(expression: Union[str, int],
                          now: Optional[float] = None) -> Comparison:
    """Parse a relative date expression into a timestamp comparator.

    The reference instant is fixed when the expression is parsed. The
    comparison is made on the whole number of units (truncated toward zero)
    between ``now - amount`` and the tested timestamp.

    Args:
        expression: e.g. ``10`` (days), ``"< 2 days"``, ``"> 8 hours"``
        now: Reference timestamp, defaults to ``time.time()``

    Returns:
        Comparison accepting a POSIX timestamp

    Raises:
        ExpressionError: If the expression is malformed or the unit unknown
    """
    text = str(expression)
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ExpressionError(expression, "invalid date expression")

    op, amount, unit = match.groups()
    op = op or '=='
    unit = (unit or 'days').lower()
    if unit not in TIME_UNITS:
        raise ExpressionError(expression, f"unknown time unit {unit!r}")

    unit_seconds = TIME_UNITS[unit]
    reference = (time.time() if now is None else now) - int(amount) * unit_seconds
    compare = OPERATORS[op]

    def test(timestamp: float) -> bool:
        difference = int((reference - timestamp) / unit_seconds)
        return compare(difference, 0)

    return Comparison(text, op, test)
