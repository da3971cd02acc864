"""Exception hierarchy for houndtree.

Filesystem failures are never swallowed: they are wrapped in one of the
classes below (chaining the underlying ``OSError``) and propagated to the
caller of ``Query.execute`` / ``Query.execute_sync``.
"""

from typing import Optional


class HoundError(Exception):
    """Base class for all houndtree errors."""


class FileSystemError(HoundError):
    """An error tied to one filesystem path.

    Attributes:
        path: Path that failed
        cause: Underlying OS error, if any
    """

    def __init__(self, path: str, message: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        if message is None:
            message = f"{self.__class__.__name__} for {path!r}"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message)


class InvalidPathError(FileSystemError):
    """A search root does not exist or cannot be read."""


class ListingError(FileSystemError):
    """A directory could not be enumerated during traversal."""


class StatError(FileSystemError):
    """Metadata for an entry could not be obtained."""


class ExpressionError(HoundError, ValueError):
    """A size or date expression could not be parsed."""

    def __init__(self, expression, reason: str = "invalid expression"):
        self.expression = expression
        super().__init__(f"{reason}: {expression!r}")


class InvalidQueryError(HoundError, ValueError):
    """Query configuration is inconsistent (e.g. negative depth)."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
