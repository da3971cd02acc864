"""Progress notifications for query execution.

An observer is passed explicitly to ``Query.execute`` or
``Query.execute_sync``. Notifications are observational only: nothing an
observer does changes the returned results. Exceptions raised by an
observer propagate to the caller.
"""

from typing import Callable, Optional


class QueryObserver:
    """Receives match, error and end notifications. All hooks are no-ops."""

    def on_match(self, path: str) -> None:
        """Called once per reported path, in result order."""
        pass

    def on_error(self, error: Exception) -> None:
        """Called for every root that failed."""
        pass

    def on_end(self) -> None:
        """Called exactly once when the execution finishes, failed or not."""
        pass


class CallbackObserver(QueryObserver):
    """Observer built from plain callables.

    Example:
        >>> observer = CallbackObserver(on_match=print)
        >>> Query().paths('src').ext('py').execute_sync(observer)
    """

    def __init__(self,
                 on_match: Optional[Callable[[str], None]] = None,
                 on_error: Optional[Callable[[Exception], None]] = None,
                 on_end: Optional[Callable[[], None]] = None):
        self._on_match = on_match
        self._on_error = on_error
        self._on_end = on_end

    def on_match(self, path: str) -> None:
        if self._on_match is not None:
            self._on_match(path)

    def on_error(self, error: Exception) -> None:
        if self._on_error is not None:
            self._on_error(error)

    def on_end(self) -> None:
        if self._on_end is not None:
            self._on_end()


class RecordingObserver(QueryObserver):
    """Observer that keeps every notification, mostly useful in tests."""

    def __init__(self):
        self.matches = []
        self.errors = []
        self.ended = 0

    def on_match(self, path: str) -> None:
        self.matches.append(path)

    def on_error(self, error: Exception) -> None:
        self.errors.append(error)

    def on_end(self) -> None:
        self.ended += 1
