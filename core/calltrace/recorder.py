"""Recorder implementation collecting function entry and exit events."""

import functools
import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from .entry import EntryKind

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Recorder:
    """Ordered, append-only buffer of trace entries.

    Each ``record_entry``/``record_exit`` call appends exactly one string,
    so the buffer reflects the order in which calls were made.
    """

    def __init__(self, name: str = "default"):
        """Initialize the recorder.

        Args:
            name: Label used in the repr and in log records
        """
        self.name = name
        self._buffer: List[str] = []
        self._lock = threading.Lock()
        self._entered = 0
        self._exited = 0

    def _append(self, kind: EntryKind, function_name: str):
        text = kind.value + function_name
        with self._lock:
            self._buffer.append(text)
            if kind is EntryKind.ENTER:
                self._entered += 1
            else:
                self._exited += 1
        logger.debug("recorder %s: %s", self.name, text)

    def record_entry(self, function_name: str):
        """Record that a function was entered.

        Args:
            function_name: Function name, appended verbatim
        """
        self._append(EntryKind.ENTER, function_name)

    def record_exit(self, function_name: str):
        """Record that a function was exited.

        Args:
            function_name: Function name, appended verbatim
        """
        self._append(EntryKind.EXIT, function_name)

    @contextmanager
    def span(self, function_name: str):
        """Record an entry now and the matching exit when the block ends.

        Args:
            function_name: Function name for both entries
        """
        self.record_entry(function_name)
        try:
            yield self
        finally:
            self.record_exit(function_name)

    @property
    def entries(self) -> Tuple[str, ...]:
        """Snapshot of all entries recorded so far, oldest first."""
        with self._lock:
            return tuple(self._buffer)

    @property
    def entered_count(self) -> int:
        return self._entered

    @property
    def exited_count(self) -> int:
        return self._exited

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, index):
        return self._buffer[index]

    def __repr__(self) -> str:
        return f"Recorder(name='{self.name}', entries={len(self)})"


# Process-wide default recorder
_default_recorder = Recorder()
_recorder_lock = threading.Lock()


def get_default_recorder() -> Recorder:
    """Get the process-wide default recorder."""
    return _default_recorder


def set_default_recorder(recorder: Recorder):
    """Replace the process-wide default recorder."""
    global _default_recorder
    if not isinstance(recorder, Recorder):
        raise TypeError(
            f"Expected a Recorder, got {type(recorder).__name__}"
        )
    with _recorder_lock:
        _default_recorder = recorder
    logger.debug("default recorder set to %r", recorder)


def record_entry(function_name: str):
    """Record a function entry on the default recorder."""
    get_default_recorder().record_entry(function_name)


def record_exit(function_name: str):
    """Record a function exit on the default recorder."""
    get_default_recorder().record_exit(function_name)


def trace_function(name: Optional[str] = None, recorder: Optional[Recorder] = None):
    """Decorator recording entry and exit of each call.

    Args:
        name: Recorded function name (defaults to function name)
        recorder: Target recorder (defaults to the default recorder at call time)
    """

    def decorator(func: F) -> F:
        trace_name = name if name is not None else func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            target = recorder if recorder is not None else get_default_recorder()
            with target.span(trace_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator


def trace_async_function(
    name: Optional[str] = None, recorder: Optional[Recorder] = None
):
    """Decorator recording entry and exit of each awaited coroutine call.

    Args:
        name: Recorded function name (defaults to function name)
        recorder: Target recorder (defaults to the default recorder at call time)
    """

    def decorator(func: F) -> F:
        trace_name = name if name is not None else func.__name__

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            target = recorder if recorder is not None else get_default_recorder()
            with target.span(trace_name):
                return await func(*args, **kwargs)

        return async_wrapper

    return decorator
