"""Call trace module for recording function entry and exit.

This module records "entering function"/"exiting function" strings in call
order. Recorders are plain objects that can be created per test or per run;
a process-wide default recorder backs the module-level helpers.
"""

from .entry import EntryKind, TraceEntry
from .exceptions import CallTraceException, MalformedEntryError, UnbalancedTraceError
from .recorder import (
    Recorder,
    get_default_recorder,
    record_entry,
    record_exit,
    set_default_recorder,
    trace_async_function,
    trace_function,
)
from .render import check_balance, render_trace

__all__ = [
    "Recorder",
    "record_entry",
    "record_exit",
    "trace_function",
    "trace_async_function",
    "TraceEntry",
    "EntryKind",
    "render_trace",
    "check_balance",
    "get_default_recorder",
    "set_default_recorder",
    "CallTraceException",
    "MalformedEntryError",
    "UnbalancedTraceError",
]
