"""Helpers for reading back a recorded trace."""

import logging
from typing import Iterable, List

from .entry import EntryKind, TraceEntry
from .exceptions import UnbalancedTraceError

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "  | "


def render_trace(entries: Iterable[str], indent: str = DEFAULT_INDENT) -> str:
    """Render recorded entries as an indented call tree.

    Each entry is printed on its own line, indented once per function that
    is still open when it was recorded.

    Args:
        entries: Recorded entry strings, oldest first (a Recorder works too)
        indent: Text repeated once per nesting level

    Returns:
        The rendered trace, lines joined by newlines
    """
    lines: List[str] = []
    depth = 0
    for position, text in enumerate(entries):
        entry = TraceEntry.parse(text)
        if entry.kind is EntryKind.EXIT:
            if depth == 0:
                logger.warning(
                    "exit from '%s' at entry %d has no open entry",
                    entry.function_name,
                    position,
                )
            else:
                depth -= 1
        lines.append(indent * depth + entry.text)
        if entry.kind is EntryKind.ENTER:
            depth += 1
    return "\n".join(lines)


def check_balance(entries: Iterable[str]):
    """Verify that every exit closes the most recently entered function.

    Raises:
        MalformedEntryError: If an entry is not trace entry text
        UnbalancedTraceError: If exits and entries do not pair up
    """
    open_calls: List[str] = []
    count = 0
    for position, text in enumerate(entries):
        count += 1
        entry = TraceEntry.parse(text)
        if entry.kind is EntryKind.ENTER:
            open_calls.append(entry.function_name)
            continue

        if not open_calls:
            raise UnbalancedTraceError(
                f"exit from '{entry.function_name}' with no open entry", position
            )
        current = open_calls.pop()
        if current != entry.function_name:
            raise UnbalancedTraceError(
                f"exit from '{entry.function_name}' while '{current}' is open",
                position,
            )

    if open_calls:
        raise UnbalancedTraceError(f"'{open_calls[-1]}' was never exited", count)
