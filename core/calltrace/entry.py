"""Trace entry definitions for recorded function calls."""

from enum import Enum
from typing import Any, Dict

from .exceptions import MalformedEntryError


class EntryKind(Enum):
    """Kinds of recorded events, valued by their text prefix."""

    ENTER = "entering function "  # Function was entered
    EXIT = "exiting function "  # Function was exited


class TraceEntry:
    """Represents a single recorded function entry or exit."""

    __slots__ = ("kind", "function_name")

    def __init__(self, kind: EntryKind, function_name: str):
        """Initialize a trace entry.

        Args:
            kind: Whether the function was entered or exited
            function_name: Name of the function, used verbatim
        """
        self.kind = kind
        self.function_name = function_name

    @classmethod
    def parse(cls, text: str) -> "TraceEntry":
        """Recover an entry from its recorded text.

        Args:
            text: A string previously produced by a recorder

        Returns:
            The matching TraceEntry

        Raises:
            MalformedEntryError: If the text starts with neither prefix
        """
        if isinstance(text, str):
            for kind in EntryKind:
                if text.startswith(kind.value):
                    return cls(kind, text[len(kind.value) :])
        raise MalformedEntryError(text)

    @property
    def text(self) -> str:
        """The entry as it is stored in a trace buffer."""
        return self.kind.value + self.function_name

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.name.lower(), "function": self.function_name}

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraceEntry):
            return NotImplemented
        return self.kind is other.kind and self.function_name == other.function_name

    def __hash__(self) -> int:
        return hash((self.kind, self.function_name))

    def __repr__(self) -> str:
        return f"TraceEntry(kind={self.kind}, function='{self.function_name}')"
