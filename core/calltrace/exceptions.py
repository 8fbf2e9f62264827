"""Exceptions raised while inspecting recorded traces."""


class CallTraceException(Exception):
    """Base class for call trace errors."""


class MalformedEntryError(CallTraceException, ValueError):
    """Raised when a string is not a recorded trace entry."""

    def __init__(self, text):
        super().__init__(f"Not a trace entry: {text!r}")
        self.text = text


class UnbalancedTraceError(CallTraceException):
    """Raised when exits do not pair up with the entries before them."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at entry {position})")
        self.position = position
