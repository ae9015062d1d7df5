"""Exception hierarchy for rez.

Stringification and escaping never raise on their own; the only failure the
core reports is a caller handing ``concat`` something that is not a sequence.
"""

from typing import Any


class RezError(Exception):
    """Base exception for all rez errors."""


class SequenceTypeError(RezError, TypeError):
    """Raised when concat receives a value that is not an ordered collection."""

    def __init__(self, value: Any) -> None:
        self.received_type = type(value).__name__
        super().__init__(
            f"concat expects a sequence or 1-indexed mapping, got {self.received_type}"
        )
