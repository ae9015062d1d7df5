"""Result objects for detailed HTML escaping.

``escape_html`` returns a bare string; ``HtmlEscaper.escape_detailed`` returns
an ``EscapeResult`` that also records every substitution it made.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class EscapeChange:
    """Record of a single character substitution.

    Attributes:
        position: Character position in the stringified input
        original_char: Character that was replaced
        replacement: Text written in its place
    """

    position: int
    original_char: str
    replacement: str


@dataclass
class EscapeResult:
    """Escaped text together with the substitutions that produced it."""

    text: str
    source_length: int = 0
    changes: List[EscapeChange] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate result consistency."""
        if self.source_length < 0:
            raise ValueError("source_length must be >= 0")
        if len(self.changes) > self.source_length:
            raise ValueError("More changes recorded than input characters")

    @property
    def escaped_chars(self) -> int:
        """Number of characters that were substituted."""
        return len(self.changes)

    @property
    def replaced_nuls(self) -> int:
        """Number of NUL characters that were replaced."""
        return sum(1 for change in self.changes if change.original_char == "\x00")

    @property
    def escape_rate(self) -> float:
        """Proportion of input characters that were substituted."""
        if self.source_length == 0:
            return 0.0
        return self.escaped_chars / self.source_length

    @property
    def statistics(self) -> Dict[str, int]:
        """Summary counts in the shape the command line tool reports."""
        return {
            "total_chars": self.source_length,
            "escaped_chars": self.escaped_chars,
            "replaced_nuls": self.replaced_nuls,
        }
