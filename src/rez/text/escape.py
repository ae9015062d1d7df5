"""HTML escaping for arbitrary values.

The value is stringified first, then scanned once from left to right. The five
HTML-reserved characters become entities and NUL becomes U+FFFD; every other
character is copied unchanged. Because all escaped characters are ASCII, the
scan over code points gives the same result as a byte scan of the UTF-8
encoding, which ``escape_html_bytes`` performs literally.
"""

from typing import Any, Dict, Optional

from rez.shared.config import EscapeConfig
from rez.shared.logging import get_logger
from rez.shared.result import EscapeChange, EscapeResult
from rez.values.stringify import ValueStringifier

HTML_ENTITIES: Dict[str, str] = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

REPLACEMENT_CHARACTER = "\uFFFD"

_BYTE_ESCAPES: Dict[int, bytes] = {
    0: REPLACEMENT_CHARACTER.encode("utf-8"),
    **{ord(char): entity.encode("ascii") for char, entity in HTML_ENTITIES.items()},
}

# Marks a call made without an argument.
_ABSENT: Any = object()


class HtmlEscaper:
    """Transforms values into HTML-safe text.

    Escaping is not idempotent: ``&amp;`` escapes again to ``&amp;amp;``.
    """

    def __init__(
        self,
        config: Optional[EscapeConfig] = None,
        stringifier: Optional[ValueStringifier] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize escaper.

        Args:
            config: Escape configuration (uses default if None)
            stringifier: Stringifier applied to the input value
            correlation_id: Optional correlation ID for log records
        """
        self.config = config or EscapeConfig()
        self.stringifier = stringifier or ValueStringifier(correlation_id=correlation_id)
        self.logger = get_logger(__name__, correlation_id, "escape")

        self._replacements: Dict[str, str] = {
            "\x00": self.config.nul_replacement,
            **HTML_ENTITIES,
        }
        self._table = str.maketrans(self._replacements)

    def is_absent(self, value: Any) -> bool:
        """Return True when ``value`` stands for missing input."""
        return value is _ABSENT or (value is None and self.config.none_is_absent)

    def escape(self, value: Any = _ABSENT) -> Optional[str]:
        """Return the HTML-escaped text of ``value``, or None when it is absent."""
        if self.is_absent(value):
            return None
        return self.stringifier.stringify(value).translate(self._table)

    def escape_detailed(self, value: Any = _ABSENT) -> Optional[EscapeResult]:
        """Escape ``value`` and record every substitution made.

        Returns:
            EscapeResult with the escaped text and its changes, or None when
            ``value`` is absent
        """
        if self.is_absent(value):
            return None

        text = self.stringifier.stringify(value)
        changes = []
        escaped_chars = []

        for i, char in enumerate(text):
            replacement = self._replacements.get(char)
            if replacement is None:
                escaped_chars.append(char)
            else:
                escaped_chars.append(replacement)
                changes.append(EscapeChange(
                    position=i,
                    original_char=char,
                    replacement=replacement,
                ))

        result = EscapeResult(
            text="".join(escaped_chars),
            source_length=len(text),
            changes=changes,
        )
        self.logger.debug("Escaped value", extra=result.statistics)
        return result


def escape_html_bytes(data: bytes) -> bytes:
    """Escape a raw byte string one byte at a time.

    NUL becomes the 3-byte UTF-8 encoding of U+FFFD. All other bytes,
    including invalid UTF-8, are copied unchanged.

    Examples:
        >>> escape_html_bytes(b"a\\x00<")
        b'a\\xef\\xbf\\xbd&lt;'
    """
    out = bytearray()
    for byte in bytes(data):
        replacement = _BYTE_ESCAPES.get(byte)
        if replacement is None:
            out.append(byte)
        else:
            out += replacement
    return bytes(out)


_default_escaper = HtmlEscaper()


def escape_html(value: Any = _ABSENT) -> Optional[str]:
    """Return the HTML-escaped text of ``value`` using the default configuration.

    Called without an argument, or with None, returns None rather than a
    string.

    Examples:
        >>> escape_html("<a href='x'>")
        '&lt;a href=&#39;x&#39;&gt;'
        >>> escape_html() is None
        True
    """
    return _default_escaper.escape(value)
