"""Value-to-string coercion with a never-fail guarantee.

``stringify`` maps every value to some text: strings pass through, None,
booleans and numbers get a canonical form, values exposing a render hook
supply their own text and anything else gets a diagnostic
``"<typename>: 0x<identity>"`` label.
"""

import numbers
from typing import Any, Optional

from rez.shared.config import StringifyConfig
from rez.shared.logging import get_logger

from .kinds import BYTES_TYPES, ValueKind, classify, find_render_hook


class ValueStringifier:
    """Converts dynamically-typed values to their canonical text.

    Instances hold only immutable configuration and may be shared freely.

    Examples:
        >>> stringifier = ValueStringifier()
        >>> stringifier.stringify(None)
        'nil'
        >>> stringifier.stringify(0.1 + 0.2)
        '0.3'
    """

    def __init__(
        self,
        config: Optional[StringifyConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize stringifier.

        Args:
            config: Stringify configuration (uses default if None)
            correlation_id: Optional correlation ID for log records
        """
        self.config = config or StringifyConfig()
        self.logger = get_logger(__name__, correlation_id, "stringify")

    def stringify(self, value: Any) -> str:
        """Return the textual form of ``value``.

        A render hook is invoked at most once. Exceptions raised by the hook
        propagate to the caller.
        """
        kind = classify(value)

        if kind is ValueKind.OTHER:
            hook = find_render_hook(value, self.config)
            if hook is not None:
                self.logger.debug(
                    "Invoking render hook",
                    extra={"value_type": type(value).__name__}
                )
                value = hook()
                kind = classify(value)

        if kind is ValueKind.STRING:
            return self._text(value)
        if kind is ValueKind.NIL:
            return self.config.nil_text
        if kind is ValueKind.BOOLEAN:
            return self.config.true_text if value else self.config.false_text
        if kind is ValueKind.NUMBER:
            return self.format_number(value)

        self.logger.debug(
            "Rendering opaque value with diagnostic form",
            extra={"value_type": type(value).__name__}
        )
        return self.describe(value)

    def format_number(self, value: numbers.Number) -> str:
        """Format a number in canonical decimal form.

        Integers print exactly. Floats use ``float_precision`` significant
        digits, and keep a trailing ``.0`` when the result would otherwise
        read as an integer.
        """
        if isinstance(value, numbers.Integral):
            return "%d" % int(value)
        if isinstance(value, float):
            text = "%.*g" % (self.config.float_precision, value)
            if text.lstrip("-").isdigit():
                text += ".0"
            return text
        return str(value)

    @staticmethod
    def describe(value: Any) -> str:
        """Diagnostic label for a value with no textual representation.

        The identity part is only stable while the object is alive and must
        not be parsed or compared.
        """
        return f"{type(value).__name__}: 0x{id(value):x}"

    @staticmethod
    def _text(value: Any) -> str:
        if isinstance(value, BYTES_TYPES):
            return bytes(value).decode("utf-8", errors="replace")
        return value


_default_stringifier = ValueStringifier()


def stringify(value: Any) -> str:
    """Return the textual form of ``value`` using the default configuration."""
    return _default_stringifier.stringify(value)
