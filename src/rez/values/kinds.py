"""Value kinds and the render capability.

Every value handed to rez falls into one of five kinds. Only values of the
OTHER kind are checked for a render hook; strings, numbers, booleans and None
always render the same way.
"""

import numbers
from enum import Enum
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from rez.shared.config import StringifyConfig

# Bytes-like values are text in the host's byte-string sense.
BYTES_TYPES = (bytes, bytearray, memoryview)


class ValueKind(Enum):
    """Tag of a dynamically-typed value."""

    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OTHER = "other"


@runtime_checkable
class Renderable(Protocol):
    """Capability of a value that supplies its own textual representation.

    ``__render__`` is called once and may return any value; the result is
    re-classified but never rendered a second time.
    """

    def __render__(self) -> Any:
        ...


def classify(value: Any) -> ValueKind:
    """Return the kind tag of ``value``.

    ``bool`` is checked before numbers because it is a subclass of ``int``.
    """
    if value is None:
        return ValueKind.NIL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, (str, *BYTES_TYPES)):
        return ValueKind.STRING
    return ValueKind.OTHER


def find_render_hook(
    value: Any, config: Optional[StringifyConfig] = None
) -> Optional[Callable[[], Any]]:
    """Return the bound render hook of an OTHER value, or None.

    Only the value's type is consulted; instance attributes are ignored. When
    ``config.honor_str`` is set, a type that overrides ``object.__str__``
    counts as renderable too.
    """
    config = config or StringifyConfig()
    value_type = type(value)

    if callable(getattr(value_type, config.render_hook, None)):
        return getattr(value, config.render_hook)

    if config.honor_str and value_type.__str__ is not object.__str__:
        return value.__str__

    return None
