"""Sequence concatenation.

``concat`` stringifies every element of an ordered collection and joins the
results with no separator. Callers that want delimiters include them as
elements.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Tuple

from rez.shared.config import ConcatConfig, LengthPolicy
from rez.shared.errors import SequenceTypeError
from rez.shared.logging import get_logger
from rez.values.kinds import BYTES_TYPES
from rez.values.stringify import ValueStringifier


def mapping_border(table: Mapping) -> int:
    """Return the first border of a 1-indexed mapping.

    The border is the largest n such that keys 1..n are all present. Keys
    after the first gap are not counted.
    """
    n = 0
    while (n + 1) in table:
        n += 1
    return n


class SequenceConcatenator:
    """Joins the textual forms of a sequence's elements.

    Accepts any ``Sequence`` that is not itself text, and any ``Mapping`` read
    as a 1-indexed table. The reported length is trusted: elements past it are
    never visited.
    """

    def __init__(
        self,
        config: Optional[ConcatConfig] = None,
        stringifier: Optional[ValueStringifier] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize concatenator.

        Args:
            config: Concat configuration (uses default if None)
            stringifier: Stringifier applied to each element
            correlation_id: Optional correlation ID for log records
        """
        self.config = config or ConcatConfig()
        self.stringifier = stringifier or ValueStringifier(correlation_id=correlation_id)
        self.logger = get_logger(__name__, correlation_id, "concat")

    def concat(self, sequence: Any) -> str:
        """Concatenate the stringified elements of ``sequence``.

        Raises:
            SequenceTypeError: ``sequence`` is not an ordered collection
        """
        length, element_at = self._accessor(sequence)
        stop_at_nil = self.config.length_policy is LengthPolicy.STOP_AT_NIL

        parts = []
        for i in range(length):
            item = element_at(i)
            if stop_at_nil and item is None:
                break
            parts.append(self.stringifier.stringify(item))

        if self.logger.is_debug_enabled():
            self.logger.debug(
                "Concatenated sequence",
                extra={
                    "reported_length": length,
                    "element_count": len(parts),
                    "input_type": type(sequence).__name__,
                }
            )
        return "".join(parts)

    @staticmethod
    def _accessor(sequence: Any) -> Tuple[int, Callable[[int], Any]]:
        """Return the element count and a zero-based element getter."""
        if isinstance(sequence, Mapping):
            def element_at(i: int) -> Any:
                return sequence[i + 1]
            return mapping_border(sequence), element_at

        if isinstance(sequence, Sequence) and not isinstance(sequence, (str, *BYTES_TYPES)):
            return len(sequence), sequence.__getitem__

        raise SequenceTypeError(sequence)


_default_concatenator = SequenceConcatenator()


def concat(sequence: Any) -> str:
    """Concatenate the stringified elements of ``sequence`` with default settings.

    Examples:
        >>> concat(["a", 1, None, True])
        'a1niltrue'
        >>> concat([])
        ''
    """
    return _default_concatenator.concat(sequence)
