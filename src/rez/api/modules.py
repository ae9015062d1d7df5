"""Registration surface for host loaders.

``load_modules`` is a pure factory: it builds the entry points for one
configuration and returns them as a mapping. Installing them into a namespace
is left to the host.
"""

from typing import Any, Dict, Optional

from rez.shared.config import RezConfig
from rez.shared.logging import get_logger
from rez.text.concat import SequenceConcatenator
from rez.text.escape import HtmlEscaper
from rez.values.stringify import ValueStringifier

MODULE_NAMES = ("concat", "escape")


def load_modules(config: Optional[RezConfig] = None) -> Dict[str, Any]:
    """Build the entry points exposed to a host.

    Args:
        config: Configuration shared by every entry point (default if None)

    Returns:
        ``{"concat": callable, "escape": {"html": callable}}``, a new mapping
        on every call

    Examples:
        >>> modules = load_modules()
        >>> modules["concat"](["a", 1])
        'a1'
        >>> modules["escape"]["html"]("<b>")
        '&lt;b&gt;'
    """
    config = config or RezConfig.default()
    logger = get_logger(__name__, config.correlation_id, "modules")

    stringifier = ValueStringifier(config.stringify, config.correlation_id)
    concatenator = SequenceConcatenator(config.concat, stringifier, config.correlation_id)
    escaper = HtmlEscaper(config.escape, stringifier, config.correlation_id)

    logger.debug(
        "Built module table",
        extra={
            "modules": list(MODULE_NAMES),
            "length_policy": config.concat.length_policy.value,
        }
    )
    return {
        "concat": concatenator.concat,
        "escape": {"html": escaper.escape},
    }
