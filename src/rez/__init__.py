"""rez: value concatenation and HTML escaping.

Two never-fail text primitives for host programs: ``concat`` joins the textual
forms of a sequence's elements and ``escape_html`` turns any value into
HTML-safe text. Both rely on ``stringify``, which renders every value as some
string.

Progressive API Disclosure:
- Level 1: Simple functions - concat(), escape_html(), stringify()
- Level 2: Configured components - SequenceConcatenator, HtmlEscaper, ValueStringifier
- Level 3: Host registration - load_modules()
"""

__version__ = "0.1.0"
__author__ = "rez contributors"

# Level 1: Simple functions
from .text import concat, escape_html, escape_html_bytes
from .values import Renderable, ValueStringifier, stringify

# Level 2: Configured components
from .text import HtmlEscaper, SequenceConcatenator
from .shared.config import RezConfig

# Level 3: Host registration
from .api import load_modules

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "concat",
    "escape_html",
    "escape_html_bytes",
    "stringify",

    # Level 2: Configured components
    "HtmlEscaper",
    "SequenceConcatenator",
    "ValueStringifier",
    "RezConfig",

    # Level 3: Host registration
    "load_modules",
    "Renderable",
]
