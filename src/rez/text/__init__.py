"""Text assembly layer for rez.

This module provides the sequence concatenator and the HTML escaper, both
built on the value stringifier.
"""

from .concat import SequenceConcatenator, concat, mapping_border
from .escape import HTML_ENTITIES, HtmlEscaper, escape_html, escape_html_bytes

__all__ = [
    "HTML_ENTITIES",
    "HtmlEscaper",
    "SequenceConcatenator",
    "concat",
    "escape_html",
    "escape_html_bytes",
    "mapping_border",
]
