"""Value layer for rez.

This module classifies dynamically-typed values and converts them to text.
"""

from .kinds import Renderable, ValueKind, classify, find_render_hook
from .stringify import ValueStringifier, stringify

__all__ = [
    "Renderable",
    "ValueKind",
    "ValueStringifier",
    "classify",
    "find_render_hook",
    "stringify",
]
