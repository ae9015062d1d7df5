"""Shared utilities for rez.

This module provides configuration objects, the exception hierarchy, result
types and logging helpers used across the value and text layers.
"""

from .config import (
    ConcatConfig,
    ConfigError,
    ConfigValidationError,
    EscapeConfig,
    LengthPolicy,
    RezConfig,
    StringifyConfig,
)
from .errors import RezError, SequenceTypeError
from .logging import CorrelationLogger, configure_logging, get_logger
from .result import EscapeChange, EscapeResult

__all__ = [
    "ConcatConfig",
    "ConfigError",
    "ConfigValidationError",
    "EscapeConfig",
    "LengthPolicy",
    "RezConfig",
    "StringifyConfig",
    "RezError",
    "SequenceTypeError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "EscapeChange",
    "EscapeResult",
]
