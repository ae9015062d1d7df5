"""Configuration classes for rez.

This module provides immutable configuration objects for the stringifier, the
sequence concatenator and the HTML escaper, plus the aggregate ``RezConfig``
that the registration factory and the command line tool consume.
"""

import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import RezError

FLOAT_PRECISION_MIN = 1
FLOAT_PRECISION_MAX = 17
VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _require_type(name: str, value: Any, expected: type) -> None:
    """Raise ValueError unless value is an instance of expected.

    ``bool`` is not accepted where an ``int`` is expected.
    """
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(
            f"{name} must be of type {expected.__name__}, got {type(value).__name__}"
        )


class LengthPolicy(Enum):
    """How concat decides where a sequence ends."""

    REPORTED = "reported"        # Trust the collection's reported length
    STOP_AT_NIL = "stop_at_nil"  # Additionally stop at the first None element


@dataclass(frozen=True)
class StringifyConfig:
    """Configuration for value-to-string coercion."""

    nil_text: str = "nil"
    true_text: str = "true"
    false_text: str = "false"
    float_precision: int = 14
    honor_str: bool = True
    render_hook: str = "__render__"

    def __post_init__(self) -> None:
        """Validate stringify configuration."""
        for name in ("nil_text", "true_text", "false_text", "render_hook"):
            _require_type(name, getattr(self, name), str)
        _require_type("honor_str", self.honor_str, bool)
        _require_type("float_precision", self.float_precision, int)
        if not (FLOAT_PRECISION_MIN <= self.float_precision <= FLOAT_PRECISION_MAX):
            raise ValueError(
                f"float_precision must be between {FLOAT_PRECISION_MIN} "
                f"and {FLOAT_PRECISION_MAX}"
            )
        if not self.render_hook.isidentifier():
            raise ValueError("render_hook must be a valid attribute name")


@dataclass(frozen=True)
class ConcatConfig:
    """Configuration for sequence concatenation."""

    length_policy: LengthPolicy = LengthPolicy.REPORTED

    def __post_init__(self) -> None:
        """Accept the policy by value so JSON configuration can name it."""
        if not isinstance(self.length_policy, LengthPolicy):
            try:
                policy = LengthPolicy(self.length_policy)
            except (TypeError, ValueError) as e:
                valid = [p.value for p in LengthPolicy]
                raise ValueError(f"length_policy must be one of {valid}") from e
            object.__setattr__(self, "length_policy", policy)


@dataclass(frozen=True)
class EscapeConfig:
    """Configuration for HTML escaping."""

    nul_replacement: str = "\uFFFD"  # Unicode replacement character
    none_is_absent: bool = True

    def __post_init__(self) -> None:
        """Validate escape configuration."""
        _require_type("nul_replacement", self.nul_replacement, str)
        _require_type("none_is_absent", self.none_is_absent, bool)
        if any(char in self.nul_replacement for char in "\x00&<>\"'"):
            raise ValueError("nul_replacement must not contain reserved characters")


class ConfigError(RezError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_COMPONENTS = {
    "stringify": StringifyConfig,
    "concat": ConcatConfig,
    "escape": EscapeConfig,
}


@dataclass(frozen=True)
class RezConfig:
    """Aggregate configuration for every rez component.

    Frozen, so a single instance can be shared between threads and between the
    entry points produced by ``load_modules``.
    """

    stringify: StringifyConfig = field(default_factory=StringifyConfig)
    concat: ConcatConfig = field(default_factory=ConcatConfig)
    escape: EscapeConfig = field(default_factory=EscapeConfig)

    correlation_id: Optional[str] = None
    logging_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate cross-component settings."""
        if self.correlation_id is not None and not isinstance(self.correlation_id, str):
            raise ConfigValidationError(
                "correlation_id must be a string or None", field_name="correlation_id"
            )
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {VALID_LOGGING_LEVELS}",
                field_name="logging_level",
                suggestions=VALID_LOGGING_LEVELS,
            )

    @classmethod
    def default(cls) -> "RezConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "RezConfig":
        """Create a configuration that only honors explicit render hooks.

        ``__str__`` overrides are ignored and concat stops at the first None.
        """
        return cls(
            stringify=StringifyConfig(honor_str=False),
            concat=ConcatConfig(length_policy=LengthPolicy.STOP_AT_NIL),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RezConfig":
        """Build a configuration from plain data, e.g. a parsed JSON document.

        Raises:
            ConfigValidationError: Unknown keys or invalid values
        """
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _COMPONENTS:
                if not isinstance(value, dict):
                    raise ConfigValidationError(
                        f"Section '{key}' must be an object", field_name=key
                    )
                kwargs[key] = _build_component(key, value)
            elif key in ("correlation_id", "logging_level"):
                kwargs[key] = value
            else:
                raise ConfigValidationError(
                    f"Unknown configuration key: {key}",
                    field_name=key,
                    suggestions=sorted([*_COMPONENTS, "correlation_id", "logging_level"]),
                )
        return cls(**kwargs)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "RezConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigError: File cannot be read or is not valid JSON
            ConfigValidationError: File content is invalid
        """
        path = Path(config_path)
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be a JSON object")
        return cls.from_dict(data)

    def override(self, **kwargs: Any) -> "RezConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Field overrides; nested fields use ``component__field``

        Returns:
            New RezConfig instance with overrides applied

        Example:
            >>> config = RezConfig()
            >>> config.override(stringify__nil_text="null").stringify.nil_text
            'null'
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = dict(top_level)
        try:
            for component, overrides in nested_overrides.items():
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=component,
                    )
                new_fields[component] = replace(getattr(self, component), **overrides)
            return replace(self, **new_fields)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e


def _build_component(name: str, values: Dict[str, Any]) -> Any:
    """Instantiate one component config, reporting bad keys and values."""
    config_cls = _COMPONENTS[name]
    known = {f.name for f in fields(config_cls)}
    unknown = set(values) - known
    if unknown:
        raise ConfigValidationError(
            f"Unknown {name} settings: {sorted(unknown)}",
            field_name=name,
            suggestions=sorted(known),
        )
    try:
        return config_cls(**values)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(str(e), field_name=name) from e
