"""Configuration loading and validation for property introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml


class ConfigError(Exception):
    """Error in introspection configuration."""

    def __init__(
        self,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        error_type: str = "config_invalid",
    ):
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line
        self.error_type = error_type

    def to_json(self) -> dict[str, Any]:
        """Serialize error to JSON format for machine parsing."""
        result: dict[str, Any] = {
            "error": self.error_type,
            "message": self.message,
        }
        if self.file:
            result["file"] = self.file
        if self.line:
            result["line"] = self.line
        return result

    def __str__(self) -> str:
        parts = [self.message]
        if self.file:
            parts.append(f"file: {self.file}")
        if self.line:
            parts.append(f"line: {self.line}")
        return " | ".join(parts)


# "class" is reserved whatever the configuration says
ALWAYS_RESERVED_NAMES = frozenset({"class"})

# Property names that never produce a descriptor
DEFAULT_RESERVED_NAMES = frozenset({"class", "metaClass"})

DEFAULT_CONFIG_PATH = "beanprops.yaml"


@dataclass(frozen=True)
class IntrospectionConfig:
    """Complete introspection configuration."""

    version: str = "1.0"
    reserved_names: frozenset[str] = field(default=DEFAULT_RESERVED_NAMES)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "reserved_names", frozenset(self.reserved_names) | ALWAYS_RESERVED_NAMES
        )


_DEFAULT_CONFIG = IntrospectionConfig()


def get_default_config() -> IntrospectionConfig:
    """Return the default introspection configuration."""
    return _DEFAULT_CONFIG


def _parse_names(value: Any, key: str, config_file: Optional[str] = None) -> frozenset[str]:
    """Parse a list of property names."""
    if not isinstance(value, list):
        raise ConfigError(
            f"'{key}' must be a list of property names",
            file=config_file,
            error_type="config_invalid",
        )
    for name in value:
        if not isinstance(name, str) or not name:
            raise ConfigError(
                f"Invalid property name in '{key}': {name!r}",
                file=config_file,
                error_type="config_invalid",
            )
    return frozenset(value)


def _error_line(error: yaml.YAMLError) -> Optional[int]:
    """Get the 1-based line of a YAML error, if it has one."""
    mark = getattr(error, "problem_mark", None)
    if mark is None:
        return None
    return mark.line + 1


def load_config(config_path: Path | str) -> IntrospectionConfig:
    """Load configuration from a YAML file.

    ``reserved_names`` replaces the default reserved names;
    ``extra_reserved_names`` adds to whichever set is in effect. "class" stays
    reserved either way.

    Args:
        config_path: Path to the beanprops.yaml file.

    Returns:
        IntrospectionConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If the file exists but cannot be read or contains
            invalid configuration.
    """
    config_path = Path(config_path)
    config_file = str(config_path)

    defaults = get_default_config()

    if not config_path.exists():
        return defaults

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read config file: {e}",
            file=config_file,
            error_type="config_unreadable",
        )

    try:
        if not content.strip():
            return defaults

        data = yaml.safe_load(content)
        if not data:
            return defaults
        if not isinstance(data, dict):
            raise ConfigError(
                "Top-level beanprops config must be a mapping",
                file=config_file,
                error_type="config_invalid",
            )

    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML: {e}",
            file=config_file,
            line=_error_line(e),
            error_type="config_invalid",
        )

    reserved_names = defaults.reserved_names
    if "reserved_names" in data:
        reserved_names = _parse_names(data["reserved_names"], "reserved_names", config_file)
    if "extra_reserved_names" in data:
        reserved_names = reserved_names | _parse_names(
            data["extra_reserved_names"], "extra_reserved_names", config_file
        )

    return IntrospectionConfig(
        version=str(data.get("version", defaults.version)),
        reserved_names=reserved_names,
    )
