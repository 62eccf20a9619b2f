"""Result sanitizing and output formats for gl-api."""

from __future__ import annotations

import json
import pprint
from abc import ABC, abstractmethod
from typing import Any

import yaml

from gl_api.errors import ConfigurationError, SerializationError

PRIMITIVE_TYPES = (str, int, float, bool, type(None))

# Subclasses of these are narrowed to the base type; encoders match on exact type
SCALAR_BASES = (int, float, str)


def _narrow(value: Any) -> Any:
    for base in SCALAR_BASES:
        if type(value) is not base and isinstance(value, base) and not isinstance(value, bool):
            return base(value)
    return value


def sanitize(value: Any) -> Any:
    """
    Return a copy of a result tree that holds only primitives, lists and dicts.

    Lists and tuples become lists, dicts keep their keys, primitives pass
    through, subclasses of str/int/float are narrowed to the base type, and
    any other object is replaced by its string form.
    """
    if isinstance(value, dict):
        return {_narrow(key): sanitize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    if type(value) in PRIMITIVE_TYPES:
        return value
    if isinstance(value, SCALAR_BASES):
        return _narrow(value)
    return str(value)


# ---------------------------------------------------------------------------
# Format Registry
# ---------------------------------------------------------------------------

_format_registry: dict[str, type[OutputFormat]] = {}


def register_format(name: str):
    """Decorator to register an output format class under its --format name."""

    def decorator(cls):
        _format_registry[name] = cls
        cls.format_name = name
        return cls

    return decorator


def get_format_registry() -> dict[str, type[OutputFormat]]:
    """Get the format registry."""
    return _format_registry


def get_format(name: str) -> OutputFormat:
    """Instantiate the format registered as ``name``."""
    try:
        return _format_registry[name]()
    except KeyError:
        known = ", ".join(sorted(_format_registry))
        raise ConfigurationError(f"Unknown format '{name}' (available: {known})") from None


# ---------------------------------------------------------------------------
# Output Formats
# ---------------------------------------------------------------------------


class OutputFormat(ABC):
    """Base class for all output formats."""

    format_name: str = ""

    # Formats that cannot represent arbitrary objects get a sanitized tree
    sanitizes: bool = True

    def render(self, value: Any) -> str:
        if self.sanitizes:
            value = sanitize(value)
        try:
            return self.dump(value)
        except (TypeError, ValueError, yaml.YAMLError) as e:
            raise SerializationError(f"Cannot render result as {self.format_name}: {e}") from e

    @abstractmethod
    def dump(self, value: Any) -> str:
        """Encode an already prepared tree."""
        ...


@register_format("yaml")
class YamlFormat(OutputFormat):
    def dump(self, value: Any) -> str:
        return yaml.safe_dump(value, explicit_start=True, default_flow_style=False, allow_unicode=True)


@register_format("json")
class JsonFormat(OutputFormat):
    sanitizes = False

    def dump(self, value: Any) -> str:
        return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


@register_format("python")
class PythonFormat(OutputFormat):
    def dump(self, value: Any) -> str:
        return pprint.pformat(value) + "\n"
