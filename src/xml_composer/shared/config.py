"""Configuration classes for XML document composition.

This module provides configuration objects for rendering and object mapping,
enabling fine-tuned control over output format and mapping behavior.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from xml_composer.shared.errors import ComposerError

_COMPONENT_FIELDS = ("render", "mapping")


@dataclass
class RenderConfig:
    """Configuration for textual rendering of documents."""

    indent: str = "\t"
    include_declaration: bool = True
    xml_version: str = "1.0"
    encoding: str = "UTF-8"
    escape_special_characters: bool = False

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if self.indent.strip():
            raise ValueError("indent must contain only whitespace")
        if not self.xml_version:
            raise ValueError("xml_version cannot be empty")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")


@dataclass
class MappingConfig:
    """Configuration for object-to-entity mapping."""

    skip_empty_collections: bool = False
    max_depth: int = 64

    def __post_init__(self) -> None:
        """Validate mapping configuration."""
        if self.max_depth <= 0:
            raise ValueError("max_depth must be > 0")


class ConfigError(ComposerError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ComposerConfig:
    """Complete configuration for document composition.

    Immutable at the top level; component configurations are replaced rather
    than edited through ``override``.
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    mapping: MappingConfig = field(default_factory=MappingConfig)

    # Metadata
    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.render.__post_init__()
            self.mapping.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "ComposerConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New ComposerConfig instance with overrides applied

        Example:
            >>> config = ComposerConfig()
            >>> new_config = config.override(
            ...     render__indent="  ",
            ...     mapping__max_depth=8
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENT_FIELDS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=list(_COMPONENT_FIELDS),
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for field_name in _COMPONENT_FIELDS:
            current_config = getattr(self, field_name)
            if field_name in nested_overrides:
                try:
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=field_name) from e
            else:
                new_fields[field_name] = current_config

        for key, value in nested_overrides.items():
            if key not in _COMPONENT_FIELDS:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, Enum):
                return obj.name
            if isinstance(obj, (list, tuple, set)):
                return [_dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _dataclass_to_dict(value) for key, value in obj.items()}
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComposerConfig":
        """Create configuration from dictionary.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        def _dict_to_dataclass(data_dict: Dict[str, Any], target_class: type) -> Any:
            field_values: Dict[str, Any] = {}
            for field_name, field_info in target_class.__dataclass_fields__.items():
                if field_name not in data_dict:
                    continue
                value = data_dict[field_name]
                field_type = field_info.type
                if hasattr(field_type, "__dataclass_fields__") and isinstance(value, dict):
                    field_values[field_name] = _dict_to_dataclass(value, field_type)
                else:
                    field_values[field_name] = value
            return target_class(**field_values)

        try:
            return _dict_to_dataclass(data, cls)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Failed to deserialize to {cls.__name__}: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "ComposerConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def compatible(cls) -> "ComposerConfig":
        """Default preset: tab indentation, declaration, no escaping."""
        return cls(name="compatible")

    @classmethod
    def strict_xml(cls) -> "ComposerConfig":
        """Preset that escapes markup characters in content and attribute values."""
        return cls(
            render=RenderConfig(escape_special_characters=True),
            name="strict_xml",
            description="Escapes text and attribute values for well-formed output",
        )

    @classmethod
    def compact(cls) -> "ComposerConfig":
        """Preset without indentation or XML declaration."""
        return cls(
            render=RenderConfig(indent="", include_declaration=False),
            name="compact",
            description="Unindented output without XML declaration",
        )
