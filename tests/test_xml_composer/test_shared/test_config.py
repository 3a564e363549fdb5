"""Tests for configuration classes and presets."""

import pytest

from xml_composer.shared import (
    ComposerConfig,
    ConfigError,
    ConfigValidationError,
    MappingConfig,
    RenderConfig,
)


class TestComponentConfigs:
    """Test component configuration validation."""

    def test_render_defaults(self) -> None:
        """Test default render settings."""
        config = RenderConfig()

        assert config.indent == "\t"
        assert config.include_declaration
        assert config.xml_version == "1.0"
        assert config.encoding == "UTF-8"
        assert not config.escape_special_characters

    def test_render_validation(self) -> None:
        """Test invalid render settings are rejected."""
        with pytest.raises(ValueError, match="indent must contain only whitespace"):
            RenderConfig(indent="--")
        with pytest.raises(ValueError, match="xml_version cannot be empty"):
            RenderConfig(xml_version="")
        with pytest.raises(ValueError, match="encoding cannot be empty"):
            RenderConfig(encoding="")

    def test_mapping_validation(self) -> None:
        """Test max_depth must be positive."""
        assert MappingConfig().max_depth == 64

        with pytest.raises(ValueError, match="max_depth must be > 0"):
            MappingConfig(max_depth=0)


class TestComposerConfig:
    """Test the complete configuration."""

    def test_override_nested_fields(self) -> None:
        """Test override returns a new config with replaced components."""
        config = ComposerConfig()

        new_config = config.override(render__indent="  ", mapping__max_depth=8, name="custom")

        assert new_config.render.indent == "  "
        assert new_config.mapping.max_depth == 8
        assert new_config.name == "custom"
        assert config.render.indent == "\t"

    def test_override_unknown_component(self) -> None:
        """Test unknown components are reported with suggestions."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ComposerConfig().override(output__indent="  ")

        assert exc_info.value.suggestions == ["render", "mapping"]

    def test_override_invalid_value(self) -> None:
        """Test invalid component values raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="max_depth must be > 0"):
            ComposerConfig().override(mapping__max_depth=-1)

    def test_override_unknown_field(self) -> None:
        """Test unknown component fields raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ComposerConfig().override(render__colour="red")

        assert exc_info.value.field_name == "render"

    def test_dict_and_json_round_trip(self) -> None:
        """Test serialization preserves all settings."""
        config = ComposerConfig.strict_xml()

        assert ComposerConfig.from_dict(config.to_dict()) == config
        assert ComposerConfig.from_json(config.to_json()) == config

    def test_from_dict_partial(self) -> None:
        """Test missing keys keep defaults."""
        config = ComposerConfig.from_dict({"render": {"indent": "    "}})

        assert config.render.indent == "    "
        assert config.mapping == MappingConfig()

    def test_from_dict_invalid_value(self) -> None:
        """Test invalid values are wrapped in ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="Failed to deserialize"):
            ComposerConfig.from_dict({"mapping": {"max_depth": 0}})

    def test_from_json_invalid(self) -> None:
        """Test malformed JSON raises ConfigError."""
        with pytest.raises(ConfigError, match="Invalid configuration JSON"):
            ComposerConfig.from_json("{not json")

    def test_presets(self) -> None:
        """Test preset factories."""
        assert ComposerConfig.compatible().name == "compatible"
        assert ComposerConfig.compatible().render == RenderConfig()

        strict = ComposerConfig.strict_xml()
        assert strict.render.escape_special_characters

        compact = ComposerConfig.compact()
        assert compact.render.indent == ""
        assert not compact.render.include_declaration
