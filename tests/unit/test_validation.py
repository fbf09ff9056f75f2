"""
Unit tests for configuration validation module.

Tests the Pydantic schema, ConfigValidator and the Config loader.
"""

import os
import pytest
import yaml
from pathlib import Path

from clipdeps.core.config import Config
from clipdeps.core.exceptions import ConfigurationError
from clipdeps.core.sink import ClipboardSink, FileSink, SinkKind
from clipdeps.core.validation import ClipdepsConfig, ConfigValidator


class TestClipdepsConfig:
    """Test root configuration validation."""

    def test_defaults(self):
        """Test defaults match the command-line defaults."""
        config = ClipdepsConfig()
        assert config.token_limit == 16000
        assert config.extensions == [".ts", ".tsx", ".js", ".jsx"]
        assert config.sink is SinkKind.CLIPBOARD
        assert config.output is None

    def test_negative_token_limit(self):
        """Test that the token limit cannot be negative."""
        with pytest.raises(ValueError):
            ClipdepsConfig(token_limit=-1)

    def test_extension_without_dot(self):
        """Test that extensions must start with a dot."""
        with pytest.raises(ValueError, match="must start with"):
            ClipdepsConfig(extensions=["ts"])

    def test_duplicate_extensions(self):
        """Test that duplicate extensions are rejected."""
        with pytest.raises(ValueError, match="must be unique"):
            ClipdepsConfig(extensions=[".ts", ".ts"])

    def test_empty_extensions(self):
        with pytest.raises(ValueError, match="At least one"):
            ClipdepsConfig(extensions=[])

    def test_file_sink_requires_output(self):
        """Test that sink 'file' needs an output path."""
        with pytest.raises(ValueError, match="requires 'output'"):
            ClipdepsConfig(sink="file")
        config = ClipdepsConfig(sink="file", output="out.md")
        assert config.sink is SinkKind.FILE

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValueError):
            ClipdepsConfig(token_budget=10)


class TestConfigValidator:
    """Test ConfigValidator functionality."""

    @pytest.fixture
    def temp_project(self, tmp_path):
        """Create a temporary project directory."""
        (tmp_path / "src").mkdir()
        return tmp_path

    def write_config(self, project_root: Path, data) -> Path:
        config_path = project_root / "clipdeps.yaml"
        with open(config_path, "w") as f:
            yaml.dump(data, f)
        return config_path

    def test_validate_valid_config_file(self, temp_project):
        config_path = self.write_config(temp_project, {
            "token_limit": 2000,
            "extensions": [".ts", ".tsx"],
            "display_root": "src",
        })
        validator = ConfigValidator(str(temp_project))
        config = validator.validate_config_file(str(config_path))
        assert config.token_limit == 2000
        assert config.extensions == [".ts", ".tsx"]
        assert validator.validate_display_root(config) == []

    def test_validate_missing_config_file(self, temp_project):
        validator = ConfigValidator(str(temp_project))
        with pytest.raises(ConfigurationError, match="not found"):
            validator.validate_config_file(str(temp_project / "nonexistent.yaml"))

    def test_validate_invalid_yaml(self, temp_project):
        config_path = temp_project / "clipdeps.yaml"
        config_path.write_text("invalid: yaml: syntax: ][")
        validator = ConfigValidator(str(temp_project))
        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            validator.validate_config_file(str(config_path))

    def test_all_errors_collected(self, temp_project):
        """Test that every schema error is reported at once."""
        config_path = self.write_config(temp_project, {
            "token_limit": -5,
            "extensions": ["ts"],
        })
        validator = ConfigValidator(str(temp_project))
        with pytest.raises(ConfigurationError) as exc_info:
            validator.validate_config_file(str(config_path))
        errors = exc_info.value.context["errors"]
        assert len(errors) == 2
        assert any(e.startswith("token_limit") for e in errors)
        assert any(e.startswith("extensions") for e in errors)

    def test_non_mapping_root(self, temp_project):
        config_path = temp_project / "clipdeps.yaml"
        config_path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigValidator(str(temp_project)).validate_config_file(str(config_path))

    def test_missing_display_root_warns(self, temp_project):
        validator = ConfigValidator(str(temp_project))
        warnings = validator.validate_display_root(ClipdepsConfig(display_root="nope"))
        assert len(warnings) == 1
        assert "nope" in warnings[0]


class TestConfig:
    """Test loading and command-line overrides."""

    def test_load_without_file_uses_defaults(self, tmp_path):
        cfg = Config.load(str(tmp_path))
        assert cfg.token_limit == 16000
        assert cfg.sink is SinkKind.CLIPBOARD
        assert cfg.display_root == str(tmp_path)
        assert isinstance(cfg.build_sink(), ClipboardSink)

    def test_load_default_file(self, tmp_path):
        (tmp_path / "clipdeps.yaml").write_text("token_limit: 500\nsink: stdout\n")
        cfg = Config.load(str(tmp_path))
        assert cfg.token_limit == 500
        assert cfg.sink is SinkKind.STDOUT

    def test_explicit_missing_file_is_error(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(str(tmp_path), str(tmp_path / "other.yaml"))

    def test_display_root_relative_to_project(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "clipdeps.yaml").write_text("display_root: src\n")
        cfg = Config.load(str(tmp_path))
        assert cfg.display_root == os.path.join(str(tmp_path), "src")
        assert cfg.warnings == []

    def test_overrides(self, tmp_path):
        (tmp_path / "clipdeps.yaml").write_text("token_limit: 500\n")
        cfg = Config.load(str(tmp_path)).override(token_limit=42, output=str(tmp_path / "out.md"))
        assert cfg.token_limit == 42
        assert cfg.sink is SinkKind.FILE
        assert isinstance(cfg.build_sink(), FileSink)

    def test_file_sink_override_without_output(self, tmp_path):
        with pytest.raises(ConfigurationError, match="--output"):
            Config.load(str(tmp_path)).override(sink="file")

    def test_negative_override(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(str(tmp_path)).override(token_limit=-1)
