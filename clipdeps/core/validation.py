"""
Pydantic models for configuration validation.

Provides schema validation and type checking for clipdeps.yaml.
"""

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models import DEFAULT_TOKEN_LIMIT, EXTENSIONS
from .sink import SinkKind


class ClipdepsConfig(BaseModel):
    """Root configuration for a clipdeps run."""
    model_config = ConfigDict(extra='forbid')

    token_limit: int = Field(DEFAULT_TOKEN_LIMIT, ge=0, description="Soft ceiling on estimated tokens")
    extensions: List[str] = Field(default_factory=lambda: list(EXTENSIONS),
                                  description="Supported extensions, in resolution order")
    sink: SinkKind = Field(SinkKind.CLIPBOARD, description="Where the document is published")
    output: Optional[str] = Field(None, description="Output path for the file sink")
    display_root: Optional[str] = Field(None, description="Directory display paths are relative to")

    @field_validator('extensions')
    @classmethod
    def validate_extensions(cls, v):
        """Extensions must look like '.ts' and appear once."""
        if not v:
            raise ValueError("At least one extension is required")
        for ext in v:
            if not ext.startswith('.') or len(ext) < 2:
                raise ValueError(f"Extension must start with '.', got '{ext}'")
        if len(v) != len(set(v)):
            duplicates = sorted({ext for ext in v if v.count(ext) > 1})
            raise ValueError(f"Extensions must be unique. Duplicates: {duplicates}")
        return v

    @model_validator(mode='after')
    def validate_output_for_file_sink(self):
        """The file sink needs somewhere to write."""
        if self.sink is SinkKind.FILE and not self.output:
            raise ValueError("sink 'file' requires 'output'")
        return self


class ConfigValidator:
    """Loads and validates clipdeps.yaml relative to a project root."""

    def __init__(self, project_root: str):
        self.project_root = os.path.abspath(project_root)

    def validate_config_file(self, config_path: str) -> ClipdepsConfig:
        """
        Validate config file and return parsed configuration.

        Raises:
            ConfigurationError: If config is missing, unparsable or invalid
                (all validation errors are in context['errors'])
        """
        if not os.path.isfile(config_path):
            raise ConfigurationError(f"Config file not found: {config_path}",
                                     context={"path": config_path})

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            return ClipdepsConfig(**data)
        except PydanticValidationError as e:
            errors = []
            for error in e.errors():
                loc = " -> ".join(str(l) for l in error['loc']) or "config"
                errors.append(f"{loc}: {error['msg']}")
            raise ConfigurationError(
                "Configuration validation failed",
                context={"errors": errors}
            )

    def validate_display_root(self, config: ClipdepsConfig) -> List[str]:
        """Non-fatal checks; returns warning messages."""
        warnings = []
        if config.display_root:
            abs_root = os.path.join(self.project_root, config.display_root)
            if not os.path.isdir(abs_root):
                warnings.append(f"display_root is not a directory: {config.display_root} (absolute: {abs_root})")
        return warnings
