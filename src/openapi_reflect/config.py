"""Configuration management for openapi_reflect."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.common import OutputFormat
from .schema_gen.naming import NAMING_STRATEGIES


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('console' or 'json')")
    file: Optional[Path] = Field(default=None, description="Log file path")

class SchemaGenConfig(BaseModel):
    """Configuration for schema generation and rendering."""

    naming_strategy: str = Field(default="camel", description="Property naming strategy: default, camel, snake or kebab.")
    output_format: OutputFormat = Field(default=OutputFormat.JSON, description="Rendered document format.")
    indent: int = Field(default=2, ge=0, le=8, description="Indentation of rendered documents.")

    @field_validator("naming_strategy")
    @classmethod
    def validate_naming_strategy(cls, v: str) -> str:
        if v.lower() not in NAMING_STRATEGIES:
            raise ValueError(f"naming_strategy must be one of {sorted(NAMING_STRATEGIES)}")
        return v.lower()


class Config(BaseSettings):
    """Main configuration. Loads from environment variables prefixed with OPENAPI_REFLECT_."""

    model_config = SettingsConfigDict(
        env_prefix='OPENAPI_REFLECT_',
        env_nested_delimiter='__', # e.g., OPENAPI_REFLECT_SCHEMA_GEN__NAMING_STRATEGY
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    schema_gen: SchemaGenConfig = Field(default_factory=SchemaGenConfig)
    app_name: str = Field(default="openapi-reflect", description="Name reported by the CLI.")
    app_version: str = Field(default="0.1.0", description="Version of the generator, recorded in logs.")

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file (environment variables are not layered in)."""
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
