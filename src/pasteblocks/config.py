"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from bs4.builder import builder_registry
from pydantic import BaseModel, Field, field_validator

from pasteblocks.core.models import CategoryEnum


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PASTEBLOCKS_"


class Settings(BaseModel):
    app_name:          str = "pasteblocks"
    log_level:         str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Root log level for the CLI")
    html_parser:       str = Field(default="html.parser", description="BeautifulSoup tree builder used for rich pastes")
    base_url:          str = Field(default="", description="Base URL that relative image sources in rich pastes resolve against")
    excerpt_length:    int = Field(default=200, ge=0, description="Max excerpt characters taken from the first paragraph")
    default_category:  CategoryEnum = Field(default=CategoryEnum.strategy, description="Category assigned to new article drafts")
    default_read_time: str = Field(default="5 min", description="Read time assigned to new article drafts")
    output_dir:        str = Field(default="dist", description="Directory for exported articles")
    output_format:     str = Field(default="md", pattern="^(md|json)$", description="md or json")

    @field_validator("html_parser")
    @classmethod
    def known_builder(cls, v: str) -> str:
        # Only builders whose libraries are installed are registered.
        if builder_registry.lookup(v) is None:
            raise ValueError(f"Unknown HTML tree builder: {v}")
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PASTEBLOCKS_<FIELD> env vars, then non-None CLI overrides.

    Keys in config.yaml that are not settings fields are rejected rather than
    ignored, so a misspelt option does not silently fall back to its default.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping of settings")
        unknown = sorted(set(data) - set(Settings.model_fields))
        if unknown:
            raise ValueError(f"Invalid {CONFIG_FILE}: unknown setting(s) {', '.join(unknown)}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
