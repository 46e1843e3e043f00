"""Application configuration: settings schema and config.yaml loader"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from linediff.core.models import DiffOptions


CONFIG_FILE = "config.yaml"

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    ignore_whitespace: bool = Field(default=False, description="Compare lines with whitespace trimmed and collapsed")
    ignore_case:       bool = Field(default=False, description="Compare lines case-insensitively")
    view_mode:   str = Field(default="unified", pattern="^(unified|split)$", description="unified or split")
    max_lines:   int = Field(default=0,  ge=0,  description="Max lines per input file; 0 = unlimited")
    split_width: int = Field(default=60, ge=10, description="Content column width of the split view")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def options(self) -> DiffOptions:
        return DiffOptions(ignore_whitespace=self.ignore_whitespace, ignore_case=self.ignore_case)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")
        logger.debug("Loaded %s: %s", CONFIG_FILE, sorted(data))

    for name in Settings.model_fields:
        if val := os.getenv(f"LINEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
