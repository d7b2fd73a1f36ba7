"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from diffview.core.segment import COMPACT_CONTEXT_LINES, DEFAULT_CONTEXT_LINES, context_window


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "diffview"
    context_lines: int  = Field(default=DEFAULT_CONTEXT_LINES, ge=1, description="Anchor lines kept on each side of a change")
    compact_context_lines: int = Field(default=COMPACT_CONTEXT_LINES, ge=1, description="Anchor lines in compact display mode")
    compact:       bool = Field(default=False, description="Use compact_context_lines instead of context_lines")
    output_format: str  = Field(default="text", pattern="^(text|json)$", description="text or json")

    @property
    def window(self) -> int:
        """Effective anchor width for the current display mode."""
        return context_window(self.compact, self.context_lines, self.compact_context_lines)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DIFFVIEW_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DIFFVIEW_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
