"""Configuration model for ieltsmark."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class MarkingConfig(BaseModel):
    enforce_word_limits: bool = True
    default_max_words: Optional[int] = Field(default=None, ge=0)
    default_max_numbers: Optional[int] = Field(default=None, ge=0)


class Settings(BaseModel):
    marking: MarkingConfig = Field(default_factory=MarkingConfig)
    log_level: str = "WARNING"
    data_dir: Path = Path.home() / ".ieltsmark"

    def get_log_level(self) -> str:
        return (os.environ.get("IELTSMARK_LOG_LEVEL") or self.log_level).upper()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        config_path = config_path or Path.home() / ".ieltsmark" / "config.yaml"
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()

    def save(self) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.data_dir / "config.yaml"
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
        return config_path
