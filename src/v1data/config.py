from __future__ import annotations

"""Configuration utilities for v1data.

Settings are grouped into small sections (numeric kind, rendering, demo data
generation, codec and logging).  Instances can be populated from environment
variables using the ``V1DATA_`` prefix with ``__`` as the nested delimiter,
e.g. ``V1DATA_DEMO__SEED=7``, or from YAML/JSON files with matching nested
keys.
"""

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import KIND_DTYPES
from .utils.logging import resolve_level


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class NumericSettings(SectionModel):
    """Kind of the dependent values (``real`` or ``complex``)."""

    kind: str = "real"

    @field_validator("kind", mode="before")
    @classmethod
    def _check_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in KIND_DTYPES:
                raise ValueError(f"kind must be one of {sorted(KIND_DTYPES)}")
        return value


class RenderSettings(SectionModel):
    """Python format spec applied to every number in long renderings."""

    format: str = ".2f"


class DemoSettings(SectionModel):
    """Parameters of the generated demo collection."""

    n_array: int = Field(default=2, ge=0)
    n_list: int = Field(default=2, ge=0)
    n_nodes: int = Field(default=5, ge=0)
    step: float = 0.1
    seed: Optional[int] = None


class CodecSettings(SectionModel):
    encoding: str = "utf8"


class LoggingSettings(SectionModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        resolve_level(value)
        return value.upper()


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    numeric: NumericSettings = Field(default_factory=NumericSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="V1DATA_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from defaults overlaid with ``V1DATA_*`` variables."""

        return cls()


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
