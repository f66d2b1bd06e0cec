"""Runtime configuration for lite-bundle."""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .core.languages import normalize_dialect


ENV_PREFIX = "LITE_BUNDLE_"

MAX_CODE_SIZE = 50 * 1024 * 1024  # 50MB
DEFAULT_LIMIT = 50


class BundleConfig(BaseModel):
    """Limits and collaborator options shared by all bundle tools."""

    max_code_size: int = Field(default=MAX_CODE_SIZE, gt=0, description="Max accepted input size in characters")
    default_limit: int = Field(default=DEFAULT_LIMIT, gt=0, description="Default result limit for list/search tools")
    dialect: str = Field(default="javascript", description="Grammar used to parse units: javascript or typescript")
    indent_size: int = Field(default=2, ge=0, description="Indent width used by the formatter")
    workspace_root: Optional[str] = Field(
        default=None,
        description="Root used to resolve relative file paths. If None, uses current working directory.",
    )

    @field_validator("dialect")
    @classmethod
    def known_dialect(cls, value: str) -> str:
        return normalize_dialect(value)

    @classmethod
    def from_env(cls) -> "BundleConfig":
        """Build a config from LITE_BUNDLE_* environment variables."""
        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)


_config: Optional[BundleConfig] = None


def get_config() -> BundleConfig:
    global _config
    if _config is None:
        _config = BundleConfig.from_env()
    return _config


def set_config(config: Optional[BundleConfig]) -> None:
    """Replace the process config (None re-reads the environment on next use)."""
    global _config
    _config = config
