"""Renderer configuration, loadable from pyproject.toml [tool.hiccpy]."""

from __future__ import annotations

from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field

from .core import ID_PREFIX, MAX_DEPTH, MAX_TAG_CACHE_SIZE

TOOL_TABLE = "hiccpy"


class RenderConfig(BaseModel):
    """Limits and naming used by a Renderer."""

    max_depth: int = Field(default=MAX_DEPTH, ge=1)
    cache_size: int = Field(default=MAX_TAG_CACHE_SIZE, ge=1)
    id_prefix: str = Field(default=ID_PREFIX, min_length=1)

    @classmethod
    def load(cls, project_root: Path) -> "RenderConfig":
        pyproject = project_root / "pyproject.toml"
        if not pyproject.exists():
            return cls()

        doc = tomlkit.parse(pyproject.read_text())
        tool_config = doc.get("tool", {}).get(TOOL_TABLE, {})
        return cls.model_validate(tool_config.unwrap() if tool_config else {})
