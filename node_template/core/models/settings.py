"""
Settings and per-run options.

``Settings`` mirrors ``node-template.yml``. ``GenerateOptions`` is what a
single ``generate`` run threads through the scaffolders; it replaces any
process-wide language flag.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Tool configuration loaded from YAML (all keys optional)."""

    model_config = ConfigDict(extra="forbid")

    runtime: str = Field(default="node", min_length=1)
    runner: str = Field(default="npx", min_length=1)
    frontend_dir: str = Field(default="frontend", min_length=1)
    backend_dir: str = Field(default="backend", min_length=1)
    typescript: bool = False


class GenerateOptions(BaseModel):
    """Options for one generate run."""

    settings: Settings = Field(default_factory=Settings)
    typescript: bool = False
    project_root: str = "."
    dry_run: bool = False
