"""
Settings model — tool configuration loaded from scriptmeta.yml.

Every field has a default, so an absent config file is equivalent
to an empty one.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class EncodingSettings(BaseModel):
    """How script files are decoded."""

    honor_declaration: bool = True


class DependencySettings(BaseModel):
    """How the ``Script Dependencies`` block is consumed."""

    validator: Literal["pep508", "name"] = "pep508"
    first_block_only: bool = False


class ScanSettings(BaseModel):
    """Which files a directory check looks at."""

    include: list[str] = Field(default_factory=lambda: ["*.py"])
    exclude: list[str] = Field(
        default_factory=lambda: [".git", ".venv", "venv", "__pycache__", "node_modules"]
    )


class Settings(BaseModel):
    """Root configuration."""

    version: int = 1

    encoding: EncodingSettings = Field(default_factory=EncodingSettings)
    dependencies: DependencySettings = Field(default_factory=DependencySettings)
    scan: ScanSettings = Field(default_factory=ScanSettings)
