"""Configuration models for release-cut.

Configuration lives in the ``[tool.release-cut]`` table of
``pyproject.toml``::

    [tool.release-cut.tags]
    prefix = "v"

    [tool.release-cut.version]
    increment = "minor"

Every field has a default, so an absent table is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TagsConfig(BaseModel):
    """How release tags are recognised."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = Field(
        default="v",
        description="Prefix stripped from tag names before parsing them as versions",
    )


class VersionConfig(BaseModel):
    """How the next version is proposed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    increment: Literal["major", "minor", "patch"] = Field(
        default="minor",
        description="Component bumped when proposing the next version",
    )


class ReleaseCutConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tags: TagsConfig = Field(default_factory=TagsConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)

    @property
    def tag_prefix(self) -> str:
        return self.tags.prefix
