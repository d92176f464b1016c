"""Configuration management for release-cut."""

from __future__ import annotations

from release_cut.config.loader import load_config
from release_cut.config.models import ReleaseCutConfig, TagsConfig, VersionConfig

__all__ = [
    "ReleaseCutConfig",
    "TagsConfig",
    "VersionConfig",
    "load_config",
]
