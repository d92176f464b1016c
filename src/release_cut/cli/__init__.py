"""Command line interface for release-cut."""

from __future__ import annotations

from release_cut.cli.main import app

__all__ = ["app"]
