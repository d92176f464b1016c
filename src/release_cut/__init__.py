"""release-cut: find what changed since the last release and classify it."""

from __future__ import annotations

__version__ = "0.1.0"
