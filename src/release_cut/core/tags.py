"""Release tag filtering and selection.

A repository usually carries tags that are not releases (``nightly``,
``deploy-2024-01-02``, ...). Only tags named after a semantic version
count as releases; the latest release is the one with the highest
version, regardless of when it was created.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from release_cut.core.version import DEFAULT_TAG_PREFIX, Version, try_parse_version

if TYPE_CHECKING:
    from collections.abc import Iterable

    from release_cut.vcs.git import Tag

logger = logging.getLogger(__name__)


def filter_release_tags(tags: Iterable[Tag], prefix: str = DEFAULT_TAG_PREFIX) -> list[Tag]:
    """Keep only tags whose name parses as a semantic version.

    Args:
        tags: All repository tags
        prefix: Optional prefix stripped from tag names before parsing

    Returns:
        The release tags, in input order
    """
    releases = []
    for tag in tags:
        if try_parse_version(tag.name, prefix) is None:
            logger.debug("Skipping non-semver tag %r", tag.name)
            continue
        releases.append(tag)
    return releases


def select_latest_tag(tags: Iterable[Tag], prefix: str = DEFAULT_TAG_PREFIX) -> Tag | None:
    """Pick the release tag with the highest semver precedence.

    Tags are compared by version only; commit dates play no part. Two
    tags with the same precedence (``v1.0.0`` and ``1.0.0``) fall back
    to the greater name so that the choice is stable.

    Args:
        tags: Release tags, as returned by :func:`filter_release_tags`
        prefix: Tag prefix used when parsing names

    Returns:
        The latest tag, or ``None`` if ``tags`` is empty
    """
    latest: Tag | None = None
    latest_version: Version | None = None

    for tag in tags:
        version = Version.parse(tag.name, prefix)
        if (
            latest is None
            or latest_version is None
            or version > latest_version
            or (version == latest_version and tag.name > latest.name)
        ):
            latest, latest_version = tag, version

    if latest is not None:
        logger.debug("Latest release tag: %s @ %s", latest.name, latest.target[:7])
    return latest
