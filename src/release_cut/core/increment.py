"""Next-version proposal.

The proposed version is only a default offered to whoever cuts the
release. It comes from a fixed increment rule applied to the latest
release tag, not from the commits in the range: a range full of
breaking changes still gets a minor bump unless another strategy is
configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from release_cut.core.version import DEFAULT_TAG_PREFIX, BumpType, Version
from release_cut.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from release_cut.vcs.git import Tag


class IncrementStrategy(Protocol):
    """Derive the next version from the current one."""

    def __call__(self, current: Version) -> Version: ...


def increment_major(current: Version) -> Version:
    return current.bump(BumpType.MAJOR)


def increment_minor(current: Version) -> Version:
    return current.bump(BumpType.MINOR)


def increment_patch(current: Version) -> Version:
    return current.bump(BumpType.PATCH)


INCREMENT_STRATEGIES: dict[str, IncrementStrategy] = {
    BumpType.MAJOR: increment_major,
    BumpType.MINOR: increment_minor,
    BumpType.PATCH: increment_patch,
}

DEFAULT_INCREMENT = BumpType.MINOR


def get_increment_strategy(name: str) -> IncrementStrategy:
    """Look up a built-in strategy by name (``major``, ``minor`` or ``patch``).

    Raises:
        ConfigValidationError: If no strategy has that name
    """
    try:
        return INCREMENT_STRATEGIES[name]
    except KeyError as e:
        known = ", ".join(sorted(INCREMENT_STRATEGIES))
        raise ConfigValidationError(
            f"Unknown increment strategy {name!r} (expected one of: {known})"
        ) from e


def propose_next_version(
    tag: Tag,
    *,
    prefix: str = DEFAULT_TAG_PREFIX,
    strategy: IncrementStrategy = increment_minor,
) -> str:
    """Propose the version that follows a release tag.

    Args:
        tag: Latest release tag
        prefix: Tag prefix used when parsing the tag name
        strategy: Increment rule; bumps minor by default

    Returns:
        The proposed version without any prefix, e.g. ``"1.5.0"`` for ``v1.4.2``

    Raises:
        InvalidVersionError: If the tag name is not a semantic version
    """
    current = Version.parse(tag.name, prefix)
    return str(strategy(current))
