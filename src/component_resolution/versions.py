"""Version resolution - pick the version to install or remove.

Versions are plain strings. Only strings of exactly three dot-separated
non-negative integers take part in latest selection; anything else is
filtered out before comparison. Ordering is numeric per segment, never
lexicographic ("10.0.0" > "2.0.0").
"""

import logging
import re
from collections.abc import Iterable

from .exceptions import NoVersionFoundError
from .protocols import CandidateSourceProtocol
from .protocols import InstalledStateProtocol
from .schema import ComponentRequest
from .schema import InstanceContext

logger = logging.getLogger(__name__)

_VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


def parse_version(version: str) -> tuple[int, int, int] | None:
    """Parse a conforming version into integer segments.

    Returns:
        (major, minor, patch), or None if version is not exactly int.int.int
    """
    match = _VERSION_PATTERN.fullmatch(version)
    if match is None:
        return None
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch)


def select_latest(candidates: Iterable[str], preferred_prefix: str | None = None) -> str:
    """
    Select the greatest conforming version from candidates.

    Args:
        candidates: Version strings, possibly malformed
        preferred_prefix: Version-family prefix. Accepted for callers that
            thread it through; it does not filter.

    Returns:
        Latest version string, or "" if no candidate conforms

    Example:
        >>> select_latest(["1.0.0", "2.0.0", "10.0.0"])
        '10.0.0'
        >>> select_latest(["Foo", "1.0", "1.0.0.0"])
        ''
    """
    if preferred_prefix:
        logger.debug(f"Preferred version prefix '{preferred_prefix}' ignored for latest selection")

    latest = ""
    latest_key: tuple[int, int, int] | None = None
    for candidate in candidates:
        key = parse_version(candidate)
        if key is None:
            logger.debug(f"Skipping non-conforming version: {candidate!r}")
            continue
        if latest_key is None or key > latest_key:
            latest, latest_key = candidate, key

    return latest


def current_installed_version(component_name: str, installed_state: InstalledStateProtocol) -> str:
    """Return installed version reported by installed_state ("" if not installed)."""
    version = installed_state.get_installed_version(component_name)
    logger.debug(f"Installed version of '{component_name}': {version or '<none>'}")
    return version


def resolve_target(
    request: ComponentRequest,
    candidate_source: CandidateSourceProtocol,
    context: InstanceContext,
    preferred_prefix: str | None = None,
) -> str:
    """
    Resolve the version a request acts on.

    An explicit version is returned unchanged (existence is checked later by
    the download step). Otherwise the candidate source is asked for published
    versions and the latest conforming one is chosen.

    Args:
        request: Component request
        candidate_source: Lists published versions (only called for latest)
        context: Instance context, passed to the candidate source
        preferred_prefix: Threaded through to select_latest()

    Returns:
        Version string

    Raises:
        NoVersionFoundError: If latest was requested and nothing conforms
    """
    if not request.wants_latest:
        return request.version  # type: ignore[return-value]

    candidates = list(candidate_source.list_versions(request.name, context, source=request.source))
    latest = select_latest(candidates, preferred_prefix)
    if not latest:
        raise NoVersionFoundError(
            f"No valid version found for component '{request.name}' "
            f"({len(candidates)} candidate(s) listed, none of the form major.minor.patch)",
            context={"component_name": request.name, "candidates": candidates},
        )

    logger.debug(f"Resolved latest version of '{request.name}': {latest}")
    return latest


def resolve_uninstall_target(
    request: ComponentRequest,
    candidate_source: CandidateSourceProtocol,
    installed_state: InstalledStateProtocol,
    context: InstanceContext,
    preferred_prefix: str | None = None,
) -> str:
    """
    Resolve the version an uninstall acts on.

    Resolution order:
    1. Explicit request version
    2. Currently installed version
    3. Latest published version (resolve_target)

    Raises:
        NoVersionFoundError: If every step comes up empty
    """
    if not request.wants_latest:
        return request.version  # type: ignore[return-value]

    installed = current_installed_version(request.name, installed_state)
    if installed:
        return installed

    return resolve_target(request, candidate_source, context, preferred_prefix)
