"""Protocols for the capabilities component resolution consumes.

The library computes versions, locations and staging paths. Listing published
versions, querying installed state, touching the filesystem and fetching
packages are supplied by the app through these interfaces.
"""

from pathlib import Path
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    from .schema import InstanceContext


@runtime_checkable
class CandidateSourceProtocol(Protocol):
    """Lists the published versions of a component."""

    def list_versions(
        self, component_name: str, context: "InstanceContext", source: str | None = None
    ) -> list[str]:
        """Return published version strings (may include malformed entries).

        Args:
            component_name: Component to look up (e.g., "PVDriver")
            context: Instance platform/region context
            source: Explicit package source from the request; when set, versions
                are read from that location instead of the default endpoints

        Returns:
            Version strings as published, unfiltered
        """
        ...


@runtime_checkable
class InstalledStateProtocol(Protocol):
    """Reports which version of a component is installed."""

    def get_installed_version(self, component_name: str) -> str:
        """Return installed version, or empty string if not installed."""
        ...


@runtime_checkable
class FileSystemProtocol(Protocol):
    """Narrow filesystem interface used by the package stager.

    Implementations raise OSError on failure.
    """

    def make_dirs(self, path: Path) -> None:
        """Create directory and missing parents; existing directory is not an error."""
        ...

    def exists(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]:
        """Return entry names directly under path."""
        ...


class PackageFetcherProtocol(Protocol):
    """Protocol for the external fetch/extract step.

    Example implementations:
    - HttpZipFetcher: download the archive and extract it
    - FileFetcher: copy a local archive for development
    """

    async def fetch_to(self, url: str, target_dir: Path) -> None:
        """Fetch package from url into target directory.

        Args:
            url: Package location (built URL or explicit source override)
            target_dir: Staging directory (already created)

        Raises:
            Exception: If the fetch fails
        """
        ...
