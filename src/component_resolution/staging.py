"""Package staging - local folders for downloaded component packages.

Staging path: <download_root>/components/<name>/<version>

The app injects download_root (policy) and, optionally, the filesystem
capability. Tests pass a fake filesystem instead of touching real storage.
"""

import logging
from pathlib import Path

from .exceptions import StagingFailureError
from .protocols import FileSystemProtocol
from .versions import select_latest

logger = logging.getLogger(__name__)

COMPONENTS_DIR = "components"


class LocalFileSystem:
    """FileSystemProtocol backed by the local disk."""

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def list_dir(self, path: Path) -> list[str]:
        return sorted(item.name for item in path.iterdir())


class PackageStager:
    """
    Create and inspect staging folders (with injected root and filesystem).

    Philosophy:
    - Errors surface unchanged (chained), no retry
    - Partial directory creation is left as-is; cleanup is the caller's job
    - Recreating an existing folder is not an error
    """

    def __init__(self, download_root: Path, fs: FileSystemProtocol | None = None):
        """Initialize stager with app-provided download root.

        Args:
            download_root: Directory under which "components/" is created
            fs: Filesystem capability (defaults to LocalFileSystem)

        Example:
            >>> stager = PackageStager(download_root=Path("/var/lib/agent/download"))
            >>> stager.component_folder("PVDriver", "1.0.0")
            PosixPath('/var/lib/agent/download/components/PVDriver/1.0.0')
        """
        self.download_root = download_root
        self.fs = fs if fs is not None else LocalFileSystem()

    @property
    def components_root(self) -> Path:
        return self.download_root / COMPONENTS_DIR

    def component_folder(self, component_name: str, version: str) -> Path:
        """Compute staging folder path without touching the filesystem."""
        return self.components_root / component_name / version

    def create_component_folder(self, component_name: str, version: str) -> Path:
        """
        Create staging folder for (component, version).

        Args:
            component_name: Component name (path segment)
            version: Component version (path segment)

        Returns:
            Path to the created (or already existing) folder

        Raises:
            StagingFailureError: If the filesystem refuses (permissions, disk full,
                a file in the way); the OSError is kept as __cause__
        """
        folder = self.component_folder(component_name, version)
        try:
            self.fs.make_dirs(folder)
        except OSError as e:
            raise StagingFailureError(
                f"Failed to create staging folder {folder}: {e}",
                context={"component_name": component_name, "version": version, "path": str(folder)},
            ) from e

        logger.debug(f"Staging folder ready: {folder}")
        return folder

    def has_valid_package(self, component_name: str, version: str) -> bool:
        """Check if a package for (component, version) is already staged.

        Existence only: the folder must exist and hold at least one entry.
        Unreadable state counts as not staged.
        """
        folder = self.component_folder(component_name, version)
        try:
            return self.fs.exists(folder) and len(self.fs.list_dir(folder)) > 0
        except OSError as e:
            logger.debug(f"Could not inspect {folder}: {e}")
            return False

    def list_staged_versions(self, component_name: str) -> list[str]:
        """List version folder names staged for a component ([] if none or unreadable)."""
        component_dir = self.components_root / component_name
        try:
            if not self.fs.exists(component_dir):
                return []
            return self.fs.list_dir(component_dir)
        except OSError as e:
            logger.debug(f"Could not list {component_dir}: {e}")
            return []


class StagedVersionQuery:
    """InstalledStateProtocol reporting the latest version staged on disk.

    For hosts whose installer keeps the package folder of the installed
    version; apps with a real installed-state store should inject that instead.
    """

    def __init__(self, stager: PackageStager):
        self.stager = stager

    def get_installed_version(self, component_name: str) -> str:
        return select_latest(self.stager.list_staged_versions(component_name))
