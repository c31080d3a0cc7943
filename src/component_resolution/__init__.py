"""component-resolution - Version resolution and distribution locations for host components.

Public API exports.

Library mechanism only: apps inject policy (staging root, endpoint settings)
and capabilities (candidate source, installed state, filesystem, fetcher).
"""

from .exceptions import ComponentError
from .exceptions import InvalidActionError
from .exceptions import ManifestError
from .exceptions import NoVersionFoundError
from .exceptions import StagingFailureError
from .locations import Partition
from .locations import build_manifest_url
from .locations import build_package_url
from .locations import manifest_url_from_source
from .locations import partition_for_region
from .locations import resolve_manifest_url
from .locations import resolve_package_url
from .manifest import ComponentManifest
from .manifest import ManifestVersionSource
from .names import get_manifest_name
from .names import get_package_name
from .planner import ComponentPlan
from .planner import plan_component
from .planner import stage_package
from .planner import validate_request
from .protocols import CandidateSourceProtocol
from .protocols import FileSystemProtocol
from .protocols import InstalledStateProtocol
from .protocols import PackageFetcherProtocol
from .schema import ComponentAction
from .schema import ComponentRequest
from .schema import InstanceContext
from .settings import DEFAULT_SETTINGS
from .settings import ComponentSettings
from .staging import LocalFileSystem
from .staging import PackageStager
from .staging import StagedVersionQuery
from .versions import current_installed_version
from .versions import resolve_target
from .versions import resolve_uninstall_target
from .versions import select_latest

__all__ = [
    # Models
    "ComponentAction",
    "ComponentRequest",
    "InstanceContext",
    # Settings
    "ComponentSettings",
    "DEFAULT_SETTINGS",
    # Names
    "get_manifest_name",
    "get_package_name",
    # Versions
    "select_latest",
    "current_installed_version",
    "resolve_target",
    "resolve_uninstall_target",
    # Locations
    "Partition",
    "partition_for_region",
    "build_manifest_url",
    "build_package_url",
    "resolve_package_url",
    "manifest_url_from_source",
    "resolve_manifest_url",
    # Staging
    "PackageStager",
    "LocalFileSystem",
    "StagedVersionQuery",
    # Manifest
    "ComponentManifest",
    "ManifestVersionSource",
    # Planning
    "ComponentPlan",
    "validate_request",
    "plan_component",
    "stage_package",
    # Protocols
    "CandidateSourceProtocol",
    "InstalledStateProtocol",
    "FileSystemProtocol",
    "PackageFetcherProtocol",
    # Exceptions
    "ComponentError",
    "InvalidActionError",
    "ManifestError",
    "NoVersionFoundError",
    "StagingFailureError",
]

__version__ = "0.1.0"
