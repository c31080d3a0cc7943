"""Distribution locations - manifest and package URLs per cloud partition.

The standard and restricted partitions differ in domain suffix and bucket
literal, so the base endpoint is chosen by partition rather than built from
one template. Path segments are used verbatim: no escaping, no case changes.
"""

from enum import Enum

from .names import get_manifest_name
from .names import get_package_name
from .schema import ComponentRequest
from .schema import InstanceContext
from .settings import DEFAULT_SETTINGS
from .settings import ComponentSettings


class Partition(Enum):
    """Cloud partition a region belongs to."""

    STANDARD = "standard"
    RESTRICTED = "restricted"


def partition_for_region(region: str, settings: ComponentSettings = DEFAULT_SETTINGS) -> Partition:
    """Classify region by the restricted-partition prefix (e.g., "cn-north-1" → RESTRICTED)."""
    if region.startswith(settings.restricted_region_prefix):
        return Partition.RESTRICTED
    return Partition.STANDARD


def get_base_url(context: InstanceContext, settings: ComponentSettings = DEFAULT_SETTINGS) -> str:
    """Return the Components endpoint for the instance's partition, region substituted."""
    if partition_for_region(context.region, settings) is Partition.RESTRICTED:
        template = settings.restricted_component_url
    else:
        template = settings.component_url
    return template.replace(settings.region_placeholder, context.region)


def build_package_url(
    component_name: str,
    version: str,
    context: InstanceContext,
    file_name: str,
    settings: ComponentSettings = DEFAULT_SETTINGS,
) -> str:
    """
    Build package download URL.

    Format: <base>/<name>/<platform>/<arch>/<version>/<file_name>

    Example:
        >>> ctx = InstanceContext(region="cn-north-1", platform="windows", arch="amd64", compress_format="zip")
        >>> build_package_url("PVDriver", "9000.0.0", ctx, "PVDriver.zip")
        'https://s3.cn-north-1.amazonaws.com.cn/amazon-ssm-cn-north-1/Components/PVDriver/windows/amd64/9000.0.0/PVDriver.zip'
    """
    base = get_base_url(context, settings)
    return f"{base}/{component_name}/{context.platform}/{context.arch}/{version}/{file_name}"


def build_manifest_url(
    component_name: str,
    context: InstanceContext,
    settings: ComponentSettings = DEFAULT_SETTINGS,
) -> str:
    """Build manifest URL: <base>/<name>/<platform>/<arch>/<name>.json"""
    base = get_base_url(context, settings)
    return f"{base}/{component_name}/{context.platform}/{context.arch}/{get_manifest_name(component_name)}"


def resolve_package_url(
    request: ComponentRequest,
    version: str,
    context: InstanceContext,
    settings: ComponentSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the explicit request source if given, otherwise the built package URL."""
    if request.source:
        return request.source
    return build_package_url(request.name, version, context, get_package_name(request.name, context), settings)


def manifest_url_from_source(component_name: str, source: str) -> str:
    """Manifest beside an explicit package source: <source dir>/<name>.json"""
    source_dir = source.rsplit("/", 1)[0] if "/" in source else ""
    manifest_name = get_manifest_name(component_name)
    return f"{source_dir}/{manifest_name}" if source_dir else manifest_name


def resolve_manifest_url(
    request: ComponentRequest,
    context: InstanceContext,
    settings: ComponentSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the manifest URL next to the explicit source if given, otherwise the built one."""
    if request.source:
        return manifest_url_from_source(request.name, request.source)
    return build_manifest_url(request.name, context, settings)
