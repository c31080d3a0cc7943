"""Artifact file names derived from a component name."""

from .schema import InstanceContext

MANIFEST_EXTENSION = "json"


def get_manifest_name(component_name: str) -> str:
    """Return manifest file name, e.g. "PVDriver.json"."""
    return f"{component_name}.{MANIFEST_EXTENSION}"


def get_package_name(component_name: str, context: InstanceContext) -> str:
    """Return package file name using the instance archive format, e.g. "PVDriver.zip"."""
    return f"{component_name}.{context.compress_format}"
