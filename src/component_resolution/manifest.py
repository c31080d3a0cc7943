"""Component manifest - published versions fetched over HTTP.

The manifest lives beside the version folders of a component
(see build_manifest_url). Its version list is returned as published;
malformed entries are filtered later by select_latest().
"""

import logging

import requests
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .exceptions import ManifestError
from .locations import build_manifest_url
from .locations import manifest_url_from_source
from .schema import InstanceContext
from .settings import DEFAULT_SETTINGS
from .settings import ComponentSettings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class ComponentManifest(BaseModel):
    """Manifest document: component name and its published versions."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    versions: list[str] = Field(default_factory=list)


class ManifestVersionSource:
    """
    CandidateSourceProtocol reading versions from the component manifest.

    No caching and no retry: each call fetches the manifest once.
    """

    def __init__(
        self,
        settings: ComponentSettings = DEFAULT_SETTINGS,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize with endpoint settings and optional HTTP session.

        Args:
            settings: Endpoint settings used to build the manifest URL
            session: requests session (a new one is created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.settings = settings
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def fetch_manifest(
        self, component_name: str, context: InstanceContext, source: str | None = None
    ) -> ComponentManifest:
        """
        Download and parse the manifest of a component.

        With an explicit source the manifest is read from beside it, so the
        default endpoints are never contacted.

        Raises:
            ManifestError: On transport errors, HTTP errors, invalid JSON or
                unexpected document shape
        """
        if source:
            url = manifest_url_from_source(component_name, source)
        else:
            url = build_manifest_url(component_name, context, self.settings)
        error_context = {"component_name": component_name, "url": url}

        logger.debug(f"Fetching manifest for '{component_name}' from {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ManifestError(f"Failed to fetch manifest for '{component_name}': {e}", context=error_context) from e

        try:
            data = response.json()
        except ValueError as e:
            # requests.JSONDecodeError is a ValueError too
            raise ManifestError(f"Manifest for '{component_name}' is not valid JSON: {e}", context=error_context) from e

        try:
            return ComponentManifest.model_validate(data)
        except ValidationError as e:
            raise ManifestError(f"Invalid manifest for '{component_name}': {e}", context=error_context) from e

    def list_versions(self, component_name: str, context: InstanceContext, source: str | None = None) -> list[str]:
        manifest = self.fetch_manifest(component_name, context, source)
        logger.debug(f"Manifest for '{component_name}' lists {len(manifest.versions)} version(s)")
        return list(manifest.versions)
