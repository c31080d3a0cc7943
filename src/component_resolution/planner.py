"""Component planning - per-request flow up to the fetch/execute hand-off.

Process:
1. Validate request (name, action)
2. Resolve version (explicit, installed, or latest)
3. Compute manifest and package URLs (explicit source wins)
4. Create staging folder

Fetching, extracting and running the installer belong to the app, which
receives a ComponentPlan and may use stage_package() with its own fetcher.
"""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict

from .exceptions import ComponentError
from .exceptions import InvalidActionError
from .exceptions import StagingFailureError
from .locations import resolve_manifest_url
from .locations import resolve_package_url
from .names import get_package_name
from .protocols import CandidateSourceProtocol
from .protocols import InstalledStateProtocol
from .protocols import PackageFetcherProtocol
from .schema import ComponentAction
from .schema import ComponentRequest
from .schema import InstanceContext
from .settings import DEFAULT_SETTINGS
from .settings import ComponentSettings
from .staging import PackageStager
from .versions import resolve_target
from .versions import resolve_uninstall_target

logger = logging.getLogger(__name__)


class ComponentPlan(BaseModel):
    """Everything the fetch/execute pipeline needs for one request."""

    model_config = ConfigDict(frozen=True)

    action: ComponentAction
    name: str
    version: str
    manifest_url: str
    package_url: str
    package_name: str
    staging_dir: Path


def validate_request(request: ComponentRequest) -> ComponentAction:
    """
    Validate a component request.

    Returns:
        Parsed action

    Raises:
        InvalidActionError: If action is not Install or Uninstall (checked first)
        ComponentError: If the component name is empty
    """
    try:
        action = ComponentAction(request.action)
    except ValueError:
        valid = ", ".join(a.value for a in ComponentAction)
        raise InvalidActionError(
            f"Unsupported action '{request.action}' for component '{request.name}' (expected one of: {valid})",
            context={"component_name": request.name, "action": request.action},
        ) from None

    if not request.name:
        raise ComponentError("Component name must not be empty", context={"action": request.action})

    return action


def plan_component(
    request: ComponentRequest,
    context: InstanceContext,
    candidate_source: CandidateSourceProtocol,
    installed_state: InstalledStateProtocol,
    stager: PackageStager,
    settings: ComponentSettings = DEFAULT_SETTINGS,
    preferred_prefix: str | None = None,
) -> ComponentPlan:
    """
    Resolve version and locations for a request and prepare its staging folder.

    Args:
        request: Component request
        context: Instance context (app supplied)
        candidate_source: Lists published versions when latest is needed
        installed_state: Reports installed version (used by Uninstall)
        stager: Package stager (app injects root and filesystem)
        settings: Endpoint settings
        preferred_prefix: Threaded through to latest selection

    Returns:
        ComponentPlan for the fetch/execute pipeline

    Raises:
        InvalidActionError: Unsupported action
        NoVersionFoundError: Nothing to install/uninstall
        StagingFailureError: Staging folder could not be created
    """
    action = validate_request(request)

    if action is ComponentAction.UNINSTALL:
        version = resolve_uninstall_target(request, candidate_source, installed_state, context, preferred_prefix)
    else:
        version = resolve_target(request, candidate_source, context, preferred_prefix)

    logger.info(f"{action.value} '{request.name}' version {version}")

    package_url = resolve_package_url(request, version, context, settings)
    if request.source:
        logger.debug(f"Using explicit source for '{request.name}': {package_url}")

    staging_dir = stager.create_component_folder(request.name, version)

    return ComponentPlan(
        action=action,
        name=request.name,
        version=version,
        manifest_url=resolve_manifest_url(request, context, settings),
        package_url=package_url,
        package_name=get_package_name(request.name, context),
        staging_dir=staging_dir,
    )


async def stage_package(plan: ComponentPlan, fetcher: PackageFetcherProtocol, stager: PackageStager) -> bool:
    """
    Fetch the planned package into its staging folder unless already staged.

    Args:
        plan: Plan from plan_component()
        fetcher: App-provided fetch/extract implementation
        stager: Stager used to check for an existing package

    Returns:
        True if the package was fetched, False if an existing one was reused

    Raises:
        StagingFailureError: If the fetch fails
    """
    if stager.has_valid_package(plan.name, plan.version):
        logger.info(f"Package for '{plan.name}' {plan.version} already staged at {plan.staging_dir}")
        return False

    try:
        logger.info(f"Fetching {plan.package_url} to {plan.staging_dir}")
        await fetcher.fetch_to(plan.package_url, plan.staging_dir)
    except Exception as e:
        if isinstance(e, ComponentError):
            raise
        raise StagingFailureError(
            f"Failed to stage package for '{plan.name}' {plan.version}: {e}",
            context={"component_name": plan.name, "version": plan.version, "url": plan.package_url},
        ) from e

    return True
