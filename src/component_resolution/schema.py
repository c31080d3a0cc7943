"""Request and instance context models.

Both are built fresh per install/uninstall request and discarded afterwards.
"""

from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict


class ComponentAction(str, Enum):
    """Actions a component request may ask for."""

    INSTALL = "Install"
    UNINSTALL = "Uninstall"


class ComponentRequest(BaseModel):
    """
    Immutable input describing what to do with which component.

    `action` stays a raw string so an unknown value reaches validate_request()
    and fails with InvalidActionError rather than a generic validation error.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None
    action: str = ComponentAction.INSTALL.value
    source: str | None = None

    @property
    def wants_latest(self) -> bool:
        """True when no explicit version was requested."""
        return not self.version


class InstanceContext(BaseModel):
    """Environment facts about the managed instance (supplied, never computed here)."""

    model_config = ConfigDict(frozen=True)

    region: str
    platform: str
    platform_version: str = ""
    arch: str
    installer_name: str = ""
    compress_format: str
