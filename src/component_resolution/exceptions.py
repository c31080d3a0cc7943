"""Component resolution exceptions.

Each error names the resolution step that failed, so callers can tell
"nothing to install" apart from "cannot write to disk".
"""


class ComponentError(Exception):
    """Base exception for component resolution."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (component name, paths, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class NoVersionFoundError(ComponentError):
    """No conforming version available when resolving latest."""


class StagingFailureError(ComponentError):
    """Staging directory could not be prepared or populated."""


class InvalidActionError(ComponentError):
    """Requested action is neither Install nor Uninstall."""


class ManifestError(ComponentError):
    """Component manifest could not be fetched or parsed."""
