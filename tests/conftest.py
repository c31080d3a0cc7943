"""Shared fixtures and fake capabilities for component resolution tests."""

from pathlib import Path

import pytest
from component_resolution import ComponentRequest
from component_resolution import InstanceContext


class FakeCandidateSource:
    """Candidate source returning a fixed version list and recording calls."""

    def __init__(self, versions: list[str] | None = None):
        self.versions = versions or []
        self.calls: list[str] = []
        self.sources: list[str | None] = []

    def list_versions(self, component_name: str, context: InstanceContext, source: str | None = None) -> list[str]:
        self.calls.append(component_name)
        self.sources.append(source)
        return self.versions


class FakeInstalledState:
    """Installed-state query backed by a dict."""

    def __init__(self, installed: dict[str, str] | None = None):
        self.installed = installed or {}

    def get_installed_version(self, component_name: str) -> str:
        return self.installed.get(component_name, "")


class FakeFileSystem:
    """In-memory filesystem; optionally fails every operation with make_error."""

    def __init__(self, make_error: OSError | None = None, list_error: OSError | None = None):
        self.make_error = make_error
        self.list_error = list_error
        self.dirs: set[Path] = set()
        self.files: dict[Path, list[str]] = {}

    def make_dirs(self, path: Path) -> None:
        if self.make_error is not None:
            raise self.make_error
        self.dirs.add(path)
        for parent in path.parents:
            self.dirs.add(parent)

    def exists(self, path: Path) -> bool:
        return path in self.dirs

    def list_dir(self, path: Path) -> list[str]:
        if self.list_error is not None:
            raise self.list_error
        children = [p.name for p in self.dirs if p.parent == path]
        return sorted(children + self.files.get(path, []))


@pytest.fixture
def install_request() -> ComponentRequest:
    # Large version number avoids clashing with real component releases
    return ComponentRequest(name="PVDriver", version="9000.0.0", action="Install")


@pytest.fixture
def context() -> InstanceContext:
    return InstanceContext(
        region="us-west-2",
        platform="windows",
        platform_version="2015.9",
        installer_name="Windows",
        arch="amd64",
        compress_format="zip",
    )


@pytest.fixture
def context_bjs() -> InstanceContext:
    return InstanceContext(
        region="cn-north-1",
        platform="windows",
        platform_version="2015.9",
        installer_name="Windows",
        arch="amd64",
        compress_format="zip",
    )
