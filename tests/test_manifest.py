"""Tests for the manifest candidate source (HTTP faked via injected session)."""

import pytest
import requests
from component_resolution import ComponentManifest
from component_resolution import ManifestError
from component_resolution import ManifestVersionSource


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text!r}")
        return self.payload


class FakeSession:
    """Records requested URLs and replies with a canned response or error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_list_versions(context):
    """Test versions are read from the manifest at the standard endpoint."""
    session = FakeSession(FakeResponse({"name": "PVDriver", "versions": ["1.0.0", "10.0.0", "garbage"]}))
    source = ManifestVersionSource(session=session, timeout=5)

    versions = source.list_versions("PVDriver", context)

    # Returned as published; filtering happens in select_latest
    assert versions == ["1.0.0", "10.0.0", "garbage"]
    assert session.requests == [
        ("https://s3.us-west-2.amazonaws.com/amazon-ssm-us-west-2/Components/PVDriver/windows/amd64/PVDriver.json", 5)
    ]


def test_list_versions_restricted_partition(context_bjs):
    """Test manifest is fetched from the restricted partition endpoint."""
    session = FakeSession(FakeResponse({"name": "PVDriver", "versions": []}))

    assert ManifestVersionSource(session=session).list_versions("PVDriver", context_bjs) == []
    assert session.requests[0][0].startswith("https://s3.cn-north-1.amazonaws.com.cn/amazon-ssm-cn-north-1/")


def test_manifest_ignores_unknown_fields():
    """Test extra manifest keys are ignored."""
    manifest = ComponentManifest.model_validate({"name": "PVDriver", "versions": ["1.0.0"], "publisher": "x"})

    assert manifest.versions == ["1.0.0"]


def test_http_error(context):
    """Test HTTP error status raises ManifestError."""
    source = ManifestVersionSource(session=FakeSession(FakeResponse(status_code=404)))

    with pytest.raises(ManifestError, match="Failed to fetch manifest") as exc_info:
        source.list_versions("PVDriver", context)

    assert isinstance(exc_info.value.__cause__, requests.HTTPError)
    assert exc_info.value.context["url"].endswith("/PVDriver.json")


def test_connection_error(context):
    """Test transport failure raises ManifestError."""
    source = ManifestVersionSource(session=FakeSession(error=requests.ConnectionError("unreachable")))

    with pytest.raises(ManifestError, match="unreachable"):
        source.list_versions("PVDriver", context)


def test_invalid_json(context):
    """Test non-JSON body raises ManifestError."""
    source = ManifestVersionSource(session=FakeSession(FakeResponse(text="<html>")))

    with pytest.raises(ManifestError, match="not valid JSON"):
        source.list_versions("PVDriver", context)


def test_invalid_manifest_shape(context):
    """Test manifest without a name raises ManifestError."""
    source = ManifestVersionSource(session=FakeSession(FakeResponse({"versions": "1.0.0"})))

    with pytest.raises(ManifestError, match="Invalid manifest"):
        source.list_versions("PVDriver", context)


def test_list_versions_from_explicit_source(context):
    """Test manifest is read from beside an explicit source, not from the default endpoint."""
    session = FakeSession(FakeResponse({"name": "PVDriver", "versions": ["4.0.0"]}))
    source = ManifestVersionSource(session=session, timeout=5)

    versions = source.list_versions("PVDriver", context, source="https://mirror.example/pkgs/PVDriver.zip")

    assert versions == ["4.0.0"]
    assert session.requests == [("https://mirror.example/pkgs/PVDriver.json", 5)]
