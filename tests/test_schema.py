"""Tests for request and context models."""

import pytest
from component_resolution import ComponentAction
from component_resolution import ComponentRequest
from component_resolution import InstanceContext
from pydantic import ValidationError


def test_request_defaults():
    """Test request defaults to installing latest."""
    request = ComponentRequest(name="PVDriver")

    assert request.version is None
    assert request.action == "Install"
    assert request.source is None
    assert request.wants_latest


def test_request_wants_latest():
    """Test empty or missing version means latest."""
    assert ComponentRequest(name="PVDriver", version="").wants_latest
    assert not ComponentRequest(name="PVDriver", version="1.0.0").wants_latest


def test_request_keeps_unknown_action():
    """Unknown actions are rejected by validate_request, not by the model."""
    request = ComponentRequest(name="PVDriver", action="InvalidAction")

    assert request.action == "InvalidAction"


def test_request_is_frozen():
    """Test request cannot be modified."""
    request = ComponentRequest(name="PVDriver")

    with pytest.raises(ValidationError):
        request.version = "1.0.0"  # type: ignore[misc]


def test_context_requires_location_fields():
    """Test context without arch or archive format is invalid."""
    with pytest.raises(ValidationError):
        InstanceContext(region="us-west-2", platform="windows")  # type: ignore[call-arg]


def test_action_values():
    """Test action enum values."""
    assert ComponentAction("Install") is ComponentAction.INSTALL
    assert ComponentAction("Uninstall") is ComponentAction.UNINSTALL
