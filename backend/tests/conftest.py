"""Pytest configuration and fixtures.

This module sets up test environment variables BEFORE any application
modules are imported, ensuring Settings and the issuer config are valid.
"""

import os

# Set test environment variables before any imports that might trigger Settings
# This runs at pytest collection time, before test modules are imported
os.environ.setdefault("APP_NAME", "video-token-server-test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("ACCOUNT_SID", "ACtest00000000000000000000000000")
os.environ.setdefault("TWILIO_API_KEY_SID", "SKtest00000000000000000000000000")
os.environ.setdefault("TWILIO_API_KEY_SECRET", "test-api-key-secret")
os.environ.setdefault("API_PASSCODE", "abc")
os.environ.setdefault("API_PASSCODE_EXPIRY", "4102444800000")  # 2100-01-01
os.environ.setdefault("DOMAIN_NAME", "video-app-1234-5678-dev.twil.io")
os.environ.setdefault("ROOM_TYPE", "group")
os.environ.setdefault("AWS_XRAY_CONTEXT_MISSING", "IGNORE_ERROR")

import pytest
from fastapi.testclient import TestClient

from issuer.config import IssuerConfig
from issuer.rooms import RoomCreationResult, RoomStatus

API_KEY_SECRET = "test-api-key-secret"
VALID_PASSCODE = "abc12345678"
FUTURE_EXPIRY_MS = 4102444800000


class FakeProvisioner:
    """Room provisioner returning a fixed result and recording calls."""

    def __init__(self, result: RoomCreationResult | None = None):
        self.result = result or RoomCreationResult(status=RoomStatus.CREATED, room_sid="RM123")
        self.calls: list[tuple[str, str]] = []

    def create_room(self, room_name: str, room_type: str) -> RoomCreationResult:
        self.calls.append((room_name, room_type))
        return self.result


@pytest.fixture
def issuer_config() -> IssuerConfig:
    """Configuration matching the test environment."""
    return IssuerConfig(
        account_sid="ACtest00000000000000000000000000",
        api_key_sid="SKtest00000000000000000000000000",
        api_key_secret=API_KEY_SECRET,
        api_passcode="abc",
        api_passcode_expiry=FUTURE_EXPIRY_MS,
        domain_name="video-app-1234-5678-dev.twil.io",
        room_type="group",
    )


@pytest.fixture
def provisioner() -> FakeProvisioner:
    return FakeProvisioner()


@pytest.fixture
def client(issuer_config, provisioner):
    """Create a test client with the issuer config and a fake provisioner."""
    # Import here to ensure env vars are set first
    from api.dependencies import get_issuer_config, get_room_provisioner
    from api.main import app

    app.dependency_overrides[get_issuer_config] = lambda: issuer_config
    app.dependency_overrides[get_room_provisioner] = lambda: provisioner

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
