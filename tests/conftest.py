# tests/conftest.py
"""Shared fixtures for navigation controller tests."""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Shared Test Constants
# =============================================================================

TEST_SESSION_SECRET = "test-secret-key-for-testing-only-32chars"  # pragma: allowlist secret
TEST_API_SERVER = "https://controller.example.com"

# Add src directory to path so modules import the same way the host loads them
_root_path = Path(__file__).parent.parent
for _path in (str(_root_path / "src"), str(_root_path)):
    if _path not in sys.path:
        sys.path.insert(0, _path)

from auth_gate import AuthGate  # noqa: E402
from controller import NavigationController  # noqa: E402
from handlers import NavigationHandlers  # noqa: E402
from models import StaticTransport  # noqa: E402
from route_table import RouteTable, create_default_routes  # noqa: E402
from session import SessionState  # noqa: E402
from tests.mocks import (  # noqa: E402
    FakeExchanger,
    FakeProbe,
    RecordingHistory,
    RecordingViewRegion,
)


class MockEnv:
    """Mock host environment; unknown attributes read as None."""

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __getattr__(self, name):
        return None


# =============================================================================
# Capability Fixtures
# =============================================================================


@pytest.fixture
def session():
    return SessionState()


@pytest.fixture
def authenticated_session():
    return SessionState(authenticated=True, token="existing-session")


@pytest.fixture
def history():
    return RecordingHistory()


@pytest.fixture
def region():
    return RecordingViewRegion()


@pytest.fixture
def exchanger():
    return FakeExchanger()


@pytest.fixture
def probe():
    return FakeProbe()


@pytest.fixture
def insecure_transport():
    return StaticTransport("http")


@pytest.fixture
def secure_transport():
    return StaticTransport("https")


def build_handlers(session, history, region, exchanger, probe, transport):
    return NavigationHandlers(
        session=session,
        history=history,
        region=region,
        exchanger=exchanger,
        probe=probe,
        transport=transport,
        api_server=TEST_API_SERVER,
    )


@pytest.fixture
def handlers(session, history, region, exchanger, probe, insecure_transport):
    return build_handlers(session, history, region, exchanger, probe, insecure_transport)


@pytest.fixture
def controller(session, history, handlers):
    return NavigationController(
        routes=RouteTable(create_default_routes()),
        session=session,
        gate=AuthGate(session, history),
        handlers=handlers,
        sample_rate=0.0,
    )
