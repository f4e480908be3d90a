# src/models.py
"""Type definitions for the dashboard navigation controller."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Literal, Protocol

# =============================================================================
# Semantic Type Aliases
# =============================================================================

# Element 0 holds the path/query parameters of the current navigation
NavigationParams = list[dict[str, str | None]]

# Views the controller knows how to mount
ComponentName = Literal["login", "backup", "install_cert"]

LOGIN_VIEW: ComponentName = "login"
BACKUP_VIEW: ComponentName = "backup"
INSTALL_CERT_VIEW: ComponentName = "install_cert"


class LoginState(Enum):
    """States of the login flow.

    TOKEN_PENDING only ever transitions to INTERACTIVE, so a rejected
    token is retried at most once.
    """

    TOKEN_PENDING = auto()
    INTERACTIVE = auto()


class GateDecision(Enum):
    """Outcome of the authentication precondition check."""

    INVOKE = auto()
    REROUTE_LOGIN = auto()


class NavigationOutcome(str, Enum):
    """What the controller did with a path change."""

    DISPATCHED = "dispatched"
    REROUTED = "rerouted"
    NOT_FOUND = "not_found"


# =============================================================================
# Result Objects
# =============================================================================


@dataclass
class NavigationError:
    """Represents a recoverable failure at an async boundary.

    Attributes:
        error_type: Type of error (e.g., "CredentialRejected", "NetworkError")
        message: Human-readable error message
    """

    error_type: str
    message: str


@dataclass
class SessionExchangeResult:
    """Result of trading a one-time token for a session.

    Attributes:
        session_token: Token identifying the established session (if successful)
        error: Error information (if failed)
    """

    session_token: str | None = None
    error: NavigationError | None = None

    @property
    def success(self) -> bool:
        """Return True if the session was established."""
        return self.session_token is not None and self.error is None


@dataclass
class CertProbeResult:
    """Result of probing whether the trust certificate is installed.

    Attributes:
        installed: True when a secure request to the API succeeded
        error: Error information (if the probe failed)
    """

    installed: bool = False
    error: NavigationError | None = None


@dataclass
class LoginModel:
    """Pending credential for the login flow."""

    token: str | None = None


# =============================================================================
# Capabilities
# =============================================================================


class History(Protocol):
    """Location/history mechanism owned by the host."""

    def navigate(
        self,
        path: str,
        *,
        replace: bool = False,
        params: NavigationParams | None = None,
    ) -> None: ...


class ViewRegion(Protocol):
    """Output region the controller mounts views into."""

    def mount(self, component: ComponentName, props: dict[str, Any]) -> None: ...


class Transport(Protocol):
    """Answers whether the active connection is already secure."""

    def is_secure(self) -> bool: ...


class SessionExchanger(Protocol):
    """Trades a one-time token for an authenticated session."""

    async def exchange(self, token: str) -> SessionExchangeResult: ...


class CertProbe(Protocol):
    """Checks whether the trust certificate has been installed."""

    async def is_cert_installed(self) -> CertProbeResult: ...


class LoginCompletion(Protocol):
    """Handed to the login view.

    The view calls submit() with the token the user typed. On success
    the session is established and on_success() navigates away.
    """

    async def submit(self, token: str) -> bool: ...

    def on_success(self) -> None: ...


@dataclass(frozen=True, slots=True)
class StaticTransport:
    """Transport whose security is fixed by the page scheme."""

    scheme: str

    def is_secure(self) -> bool:
        return self.scheme.lower().rstrip(":") == "https"
