# src/session.py
"""Session state shared by the auth gate and the login flow."""

from dataclasses import dataclass

from utils import log_op


@dataclass
class SessionState:
    """Authentication state of the running dashboard.

    One instance per controller, injected into the gate and the handlers.
    Only establish() flips it to authenticated.
    """

    authenticated: bool = False
    token: str | None = None

    def establish(self, token: str) -> None:
        """Record a successful session exchange."""
        self.token = token
        self.authenticated = True
        log_op("session_established")

    @classmethod
    def from_bootstrap(cls, payload: dict | None) -> "SessionState":
        """Build the initial state from verified bootstrap data.

        A payload without a token yields an unauthenticated session.
        """
        if not payload:
            return cls()
        token = payload.get("token")
        if not token:
            return cls()
        return cls(authenticated=True, token=token)
