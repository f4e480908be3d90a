# src/session_exchange.py
"""Session exchange against the controller API.

This module provides the HttpSessionExchanger class that trades a
one-time login token for an authenticated session:
- Input validation
- Session creation request
- Error handling mapped to result objects (never raises)

Usage:
    exchanger = HttpSessionExchanger(api_server="https://controller.example.com")

    result = await exchanger.exchange(token)
    if result.success:
        session.establish(result.session_token)
"""

from http_client import http_fetch
from models import NavigationError, SessionExchangeResult
from url_builder import api_url
from utils import truncate_error


class HttpSessionExchanger:
    """Exchanges login tokens for sessions over HTTPS.

    Attributes:
        api_server: Secure API base URL
        user_agent: User agent string for API requests
        timeout_seconds: Request timeout
    """

    SESSIONS_PATH = "/user/sessions"

    def __init__(
        self,
        api_server: str,
        user_agent: str = "DashboardNav/1.0",
        timeout_seconds: int = 30,
    ):
        self.api_server = api_server
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds

    async def exchange(self, token: str) -> SessionExchangeResult:
        """Exchange a one-time token for a session.

        Args:
            token: One-time login token from the navigation params

        Returns:
            SessionExchangeResult with the session token or error
        """
        if not token:
            return SessionExchangeResult(
                error=NavigationError(
                    error_type="ValidationError",
                    message="Missing login token",
                )
            )

        try:
            response = await http_fetch(
                api_url(self.api_server, self.SESSIONS_PATH),
                method="POST",
                json_body={"token": token},
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.user_agent,
                },
                timeout_seconds=self.timeout_seconds,
            )
        except Exception as e:
            return SessionExchangeResult(
                error=NavigationError(
                    error_type="NetworkError",
                    message=f"Failed to reach controller: {truncate_error(e)}",
                )
            )

        if response.status_code not in (200, 201):
            return SessionExchangeResult(
                error=NavigationError(
                    error_type="CredentialRejected",
                    message=f"Session exchange failed with status {response.status_code}",
                )
            )

        try:
            body = response.json()
        except ValueError:
            body = {}

        session_token = body.get("id") if isinstance(body, dict) else None
        return SessionExchangeResult(session_token=session_token or token)
