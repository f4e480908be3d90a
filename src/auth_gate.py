# src/auth_gate.py
"""Authentication precondition for routed handlers.

Every navigation passes through AuthGate.dispatch(). Routes that require
authentication only run while the session is authenticated; otherwise the
gate replaces the current location with the login route and carries the
attempted destination along as a percent-encoded ``redirect`` parameter.
"""

from collections.abc import Awaitable, Callable
from urllib.parse import quote

from models import GateDecision, History, NavigationParams
from route_table import Route, RouteMatch
from session import SessionState
from utils import copy_params, log_op

LOGIN_PATH = "/login"

Handler = Callable[[NavigationParams], Awaitable[None]]


class AuthGate:
    """Enforces the per-route authentication requirement."""

    def __init__(self, session: SessionState, history: History):
        self.session = session
        self.history = history

    def check(self, route: Route) -> GateDecision:
        """Decide whether a route's handler may run now."""
        if not route.requires_auth:
            return GateDecision.INVOKE
        if self.session.authenticated:
            return GateDecision.INVOKE
        return GateDecision.REROUTE_LOGIN

    async def dispatch(
        self,
        match: RouteMatch,
        params: NavigationParams,
        handler: Handler,
    ) -> GateDecision:
        """Invoke the handler or reroute to login.

        Args:
            match: The matched route and normalized path
            params: Params of the current navigation
            handler: Handler bound to the matched route

        Returns:
            The decision that was applied
        """
        decision = self.check(match.route)
        if decision is GateDecision.INVOKE:
            await handler(params)
            return decision

        login_params = copy_params(params)
        login_params[0]["redirect"] = quote(f"/{match.path}", safe="")
        log_op("auth_required", route=match.route_name)
        self.history.navigate(LOGIN_PATH, replace=True, params=login_params)
        return decision
