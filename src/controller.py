# src/controller.py
"""
Dashboard navigation controller.

Entry point the host calls whenever the location changes:
- match the path against the fixed route table
- enforce the route's authentication requirement
- run the matched handler (root, backup, login, install_cert)

Usage:
    controller = create_controller(env, history, region, StaticTransport("http"))
    await controller.handle("/login?token=abc")
"""

from typing import Any
from urllib.parse import parse_qsl, urlsplit

from auth import restore_session
from auth_gate import AuthGate, Handler
from cert_probe import HttpCertProbe
from config import (
    get_api_server,
    get_cert_probe_path,
    get_default_screen,
    get_http_timeout,
    get_session_bootstrap,
    get_user_agent,
)
from handlers import NavigationHandlers
from models import (
    GateDecision,
    History,
    NavigationOutcome,
    NavigationParams,
    Transport,
    ViewRegion,
)
from observability import NavigationEvent, Timer, emit_event
from route_table import RouteTable, create_default_routes
from session import SessionState
from session_exchange import HttpSessionExchanger
from utils import log_error, log_op, truncate_error


def params_from_path(path: str) -> NavigationParams:
    """Build navigation params from the query string of a location path."""
    query = urlsplit(path).query
    return [dict(parse_qsl(query, keep_blank_values=True))]


class NavigationController:
    """Routes location changes to handlers behind the auth gate."""

    def __init__(
        self,
        routes: RouteTable,
        session: SessionState,
        gate: AuthGate,
        handlers: NavigationHandlers,
        sample_rate: float = 0.10,
    ):
        self.routes = routes
        self.session = session
        self.gate = gate
        self.handlers = handlers
        self.sample_rate = sample_rate

    def _resolve_handler(self, handler_name: str) -> Handler:
        handler = getattr(self.handlers, handler_name, None)
        if handler is None:
            raise LookupError(f"No navigation handler named {handler_name!r}")
        return handler

    async def handle(
        self, path: str, params: NavigationParams | None = None
    ) -> NavigationOutcome:
        """Handle a location change.

        Args:
            path: New location path, optionally with a query string
            params: Navigation params; parsed from the query string if omitted

        Returns:
            What was done with the navigation
        """
        if params is None:
            params = params_from_path(path)
        query = params[0] if params else {}

        event = NavigationEvent(
            path=urlsplit(path).path,
            authenticated=self.session.authenticated,
            token_present=bool(query.get("token")),
            redirect_present=bool(query.get("redirect")),
        )

        with Timer() as timer:
            match = self.routes.match(path)
            if match is None:
                log_op("route_not_found", path=event.path)
                event.outcome = NavigationOutcome.NOT_FOUND.value
                event.wall_time_ms = timer.elapsed()
                emit_event(event, sample_rate=self.sample_rate)
                return NavigationOutcome.NOT_FOUND

            event.route_name = match.route_name
            event.handler = match.handler_name
            event.requires_auth = match.requires_auth

            try:
                handler = self._resolve_handler(match.handler_name)
                decision = await self.gate.dispatch(match, params, handler)
            except Exception as e:
                log_error("navigation_error", e, route=match.route_name)
                event.outcome = "error"
                event.error_type = type(e).__name__
                event.error_message = truncate_error(e)
                event.wall_time_ms = timer.elapsed()
                emit_event(event, sample_rate=self.sample_rate)
                raise

        if decision is GateDecision.REROUTE_LOGIN:
            outcome = NavigationOutcome.REROUTED
        else:
            outcome = NavigationOutcome.DISPATCHED
        event.outcome = outcome.value
        event.wall_time_ms = timer.elapsed()
        emit_event(event, sample_rate=self.sample_rate)
        return outcome


def create_controller(
    env: Any,
    history: History,
    region: ViewRegion,
    transport: Transport,
) -> NavigationController:
    """Wire a controller from host configuration.

    Args:
        env: Host environment object (attributes read by config getters)
        history: Location/history capability
        region: View region to mount views into
        transport: Reports whether the page was served securely

    Returns:
        A ready NavigationController
    """
    bootstrap, secret = get_session_bootstrap(env)
    session = restore_session(bootstrap, secret)

    api_server = get_api_server(env)
    timeout = get_http_timeout(env)
    user_agent = get_user_agent(env)

    handlers = NavigationHandlers(
        session=session,
        history=history,
        region=region,
        exchanger=HttpSessionExchanger(api_server, user_agent, timeout),
        probe=HttpCertProbe(api_server, get_cert_probe_path(env), user_agent, timeout),
        transport=transport,
        api_server=api_server,
        default_screen=get_default_screen(env),
    )
    return NavigationController(
        routes=RouteTable(create_default_routes()),
        session=session,
        gate=AuthGate(session, history),
        handlers=handlers,
    )
