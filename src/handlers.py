# src/handlers.py
"""Navigation handlers for the dashboard routes.

This module provides the handlers the route table points at:
- root: strips the one-time token and forwards to the default screen
- backup: mounts the backup view
- login: token exchange, redirect sanitation, fallback to the login form
- install_cert: certificate bootstrap before login on insecure transport

Handlers receive the navigation params and act only through the injected
capabilities (history, view region, session exchanger, certificate probe).
"""

from dataclasses import dataclass
from urllib.parse import unquote

from auth_gate import LOGIN_PATH
from models import (
    BACKUP_VIEW,
    INSTALL_CERT_VIEW,
    LOGIN_VIEW,
    CertProbe,
    History,
    LoginCompletion,
    LoginModel,
    LoginState,
    NavigationParams,
    SessionExchanger,
    Transport,
    ViewRegion,
)
from session import SessionState
from url_builder import insecure_cert_url
from utils import copy_params, first_params, log_error, log_op, redact_params

ROOT_PATH = ""


def sanitize_redirect(redirect: str | None) -> str:
    """Return the redirect target, or "" if absent or unsafe.

    Only the literal "//" is rejected. Encoded or backslash variants
    pass through unchanged.
    """
    if redirect and "//" in redirect:
        log_op("redirect_rejected")
        return ""
    return redirect or ""


async def establish_session(
    exchanger: SessionExchanger, session: SessionState, token: str
) -> bool:
    """Exchange a token and establish the session on success.

    A raising exchanger counts as a failed exchange.
    """
    try:
        result = await exchanger.exchange(token)
    except Exception as e:
        log_error("session_exchange_error", e)
        return False

    if not result.success:
        log_op(
            "session_exchange_failed",
            error_type=result.error.error_type if result.error else None,
        )
        return False

    session.establish(result.session_token)
    return True


@dataclass
class RedirectCompletion:
    """Login completion that navigates to the sanitized redirect target.

    The login view calls submit() with the token typed into the form.
    The redirect only happens once the session is established, so the
    auth gate lets the user through.
    """

    history: History
    redirect: str
    session: SessionState
    exchanger: SessionExchanger

    @property
    def target(self) -> str:
        return unquote(self.redirect)

    async def submit(self, token: str) -> bool:
        if not token or not await establish_session(self.exchanger, self.session, token):
            return False
        self.on_success()
        return True

    def on_success(self) -> None:
        self.history.navigate(self.target)


@dataclass
class CertSubmitAction:
    """Submit action of the install-cert view.

    May be submitted any number of times; each submission checks once.
    """

    probe: CertProbe
    history: History
    params: NavigationParams

    async def submit(self) -> bool:
        """Check for the certificate and continue to login when installed."""
        try:
            result = await self.probe.is_cert_installed()
        except Exception as e:
            log_error("cert_check_error", e)
            return False

        if not result.installed:
            log_op(
                "cert_probe_failed",
                error_type=result.error.error_type if result.error else None,
            )
            return False
        self.history.navigate(LOGIN_PATH, params=self.params)
        return True


class NavigationHandlers:
    """Handlers referenced by name from the route table."""

    def __init__(
        self,
        session: SessionState,
        history: History,
        region: ViewRegion,
        exchanger: SessionExchanger,
        probe: CertProbe,
        transport: Transport,
        api_server: str,
        default_screen: str = "/apps",
    ):
        self.session = session
        self.history = history
        self.region = region
        self.exchanger = exchanger
        self.probe = probe
        self.transport = transport
        self.api_server = api_server
        self.default_screen = default_screen
        self.login_model = LoginModel()

    async def root(self, params: NavigationParams) -> None:
        """Drop the one-time token and replace the location with the default screen."""
        first_params(params).pop("token", None)
        self.history.navigate(self.default_screen, replace=True, params=params)

    async def backup(self, params: NavigationParams) -> None:
        self.region.mount(BACKUP_VIEW, {})

    async def login(self, params: NavigationParams) -> None:
        """Acquire a session, then send the user to the requested page.

        With a token in params the token is exchanged first. A rejected
        token moves the flow to the interactive login form, never back
        to another exchange.
        """
        params = copy_params(params)
        completion: LoginCompletion = RedirectCompletion(
            self.history,
            sanitize_redirect(params[0].get("redirect")),
            self.session,
            self.exchanger,
        )

        if self.session.authenticated:
            completion.on_success()
            return

        token = params[0].get("token")
        state = LoginState.TOKEN_PENDING if token else LoginState.INTERACTIVE

        if state is LoginState.TOKEN_PENDING:
            self.login_model.token = token
            if await establish_session(self.exchanger, self.session, token):
                completion.on_success()
                return
            self.login_model.token = None
            params[0]["token"] = None
            state = LoginState.INTERACTIVE

        if state is LoginState.INTERACTIVE:
            log_op("login_form_mounted", retried=bool(token), params=redact_params(params))
            self.region.mount(LOGIN_VIEW, {"completion": completion})

    async def install_cert(self, params: NavigationParams) -> None:
        """Require a trusted certificate before login on insecure transport."""
        if self.transport.is_secure():
            self.history.navigate(ROOT_PATH, params=params)
            return

        action = CertSubmitAction(self.probe, self.history, params)
        self.region.mount(
            INSTALL_CERT_VIEW,
            {
                "cert_url": insecure_cert_url(self.api_server),
                "on_submit": action.submit,
            },
        )
