# src/auth.py
"""Session bootstrap signing for the navigation controller.

The host hands the controller an HMAC-signed blob at startup so the
initial SessionState can be trusted without a network round trip.

Format: base64(json {"token", "exp"}).hex_sha256_signature
"""

import base64
import hashlib
import hmac
import json
import time

from session import SessionState
from utils import log_op, truncate_error

SESSION_TTL_SECONDS = 7 * 24 * 60 * 60  # 7 days


def _signature(body: str, secret: str) -> str:
    return hmac.new(secret.encode(), body.encode(), hashlib.sha256).hexdigest()


def create_session_bootstrap(
    token: str,
    secret: str,
    ttl_seconds: int = SESSION_TTL_SECONDS,
) -> str:
    """Create a signed bootstrap value for an established session.

    Args:
        token: The session token
        secret: The HMAC signing secret
        ttl_seconds: Session lifetime in seconds

    Returns:
        The signed bootstrap value.
    """
    claims = {"token": token, "exp": int(time.time()) + ttl_seconds}
    body = base64.urlsafe_b64encode(json.dumps(claims).encode()).decode()
    return f"{body}.{_signature(body, secret)}"


def read_session_bootstrap(bootstrap: str, secret: str) -> dict | None:
    """Return the claims of a bootstrap value, or None.

    None covers a bad signature, an undecodable body and an expired
    bootstrap.
    """
    body, _, signature = bootstrap.rpartition(".")
    expected = _signature(body, secret)
    if not body or not hmac.compare_digest(signature.encode(), expected.encode()):
        return None

    try:
        claims = json.loads(base64.urlsafe_b64decode(body))
    except ValueError as e:
        log_op(
            "session_verify_failed",
            error_type=type(e).__name__,
            error=truncate_error(e),
        )
        return None

    if not isinstance(claims, dict) or claims.get("exp", 0) < time.time():
        return None
    return claims


def restore_session(bootstrap: str | None, secret: str | None) -> SessionState:
    """Restore the initial session from a signed bootstrap value.

    Any missing secret, bad signature or expired payload yields an
    unauthenticated session.
    """
    if not bootstrap or not secret:
        return SessionState()
    claims = read_session_bootstrap(bootstrap, secret)
    if claims is None:
        log_op("session_bootstrap_rejected")
    return SessionState.from_bootstrap(claims)
