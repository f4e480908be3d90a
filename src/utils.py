# src/utils.py
"""Utility functions for the dashboard navigation controller.

Standalone helpers for structured logging and params handling.
These have no dependencies on the controller or handlers.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from models import NavigationParams

# =============================================================================
# Type Aliases
# =============================================================================

#: Logging kwargs - intentionally accepts any JSON-serializable values
LogKwargs = Any

# =============================================================================
# Constants
# =============================================================================

# Standardized error message truncation length
ERROR_MESSAGE_MAX_LENGTH = 200

# Params keys that must never appear in logs
SENSITIVE_PARAM_KEYS = frozenset({"token"})

# =============================================================================
# Structured Logging
# =============================================================================

_logger = logging.getLogger("navigation")
if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(_handler)
    _logger.setLevel(logging.INFO)
    # Note: propagate defaults to True, needed for test caplog capture


def get_iso_timestamp() -> str:
    """Get current UTC time as ISO string with Z suffix (RFC3339)."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def log_op(event_type: str, **kwargs: LogKwargs) -> None:
    """Log an operational event as structured JSON.

    Unlike wide events (NavigationEvent), these are simpler operational
    logs for debugging individual steps of a navigation.
    """
    event = {
        "event_type": event_type,
        "timestamp": get_iso_timestamp(),
        **kwargs,
    }
    _logger.info(json.dumps(event))


def truncate_error(error: str | Exception, max_length: int = ERROR_MESSAGE_MAX_LENGTH) -> str:
    """Truncate error message with indicator if needed.

    Unlike plain slicing, this adds an ellipsis indicator when truncation occurs,
    making it clear to readers that the message was cut off.
    """
    error_str = str(error)
    if len(error_str) <= max_length:
        return error_str
    return error_str[: max_length - 3] + "..."


def log_error(event_type: str, exception: Exception, **kwargs: LogKwargs) -> None:
    """Log an error event with standardized exception formatting."""
    event = {
        "event_type": event_type,
        "timestamp": get_iso_timestamp(),
        "error_type": type(exception).__name__,
        "error": truncate_error(exception),
        **kwargs,
    }
    _logger.error(json.dumps(event))


# =============================================================================
# Params Helpers
# =============================================================================


def first_params(params: NavigationParams) -> dict[str, str | None]:
    """Return the path/query mapping of a navigation, adding one if missing.

    By convention element 0 holds the parameters for the current navigation.
    """
    if not params:
        params.append({})
    return params[0]


def copy_params(params: NavigationParams | None) -> NavigationParams:
    """Shallow-copy each mapping so handlers can rewrite fields safely."""
    if not params:
        return [{}]
    return [dict(entry) for entry in params]


def redact_params(params: NavigationParams | None) -> dict[str, str | None]:
    """Return params[0] with sensitive values masked, for logging."""
    if not params:
        return {}
    return {
        key: ("***" if key in SENSITIVE_PARAM_KEYS and value else value)
        for key, value in params[0].items()
    }
