# src/config.py
"""Configuration management for the navigation controller.

Environment-based configuration with type-safe getters and defaults.
These functions take an env object and return configuration values.
"""

from typing import Any

from utils import log_op

# =============================================================================
# Constants
# =============================================================================

DEFAULT_API_SERVER = "https://controller.localhost"
DEFAULT_SCREEN = "/apps"
DEFAULT_CERT_PROBE_PATH = "/ping"
HTTP_TIMEOUT_SECONDS = 30  # Session exchange and cert probe timeout

USER_AGENT = "DashboardNav/1.0"


# =============================================================================
# Configuration Getters
# =============================================================================


def get_config_value(
    env: Any,
    env_key: str,
    default: int | float,
    value_type: type[int] | type[float] = int,
) -> int | float:
    """Get a numeric configuration value from environment with type conversion.

    Args:
        env: The host environment object
        env_key: The environment variable name
        default: Default value if not set or on error
        value_type: Type to convert to (int or float)

    Returns:
        The configured value or default.
    """
    try:
        value = getattr(env, env_key, None)
        return value_type(value) if value else default
    except (ValueError, TypeError) as e:
        log_op(
            "config_validation_error",
            config_key=env_key,
            error=str(e),
        )
        return default


def get_str_config(env: Any, env_key: str, default: str) -> str:
    """Get a string configuration value, falling back on empty values."""
    return getattr(env, env_key, None) or default


def get_api_server(env: Any) -> str:
    """Get the secure API base URL (must use https)."""
    api_server = get_str_config(env, "API_SERVER", DEFAULT_API_SERVER).rstrip("/")
    if not api_server.startswith("https://"):
        log_op("config_validation_error", config_key="API_SERVER", error="not an https URL")
    return api_server


def get_default_screen(env: Any) -> str:
    """Get the path the root route forwards to."""
    return get_str_config(env, "DEFAULT_SCREEN", DEFAULT_SCREEN)


def get_cert_probe_path(env: Any) -> str:
    """Get the API path requested to check certificate trust."""
    path = get_str_config(env, "CERT_PROBE_PATH", DEFAULT_CERT_PROBE_PATH)
    return path if path.startswith("/") else f"/{path}"


def get_http_timeout(env: Any) -> int:
    """Get HTTP request timeout in seconds."""
    return int(get_config_value(env, "HTTP_TIMEOUT", HTTP_TIMEOUT_SECONDS))


def get_user_agent(env: Any) -> str:
    return get_str_config(env, "USER_AGENT", USER_AGENT)


def get_session_bootstrap(env: Any) -> tuple[str | None, str | None]:
    """Get the signed session bootstrap value and its signing secret."""
    return getattr(env, "SESSION_BOOTSTRAP", None), getattr(env, "SESSION_SECRET", None)
