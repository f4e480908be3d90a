# src/url_builder.py
"""Builders for URLs the controller hands to views and adapters."""

SECURE_SCHEME = "https://"
INSECURE_SCHEME = "http://"
CERT_PATH = "/cert"


def insecure_cert_url(api_server: str) -> str:
    """Return the plain-HTTP certificate download URL for a secure API base.

    The certificate has to be fetched before the browser trusts the API, so
    a leading "https://" becomes "http://" and "/cert" is appended to the
    whole base, query string included. The scheme match is case-sensitive
    and nothing after the scheme is rewritten.

    Example:
        insecure_cert_url("https://controller.example.com")
        # "http://controller.example.com/cert"
    """
    if api_server.startswith(SECURE_SCHEME):
        api_server = INSECURE_SCHEME + api_server.removeprefix(SECURE_SCHEME)
    return api_server + CERT_PATH


def api_url(api_server: str, path: str) -> str:
    """Join an API base URL and an absolute API path."""
    return api_server.rstrip("/") + path
