# src/cert_probe.py
"""Certificate trust probe.

A verified HTTPS request to the API only succeeds once the controller's
certificate is trusted, so any HTTP response counts as "installed".
"""

from http_client import http_fetch
from models import CertProbeResult, NavigationError
from url_builder import api_url
from utils import truncate_error


class HttpCertProbe:
    """Probes the secure API base to detect an installed certificate.

    Attributes:
        api_server: Secure API base URL
        probe_path: API path requested by the probe
    """

    def __init__(
        self,
        api_server: str,
        probe_path: str = "/ping",
        user_agent: str = "DashboardNav/1.0",
        timeout_seconds: int = 30,
    ):
        self.api_server = api_server
        self.probe_path = probe_path
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds

    async def is_cert_installed(self) -> CertProbeResult:
        """Return whether a secure request to the API succeeds."""
        try:
            await http_fetch(
                api_url(self.api_server, self.probe_path),
                headers={"User-Agent": self.user_agent},
                timeout_seconds=self.timeout_seconds,
            )
        except Exception as e:
            return CertProbeResult(
                installed=False,
                error=NavigationError(
                    error_type=type(e).__name__,
                    message=truncate_error(e),
                ),
            )
        return CertProbeResult(installed=True)
