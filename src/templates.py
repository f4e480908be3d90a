# src/templates.py
"""
View rendering for the navigation controller.

This module provides:
- A shared Jinja2 Environment for rendering views
- Embedded templates for the views the controller mounts
- HtmlViewRegion, a ViewRegion that renders mounted views to HTML
"""

from collections.abc import Callable
from typing import Any

from jinja2 import BaseLoader, Environment, TemplateNotFound

from models import ComponentName
from utils import log_op

# =============================================================================
# Embedded Templates
# =============================================================================

_EMBEDDED_TEMPLATES = {
    "login.html": """<section class="panel login">
    <h1>Log in</h1>
    <form method="POST" data-submit="completion">
        <input type="password" name="token" placeholder="Login token" aria-label="Login token">
        <button type="submit">Log in</button>
    </form>
</section>""",
    "backup.html": """<section class="panel backup">
    <h1>Backup</h1>
    <p>Download a backup of the cluster state.</p>
</section>""",
    "install_cert.html": """<form method="POST" data-submit="on_submit">
    <section class="panel">
        <h1>Install certificate</h1>
        <p>
            The dashboard is being served over an insecure connection.
            <a href="{{ cert_url }}">Download the CA certificate</a>, install it, then continue.
        </p>
        <button type="submit">Continue</button>
    </section>
</form>""",
}

# =============================================================================
# Template Names Constants
# =============================================================================

TEMPLATE_FOR_VIEW: dict[str, str] = {
    "login": "login.html",
    "backup": "backup.html",
    "install_cert": "install_cert.html",
}


# =============================================================================
# Template Loader
# =============================================================================


class DictLoader(BaseLoader):
    """Load templates from a dictionary."""

    def __init__(self, templates: dict[str, str]):
        self.templates = templates

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str, Callable[[], bool]]:
        if template not in self.templates:
            raise TemplateNotFound(template)
        return self.templates[template], template, lambda: True


# =============================================================================
# Shared Jinja2 Environment
# =============================================================================

_jinja_env: Environment | None = None


def _create_environment(loader: BaseLoader | None = None) -> Environment:
    """Create a Jinja2 environment with appropriate settings."""
    if loader is None:
        loader = DictLoader(_EMBEDDED_TEMPLATES)

    return Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment."""
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = _create_environment()
    return _jinja_env


def reset_jinja_env() -> None:
    """Reset the shared Jinja2 environment (for testing)."""
    global _jinja_env
    _jinja_env = None


def render_template(template_name: str, **context: Any) -> str:
    """Render a template with the given context."""
    env = get_jinja_env()
    template = env.get_template(template_name)
    return template.render(**context)


# =============================================================================
# View Region
# =============================================================================


class HtmlViewRegion:
    """Output region that renders the mounted view to an HTML string.

    Mounting replaces whatever was mounted before. Callables in props
    (completions, submit actions) are kept on the region for the host to
    wire up; only plain values reach the template. A form's data-submit
    attribute names the prop its submission goes to: the login form's
    token field is passed to props["completion"].submit().
    """

    def __init__(self) -> None:
        self.component: ComponentName | None = None
        self.props: dict[str, Any] = {}
        self.html: str = ""

    def mount(self, component: ComponentName, props: dict[str, Any]) -> None:
        context = {
            key: value
            for key, value in props.items()
            if isinstance(value, (str, int, float, bool)) or value is None
        }
        self.html = render_template(TEMPLATE_FOR_VIEW[component], **context)
        self.component = component
        self.props = props
        log_op("view_mounted", component=component)
