# src/route_table.py
"""Route table for dashboard navigation.

This module provides the fixed route table and its matcher:
- Route definitions with a typed path pattern, handler name and auth flag
- Literal path matching (no wildcards), with the empty path as the root
- Route metadata for logging

Usage:
    table = RouteTable(create_default_routes())
    match = table.match("/login?redirect=%2Fapps")

    if match:
        handler = getattr(handlers, match.handler_name)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A path literal such as "backup" or "" (the root).

    Surrounding slashes are not significant: "/login/" and "login" are the
    same pattern.
    """

    literal: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "literal", normalize_path(self.literal))

    def matches(self, path: str) -> bool:
        """Return True if the normalized path equals this literal."""
        return normalize_path(path) == self.literal

    def __str__(self) -> str:
        return self.literal


@dataclass(frozen=True)
class Route:
    """Definition of a route.

    Attributes:
        path_pattern: Path literal this route answers to
        handler_name: Name of the navigation handler to invoke
        requires_auth: Whether the handler may only run with an authenticated session
        route_name: Name for the route (for logging), defaults to "/" + pattern
    """

    path_pattern: RoutePattern
    handler_name: str
    requires_auth: bool = True
    route_name: str = field(default="")

    def __post_init__(self) -> None:
        """Coerce plain strings and set the default route name."""
        if isinstance(self.path_pattern, str):
            object.__setattr__(self, "path_pattern", RoutePattern(self.path_pattern))
        if not self.route_name:
            object.__setattr__(self, "route_name", f"/{self.path_pattern.literal}")


@dataclass
class RouteMatch:
    """Result of a route match.

    Attributes:
        route: The matched route
        path: The normalized path that matched
    """

    route: Route
    path: str = ""

    @property
    def handler_name(self) -> str:
        """Get the handler name for this route."""
        return self.route.handler_name

    @property
    def requires_auth(self) -> bool:
        """Get whether this route requires authentication."""
        return self.route.requires_auth

    @property
    def route_name(self) -> str:
        """Get the route name for logging."""
        return self.route.route_name


def normalize_path(path: str) -> str:
    """Strip query string, fragment and surrounding slashes from a path."""
    path = path.split("#", 1)[0].split("?", 1)[0]
    return path.strip("/")


class RouteTable:
    """Matches location paths against a static list of routes.

    Built once at startup; never mutated afterwards.
    """

    def __init__(self, routes: list[Route]):
        self._routes: tuple[Route, ...] = tuple(routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def match(self, path: str) -> RouteMatch | None:
        """Match a path against the routes.

        Args:
            path: Location path, optionally with a query string

        Returns:
            RouteMatch for the first matching route, None otherwise
        """
        normalized = normalize_path(path)
        for route in self._routes:
            if route.path_pattern.matches(normalized):
                return RouteMatch(route=route, path=normalized)
        return None


def create_default_routes() -> list[Route]:
    """Create the fixed dashboard route table.

    Returns:
        List of Route definitions
    """
    return [
        Route(path_pattern=RoutePattern(""), handler_name="root"),
        Route(path_pattern=RoutePattern("backup"), handler_name="backup"),
        # Reachable before a session exists
        Route(path_pattern=RoutePattern("login"), handler_name="login", requires_auth=False),
        Route(
            path_pattern=RoutePattern("installcert"),
            handler_name="install_cert",
            requires_auth=False,
        ),
    ]
