"""Tests for the route table and matcher."""

import dataclasses

import pytest

from route_table import (
    Route,
    RouteMatch,
    RoutePattern,
    RouteTable,
    create_default_routes,
    normalize_path,
)


class TestRoutePattern:
    """Tests for RoutePattern."""

    def test_strips_surrounding_slashes(self):
        """Leading and trailing slashes are not part of the literal."""
        assert RoutePattern("/login/").literal == "login"

    def test_root_literal_is_empty(self):
        assert RoutePattern("").literal == ""
        assert RoutePattern("/").literal == ""

    def test_matches_ignores_query_string(self):
        """Query strings never affect matching."""
        assert RoutePattern("login").matches("/login?token=abc")

    def test_no_prefix_matching(self):
        """Literal patterns do not match longer paths."""
        assert not RoutePattern("login").matches("/login/extra")
        assert not RoutePattern("").matches("/backup")

    def test_is_immutable(self):
        pattern = RoutePattern("login")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.literal = "other"


class TestRoute:
    """Tests for Route dataclass."""

    def test_requires_auth_by_default(self):
        """Routes are gated unless declared otherwise."""
        route = Route(path_pattern=RoutePattern("backup"), handler_name="backup")

        assert route.requires_auth is True

    def test_string_pattern_is_coerced(self):
        route = Route(path_pattern="login", handler_name="login")

        assert route.path_pattern == RoutePattern("login")

    def test_route_name_defaults_to_slash_path(self):
        assert Route(path_pattern="", handler_name="root").route_name == "/"
        assert Route(path_pattern="backup", handler_name="backup").route_name == "/backup"

    def test_custom_route_name(self):
        route = Route(path_pattern="backup", handler_name="backup", route_name="backup_view")

        assert route.route_name == "backup_view"


class TestRouteMatch:
    """Tests for RouteMatch."""

    def test_match_properties(self):
        """RouteMatch exposes route properties."""
        route = Route(path_pattern="login", handler_name="login", requires_auth=False)
        match = RouteMatch(route=route, path="login")

        assert match.handler_name == "login"
        assert match.requires_auth is False
        assert match.route_name == "/login"


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("", ""),
            ("/", ""),
            ("/backup", "backup"),
            ("backup/", "backup"),
            ("/login?redirect=%2Fapps", "login"),
            ("/installcert#top", "installcert"),
        ],
    )
    def test_normalize(self, path, expected):
        assert normalize_path(path) == expected


class TestRouteTable:
    """Tests for matching against the default table."""

    def setup_method(self):
        self.table = RouteTable(create_default_routes())

    def test_empty_path_matches_root(self):
        match = self.table.match("")

        assert match is not None
        assert match.handler_name == "root"

    def test_slash_matches_root(self):
        assert self.table.match("/").handler_name == "root"

    @pytest.mark.parametrize(
        ("path", "handler_name", "requires_auth"),
        [
            ("/backup", "backup", True),
            ("/login", "login", False),
            ("/installcert", "install_cert", False),
        ],
    )
    def test_default_routes(self, path, handler_name, requires_auth):
        match = self.table.match(path)

        assert match is not None
        assert match.handler_name == handler_name
        assert match.requires_auth is requires_auth

    def test_unknown_path_returns_none(self):
        """Paths outside the table are not matched."""
        assert self.table.match("/apps") is None
        assert self.table.match("/login/extra") is None

    def test_first_match_wins(self):
        table = RouteTable(
            [
                Route(path_pattern="login", handler_name="first"),
                Route(path_pattern="login", handler_name="second"),
            ]
        )

        assert table.match("/login").handler_name == "first"

    def test_match_records_normalized_path(self):
        assert self.table.match("/backup/?x=1").path == "backup"

    def test_routes_are_read_only(self):
        """The table keeps its own tuple of routes."""
        routes = create_default_routes()
        table = RouteTable(routes)
        routes.append(Route(path_pattern="extra", handler_name="extra"))

        assert table.match("/extra") is None
        assert isinstance(table.routes, tuple)

    def test_route_name_of_match(self):
        assert self.table.match("/login").route_name == "/login"
        assert self.table.match("/nope") is None
