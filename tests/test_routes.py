"""Tests for path resolution."""

import pytest

from webdocs.client import ResourceKey
from webdocs.core.artifacts import Link
from webdocs.core.routes import RouteResolver
from webdocs.errors import ResolutionError, UnknownRouteError


@pytest.fixture
def resolver() -> RouteResolver:
    return RouteResolver()


class TestResolve:
    """Paths map to resource keys with verbatim parameters."""

    @pytest.mark.parametrize(
        ("path", "endpoint", "params"),
        [
            ("/list", "/api/list", ()),
            ("/docs", "/api/docs", ()),
            ("/type/Integer", "/api/type/{name}", (("name", "Integer"),)),
            ("/class/Number", "/api/class/{name}", (("name", "Number"),)),
            ("/typeinfer/prog", "/api/typeinfer/{prgmName}", (("prgmName", "prog"),)),
            ("/debug/prog/main", "/api/debug/{prgmName}/{fun}", (("prgmName", "prog"), ("fun", "main"))),
            ("/build/prog/main", "/api/build/{prgmName}/{fun}", (("prgmName", "prog"), ("fun", "main"))),
        ],
    )
    def test_known_paths(self, resolver: RouteResolver, path: str, endpoint: str, params: tuple) -> None:
        route = resolver.resolve(path)
        assert route.key == ResourceKey(endpoint, params)

    def test_trailing_slash_is_ignored(self, resolver: RouteResolver) -> None:
        assert resolver.resolve("/class/Foo/").key == resolver.resolve("/class/Foo").key

    def test_parameter_values_are_not_decoded(self, resolver: RouteResolver) -> None:
        route = resolver.resolve("/type/a%20b")
        assert route.key.param("name") == "a%20b"

    def test_context_carries_params(self, resolver: RouteResolver) -> None:
        ctx = resolver.resolve("/debug/prog/main").context("/debug/prog/main")
        assert ctx.route == "debug"
        assert ctx["prgmName"] == "prog"
        assert ctx["fun"] == "main"


class TestResolutionErrors:
    """Structurally incomplete paths are errors, never empty fetches."""

    @pytest.mark.parametrize("path", ["/type", "/type/", "/class", "/typeinfer", "/debug/prog", "/build//main"])
    def test_missing_parameter(self, resolver: RouteResolver, path: str) -> None:
        with pytest.raises(ResolutionError, match="missing required parameter"):
            resolver.resolve(path)

    @pytest.mark.parametrize("path", ["/", "/nowhere", "/list/extra"])
    def test_unknown_route(self, resolver: RouteResolver, path: str) -> None:
        with pytest.raises(UnknownRouteError):
            resolver.resolve(path)

    def test_route_name_ignores_parameters(self, resolver: RouteResolver) -> None:
        assert resolver.route_name("/debug/prog") == "debug"
        assert resolver.route_name("/nowhere") is None


class TestLinks:
    """Artifact links become navigable paths or degrade to None."""

    def test_single_parameter_link(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="type", name="Integer")) == "/type/Integer"

    def test_two_parameter_link(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="build", name="prog", fun="main")) == "/build/prog/main"

    def test_two_parameter_link_without_fun(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="debug", name="prog")) is None

    def test_unknown_kind(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="module", name="Core")) is None

    def test_name_parameter_is_not_shadowed(self, resolver: RouteResolver) -> None:
        assert resolver.path_for("class", name="Number") == "/class/Number"

    @pytest.mark.parametrize("name", ["a?b", "Data/Integer", "../x"])
    def test_names_that_do_not_survive_a_path_are_plain_text(self, resolver: RouteResolver, name: str) -> None:
        assert resolver.link_path(Link(kind="type", name=name)) is None

    def test_fun_with_slash_is_plain_text(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="debug", name="prog", fun="a/b")) is None

    def test_parameterless_link(self, resolver: RouteResolver) -> None:
        assert resolver.link_path(Link(kind="list", name="all")) == "/list"

    def test_path_for_round_trips_through_resolve(self, resolver: RouteResolver) -> None:
        path = resolver.path_for("debug", prgmName="prog", fun="main")
        assert resolver.resolve(path).template.name == "debug"

    def test_path_for_missing_param(self, resolver: RouteResolver) -> None:
        with pytest.raises(ResolutionError):
            resolver.path_for("class")
