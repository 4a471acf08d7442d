from __future__ import annotations

from dataclasses import dataclass

from webdocs.client import ResourceKey
from webdocs.core.artifacts import Link
from webdocs.errors import ResolutionError, UnknownRouteError

DEFAULT_PATH = "/docs"


@dataclass(frozen=True)
class RouteTemplate:
    """A navigable path pattern such as ``/debug/:prgmName/:fun``."""

    name: str
    pattern: str
    endpoint: str

    @property
    def params(self) -> tuple[str, ...]:
        return tuple(seg[1:] for seg in self.pattern.strip("/").split("/") if seg.startswith(":"))

    @property
    def prefix(self) -> str:
        return self.pattern.strip("/").split("/")[0]


ROUTES: tuple[RouteTemplate, ...] = (
    RouteTemplate("list", "/list", "/api/list"),
    RouteTemplate("docs", "/docs", "/api/docs"),
    RouteTemplate("type", "/type/:name", "/api/type/{name}"),
    RouteTemplate("class", "/class/:name", "/api/class/{name}"),
    RouteTemplate("typeinfer", "/typeinfer/:prgmName", "/api/typeinfer/{prgmName}"),
    RouteTemplate("debug", "/debug/:prgmName/:fun", "/api/debug/{prgmName}/{fun}"),
    RouteTemplate("build", "/build/:prgmName/:fun", "/api/build/{prgmName}/{fun}"),
)


@dataclass(frozen=True)
class PageContext:
    """Immutable snapshot of the current path and its parameters."""

    route: str
    path: str
    params: tuple[tuple[str, str], ...] = ()

    def __getitem__(self, name: str) -> str:
        for key, value in self.params:
            if key == name:
                return value
        raise KeyError(name)


@dataclass(frozen=True)
class ResolvedRoute:
    template: RouteTemplate
    params: tuple[tuple[str, str], ...]

    @property
    def key(self) -> ResourceKey:
        return ResourceKey(self.template.endpoint, self.params)

    def context(self, path: str) -> PageContext:
        return PageContext(route=self.template.name, path=path, params=self.params)


class RouteResolver:
    """Maps navigable paths to resource keys and back."""

    def __init__(self, routes: tuple[RouteTemplate, ...] = ROUTES):
        self._routes = {route.name: route for route in routes}
        self._by_prefix = {route.prefix: route for route in routes}

    def template(self, name: str) -> RouteTemplate:
        try:
            return self._routes[name]
        except KeyError:
            raise UnknownRouteError(f"no route named {name!r}") from None

    def route_name(self, path: str) -> str | None:
        """Name of the route whose prefix ``path`` starts with, parameters unchecked."""
        template = self._by_prefix.get(path.split("?", 1)[0].strip("/").split("/")[0])
        return template.name if template else None

    def resolve(self, path: str) -> ResolvedRoute:
        """Match ``path`` against the route table.

        Parameter values are taken verbatim from the path segments.

        Raises:
            UnknownRouteError: the first segment names no route, or there are
                more segments than the route takes.
            ResolutionError: a required parameter is missing or empty.
        """
        segments = path.split("?", 1)[0].strip("/").split("/")
        template = self._by_prefix.get(segments[0])
        if template is None:
            raise UnknownRouteError(f"{path!r} does not match any page")

        values = segments[1:]
        names = template.params
        if len(values) > len(names):
            raise UnknownRouteError(f"{path!r} has unexpected trailing segments for {template.pattern}")

        params = []
        for index, name in enumerate(names):
            value = values[index] if index < len(values) else ""
            if not value:
                raise ResolutionError(f"missing required parameter {name!r} in {path!r} for {template.pattern}")
            params.append((name, value))
        return ResolvedRoute(template, tuple(params))

    def path_for(self, route: str, /, **params: str | None) -> str:
        template = self.template(route)
        parts = [template.prefix]
        for param in template.params:
            value = params.get(param)
            if not value:
                raise ResolutionError(f"missing required parameter {param!r} for {template.pattern}")
            parts.append(value)
        return "/" + "/".join(parts)

    def link_path(self, link: Link) -> str | None:
        """Navigable path for ``link``, or None when it cannot be resolved."""
        template = self._routes.get(link.kind)
        if template is None:
            return None
        values = [link.name, link.fun]
        params = {param: values[i] if i < len(values) else None for i, param in enumerate(template.params)}
        try:
            path = self.path_for(link.kind, **params)
            resolved = self.resolve(path)
        except ResolutionError:
            return None
        # Names containing "/" or "?" do not survive the trip through a path.
        if resolved.template is not template or dict(resolved.params) != params:
            return None
        return path
