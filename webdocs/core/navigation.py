from __future__ import annotations

from webdocs.core.fetch_state import FetchState
from webdocs.core.routes import PageContext, ResolvedRoute, RouteResolver
from webdocs.errors import ResolutionError


def open_route(path: str, state: FetchState, resolver: RouteResolver) -> ResolvedRoute | None:
    """Resolve ``path`` for a page, moving ``state`` to Error if it cannot be resolved."""
    try:
        return resolver.resolve(path)
    except ResolutionError as exc:
        state.fail(exc)
        return None


def navigate(path: str, state: FetchState, resolver: RouteResolver) -> PageContext | None:
    route = open_route(path, state, resolver)
    if route is None:
        return None
    state.load(route.key)
    return route.context(path)
