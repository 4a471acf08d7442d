from __future__ import annotations

from typing import Callable

import streamlit as st

from webdocs.core.fetch_state import FetchState
from webdocs.core.navigation import open_route
from webdocs.core.render import ArtifactRenderer
from webdocs.core.routes import PageContext, RouteResolver
from webdocs.web.ui import show_result

RESOLVER = RouteResolver()
RENDERER = ArtifactRenderer(RESOLVER)


def render_page(
    path: str,
    state: FetchState,
    title: Callable[[PageContext], str],
    caption: str = "",
) -> None:
    """Heading, then the loading region for whatever ``path`` resolves to."""
    route = open_route(path, state, RESOLVER)
    if route is None:
        st.header(path)
    else:
        ctx = route.context(path)
        st.header(title(ctx))
        if caption:
            st.caption(caption)
        with st.spinner(f"Loading {route.key}..."):
            state.load(route.key)

    show_result(state.result, RENDERER)
