from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Support `streamlit run .../webdocs/web/app.py` without package install.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from webdocs.client import ResourceClient
from webdocs.config import ViewerConfig, configure_logging
from webdocs.core.fetch_state import FetchState
from webdocs.core.routes import DEFAULT_PATH
from webdocs.web.views import build, class_page, debug, docs, listing, type_page, typeinfer
from webdocs.web.views.common import RESOLVER, render_page

PAGES = {
    "list": listing.render,
    "docs": docs.render,
    "type": type_page.render,
    "class": class_page.render,
    "typeinfer": typeinfer.render,
    "debug": debug.render,
    "build": build.render,
}


@st.cache_resource
def get_client(api_url: str, timeout: float) -> ResourceClient:
    return ResourceClient(api_url, timeout=timeout)


def _render_unknown(path: str, state: FetchState) -> None:
    render_page(path, state, title=lambda ctx: ctx.path)


def _navigate(path: str) -> None:
    st.query_params["path"] = path
    st.rerun()


def page_state(route: str, client: ResourceClient) -> FetchState:
    """FetchState owned by ``route``'s page for the lifetime of the session."""
    states = st.session_state.setdefault("fetch_states", {})
    if route not in states:
        states[route] = FetchState(client)
    return states[route]


def main() -> None:
    st.set_page_config(page_title="Catln WebDocs", layout="wide")
    config = ViewerConfig.from_env()
    configure_logging(config.log_level)
    client = get_client(config.api_url, config.timeout)

    st.sidebar.title("Catln WebDocs")
    if st.sidebar.button("Program list"):
        _navigate("/list")
    if st.sidebar.button("Docs"):
        _navigate("/docs")
    st.sidebar.caption(f"Backend: `{config.api_url}`")

    path = st.query_params.get("path", "")
    if not path.strip("/"):
        path = DEFAULT_PATH
        st.query_params["path"] = path

    route = RESOLVER.route_name(path) or "unknown"
    previous = st.session_state.get("active_route")
    if previous is not None and previous != route:
        page_state(previous, client).leave()
    st.session_state["active_route"] = route

    page = PAGES.get(route, _render_unknown)
    page(path, page_state(route, client))


if __name__ == "__main__":
    main()
