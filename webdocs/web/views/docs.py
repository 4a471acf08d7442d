from __future__ import annotations

from webdocs.core.fetch_state import FetchState
from webdocs.web.views.common import render_page


def render(path: str, state: FetchState) -> None:
    render_page(
        path,
        state,
        title=lambda ctx: "Documentation",
        caption="Documentation index",
    )
