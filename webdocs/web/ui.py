from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

import streamlit as st

from webdocs.core.fetch_state import Error, FetchResult, Idle, Pending, Success
from webdocs.core.render import NOT_REACHED, RESOLVED, ArtifactRenderer, NodeKind, RenderNode
from webdocs.errors import describe_error

STATUS_BADGES = {
    "ok": "✅ ok",
    "error": "❌ error",
    "pending": "⏳ pending",
    NOT_REACHED: "⚪ not reached",
}

_MD_SPECIAL = re.compile(r"([\\`*_\[\]<>#|~])")


def escape_markdown(text: str) -> str:
    return _MD_SPECIAL.sub(r"\\\1", text)


def page_href(path: str) -> str:
    return f"?path={quote(path, safe='/')}"


def link_markdown(label: str, href: str | None) -> str:
    if href is None:
        return escape_markdown(label)
    return f"[{escape_markdown(label)}]({page_href(href)})"


def candidate_markdown(node: RenderNode) -> str:
    if node.status == RESOLVED:
        return f"**`{node.label}`** ✓"
    return f"~~`{node.label}`~~"


def _show_value(target: Any, value: Any) -> None:
    if isinstance(value, (dict, list)):
        target.json(value, expanded=False)
    else:
        target.code(str(value), language=None)


def show_node(node: RenderNode, target: Any = None) -> None:
    target = target if target is not None else st.container()

    if node.kind is NodeKind.LIST:
        for child in node.children:
            if child.kind is NodeKind.EMPTY:
                target.info(child.label)
                continue
            kind = f"  `{child.value}`" if child.value else ""
            target.markdown(f"- {link_markdown(child.label, child.href)}{kind}")

    elif node.kind is NodeKind.RECORD:
        if node.label:
            target.subheader(node.label)
        for child in node.children:
            if child.href is not None:
                target.markdown(f"**{escape_markdown(child.label)}**: {link_markdown(str(child.value), child.href)}")
            elif isinstance(child.value, (dict, list)):
                target.markdown(f"**{escape_markdown(child.label)}**:")
                _show_value(target, child.value)
            else:
                target.markdown(f"**{escape_markdown(child.label)}**: {escape_markdown(str(child.value))}")

    elif node.kind is NodeKind.GRAPH:
        for index, step in enumerate(node.children, start=1):
            target.markdown(f"{index}. **{escape_markdown(step.label)}**")
            if step.children:
                target.markdown(" · ".join(candidate_markdown(c) for c in step.children))
            else:
                target.caption("no candidates")

    elif node.kind is NodeKind.TRACE:
        if not node.children:
            target.info("No steps")
        for index, step in enumerate(node.children, start=1):
            box = target.container(border=True)
            badge = STATUS_BADGES.get(step.status or "", step.status or "")
            box.markdown(f"{index}. {badge} {escape_markdown(step.label)}")
            for child in step.children:
                show_node(child, box)

    else:
        target.caption("Unrecognized artifact, showing raw payload")
        _show_value(target, node.value)


def show_result(result: FetchResult, renderer: ArtifactRenderer) -> None:
    if isinstance(result, Success):
        show_node(renderer.render(result.data))
    elif isinstance(result, Error):
        severity, message = describe_error(result.cause)
        if severity == "warning":
            st.warning(message)
        else:
            st.error(message)
    elif isinstance(result, Pending):
        st.info("Loading...")
    elif isinstance(result, Idle):
        st.info("Nothing requested yet.")
