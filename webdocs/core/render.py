"""Artifact rendering.

:class:`ArtifactRenderer` turns a decoded artifact into a tree of
:class:`RenderNode`. The tree carries everything a view needs (labels,
navigable paths, statuses) and nothing about how it is drawn, so the same
tree backs the Streamlit pages and the tests.

Structure produced per artifact variant::

    list      -> entry* | empty
    record    -> field*              (field.href set for link fields)
    graph     -> inference*
                 inference -> candidate*   (status resolved | rejected)
    trace     -> step*
                 step -> <nested artifact>?
    raw       -> (payload in value)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from webdocs.core.artifacts import (
    GraphArtifact,
    Link,
    ListArtifact,
    RawArtifact,
    RecordArtifact,
    TraceArtifact,
)
from webdocs.core.routes import RouteResolver

NOT_REACHED = "not_reached"
RESOLVED = "resolved"
REJECTED = "rejected"


class NodeKind(str, Enum):
    LIST = "list"
    ENTRY = "entry"
    EMPTY = "empty"
    RECORD = "record"
    FIELD = "field"
    GRAPH = "graph"
    INFERENCE = "inference"
    CANDIDATE = "candidate"
    TRACE = "trace"
    STEP = "step"
    RAW = "raw"


@dataclass(frozen=True)
class RenderNode:
    kind: NodeKind
    label: str = ""
    href: str | None = None
    status: str | None = None
    value: Any = None
    children: tuple["RenderNode", ...] = ()


class ArtifactRenderer:
    def __init__(self, resolver: RouteResolver | None = None):
        self.resolver = resolver or RouteResolver()

    def render(self, artifact: Any) -> RenderNode:
        if isinstance(artifact, ListArtifact):
            return self._render_list(artifact)
        if isinstance(artifact, RecordArtifact):
            return self._render_record(artifact)
        if isinstance(artifact, GraphArtifact):
            return self._render_graph(artifact)
        if isinstance(artifact, TraceArtifact):
            return self._render_trace(artifact)
        if isinstance(artifact, RawArtifact):
            return RenderNode(NodeKind.RAW, value=artifact.payload)
        return RenderNode(NodeKind.RAW, value=artifact)

    def _href(self, link: Link | None) -> str | None:
        if link is None:
            return None
        return self.resolver.link_path(link)

    def _render_list(self, artifact: ListArtifact) -> RenderNode:
        if not artifact.entries:
            return RenderNode(NodeKind.LIST, children=(RenderNode(NodeKind.EMPTY, label="No entries"),))
        entries = []
        for entry in artifact.entries:
            # Entries without an explicit link point at their own kind/name.
            link = entry.link or Link(kind=entry.kind, name=entry.name)
            entries.append(RenderNode(NodeKind.ENTRY, label=entry.name, href=self._href(link), value=entry.kind))
        return RenderNode(NodeKind.LIST, children=tuple(entries))

    def _render_record(self, artifact: RecordArtifact) -> RenderNode:
        fields = []
        for field in artifact.record_fields:
            if field.link is not None:
                fields.append(
                    RenderNode(NodeKind.FIELD, label=field.name, href=self._href(field.link), value=field.link.name)
                )
            else:
                fields.append(RenderNode(NodeKind.FIELD, label=field.name, value=field.value))
        return RenderNode(NodeKind.RECORD, label=artifact.name or "", children=tuple(fields))

    def _render_graph(self, artifact: GraphArtifact) -> RenderNode:
        steps = []
        for step in artifact.steps:
            candidates = list(step.candidates)
            if step.resolved is not None and step.resolved not in candidates:
                candidates.insert(0, step.resolved)
            children = tuple(
                RenderNode(
                    NodeKind.CANDIDATE,
                    label=candidate,
                    status=RESOLVED if candidate == step.resolved else REJECTED,
                )
                for candidate in candidates
            )
            steps.append(RenderNode(NodeKind.INFERENCE, label=step.expr, value=step.resolved, children=children))
        return RenderNode(NodeKind.GRAPH, children=tuple(steps))

    def _render_trace(self, artifact: TraceArtifact) -> RenderNode:
        steps = []
        halted = False
        for step in artifact.steps:
            status = step.status
            if halted and status != "ok":
                status = NOT_REACHED
            if step.status == "error":
                halted = True
            children = () if step.artifact is None else (self.render(step.artifact),)
            steps.append(RenderNode(NodeKind.STEP, label=step.label, status=status, children=children))
        return RenderNode(NodeKind.TRACE, children=tuple(steps))
