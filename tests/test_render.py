"""Tests for artifact rendering."""

import pytest

from webdocs.core.artifacts import decode_artifact
from webdocs.core.render import NOT_REACHED, REJECTED, RESOLVED, ArtifactRenderer, NodeKind


@pytest.fixture
def renderer() -> ArtifactRenderer:
    return ArtifactRenderer()


def render(renderer: ArtifactRenderer, payload):
    return renderer.render(decode_artifact(payload))


class TestListRendering:
    def test_empty_list_has_explicit_marker(self, renderer: ArtifactRenderer) -> None:
        node = render(renderer, [])
        assert node.kind is NodeKind.LIST
        assert [c.kind for c in node.children] == [NodeKind.EMPTY]

    def test_entries_link_to_their_own_kind(self, renderer: ArtifactRenderer) -> None:
        node = render(renderer, [{"name": "Integer", "kind": "type"}, {"name": "Number", "kind": "class"}])
        assert [(c.label, c.href) for c in node.children] == [("Integer", "/type/Integer"), ("Number", "/class/Number")]

    def test_explicit_link_wins(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer, [{"name": "main", "kind": "function", "link": {"kind": "build", "name": "prog", "fun": "main"}}]
        )
        assert node.children[0].href == "/build/prog/main"

    def test_unroutable_entry_is_plain_text(self, renderer: ArtifactRenderer) -> None:
        node = render(renderer, [{"name": "x", "kind": "value"}])
        assert node.children[0].href is None
        assert node.children[0].label == "x"


class TestRecordRendering:
    def test_fields_and_links(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {
                "shape": "record",
                "name": "Integer",
                "fields": [
                    {"name": "doc", "value": "Whole numbers"},
                    {"name": "super", "link": {"kind": "class", "name": "Number"}},
                    {"name": "broken", "link": {"kind": "nowhere", "name": "X"}},
                ],
            },
        )
        assert node.kind is NodeKind.RECORD
        assert node.label == "Integer"
        doc, sup, broken = node.children
        assert (doc.href, doc.value) == (None, "Whole numbers")
        assert (sup.href, sup.value) == ("/class/Number", "Number")
        assert (broken.href, broken.value) == (None, "X")

    def test_link_with_unsafe_name_degrades(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {"shape": "record", "fields": [{"name": "alias", "link": {"kind": "type", "name": "Data/Integer"}}]},
        )
        assert (node.children[0].href, node.children[0].value) == (None, "Data/Integer")


class TestGraphRendering:
    def test_steps_keep_declaration_order(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {"shape": "graph", "steps": [{"expr": "z"}, {"expr": "a"}, {"expr": "m"}]},
        )
        assert [s.label for s in node.children] == ["z", "a", "m"]

    def test_resolved_is_distinguished(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {"shape": "graph", "steps": [{"expr": "x", "candidates": ["Float", "Int"], "resolved": "Int"}]},
        )
        step = node.children[0]
        assert [(c.label, c.status) for c in step.children] == [("Float", REJECTED), ("Int", RESOLVED)]

    def test_resolved_outside_candidates_is_listed_first(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {"shape": "graph", "steps": [{"expr": "x", "candidates": ["Float"], "resolved": "Int"}]},
        )
        assert [(c.label, c.status) for c in node.children[0].children] == [("Int", RESOLVED), ("Float", REJECTED)]


class TestTraceRendering:
    def test_steps_after_error_are_not_reached(self, renderer: ArtifactRenderer) -> None:
        """Build of prog/main: step 2 fails, step 3 was never reached."""
        node = render(
            renderer,
            {
                "shape": "trace",
                "steps": [
                    {"label": "parse", "status": "ok"},
                    {"label": "typecheck", "status": "error"},
                    {"label": "codegen", "status": "pending"},
                ],
            },
        )
        assert [(s.label, s.status) for s in node.children] == [
            ("parse", "ok"),
            ("typecheck", "error"),
            ("codegen", NOT_REACHED),
        ]

    def test_explicit_ok_after_error_is_kept(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {
                "shape": "trace",
                "steps": [
                    {"label": "a", "status": "error"},
                    {"label": "b", "status": "ok"},
                    {"label": "c", "status": "error"},
                ],
            },
        )
        assert [s.status for s in node.children] == ["error", "ok", NOT_REACHED]

    def test_nested_artifacts_recurse(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {
                "shape": "trace",
                "steps": [
                    {
                        "label": "outer",
                        "status": "ok",
                        "artifact": {
                            "shape": "trace",
                            "steps": [
                                {"label": "inner", "status": "ok", "artifact": [{"name": "Int", "kind": "type"}]}
                            ],
                        },
                    }
                ],
            },
        )
        inner_trace = node.children[0].children[0]
        assert inner_trace.kind is NodeKind.TRACE
        inner_list = inner_trace.children[0].children[0]
        assert inner_list.kind is NodeKind.LIST
        assert inner_list.children[0].href == "/type/Int"

    def test_nested_trace_has_its_own_error_scope(self, renderer: ArtifactRenderer) -> None:
        node = render(
            renderer,
            {
                "shape": "trace",
                "steps": [
                    {
                        "label": "outer",
                        "status": "ok",
                        "artifact": {"shape": "trace", "steps": [{"label": "inner", "status": "error"}]},
                    },
                    {"label": "next", "status": "pending"},
                ],
            },
        )
        assert node.children[1].status == "pending"


class TestRawRendering:
    def test_unknown_shape_falls_back_to_raw(self, renderer: ArtifactRenderer) -> None:
        node = render(renderer, {"something": [1, 2]})
        assert node.kind is NodeKind.RAW
        assert node.value == {"something": [1, 2]}
