"""Artifact payloads returned by the compiler backend.

Every response body is decoded once, at the client boundary, into one
variant of :data:`Artifact`. The variant is chosen by the payload's ``shape``
tag; a bare JSON array is a list artifact. Anything else becomes a
:class:`RawArtifact` so the page can still show what came back.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from webdocs.errors import DecodeError

StepStatus = Literal["ok", "error", "pending"]

SHAPES = ("list", "record", "graph", "trace")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Link(_Frozen):
    """Reference to another artifact by kind and name.

    ``fun`` is only needed for the two-parameter routes (debug and build).
    """

    kind: str
    name: str
    fun: str | None = None


class ListEntry(_Frozen):
    name: str
    kind: str = ""
    link: Link | None = None


class ListArtifact(_Frozen):
    shape: Literal["list"] = "list"
    entries: tuple[ListEntry, ...] = ()


class RecordField(_Frozen):
    name: str
    value: Any = None
    link: Link | None = None


class RecordArtifact(_Frozen):
    shape: Literal["record"] = "record"
    name: str | None = None
    record_fields: tuple[RecordField, ...] = Field(default=(), alias="fields")

    @field_validator("record_fields", mode="before")
    @classmethod
    def _fields_from_mapping(cls, value: Any) -> Any:
        # {"a": 1, "b": {"link": {...}}} is accepted as well as a list of fields.
        if not isinstance(value, dict):
            return value
        out = []
        for name, item in value.items():
            if isinstance(item, dict) and set(item) == {"link"}:
                out.append({"name": name, "link": item["link"]})
            else:
                out.append({"name": name, "value": item})
        return out


class InferenceStep(_Frozen):
    expr: str
    candidates: tuple[str, ...] = ()
    resolved: str | None = None


class GraphArtifact(_Frozen):
    shape: Literal["graph"] = "graph"
    steps: tuple[InferenceStep, ...] = ()


class TraceStep(_Frozen):
    label: str
    status: StepStatus
    artifact: Any = None

    @field_validator("artifact", mode="before")
    @classmethod
    def _decode_nested(cls, value: Any) -> Any:
        if value is None:
            return None
        return decode_artifact(value)


class TraceArtifact(_Frozen):
    shape: Literal["trace"] = "trace"
    steps: tuple[TraceStep, ...] = ()


class RawArtifact(_Frozen):
    shape: Literal["raw"] = "raw"
    payload: Any = None


Artifact = Annotated[
    Union[ListArtifact, RecordArtifact, GraphArtifact, TraceArtifact],
    Field(discriminator="shape"),
]

_ADAPTER: TypeAdapter[Any] = TypeAdapter(Artifact)


def decode_artifact(payload: Any) -> ListArtifact | RecordArtifact | GraphArtifact | TraceArtifact | RawArtifact:
    """Decode parsed JSON into an artifact.

    Raises:
        DecodeError: the payload carries a known ``shape`` tag but does not
            match that shape.
    """
    if isinstance(payload, list):
        try:
            return ListArtifact(entries=payload)
        except ValidationError:
            # An untagged array of something other than entries.
            return RawArtifact(payload=payload)

    if not isinstance(payload, dict) or payload.get("shape") not in SHAPES:
        return RawArtifact(payload=payload)

    try:
        return _ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise DecodeError(f"invalid {payload['shape']} artifact: {exc}") from exc
