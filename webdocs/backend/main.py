"""Replay backend.

Serves recorded artifact JSON files with the compiler's ``/api`` surface so
the viewer can be used and tested without a running compiler. File bodies are
returned untouched; a malformed fixture reaches the viewer as-is.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from webdocs.storage.io import list_recorded, read_artifact_bytes

logger = structlog.get_logger(__name__)


def create_app(artifact_root: str | Path) -> FastAPI:
    root = Path(artifact_root)
    app = FastAPI(title="webdocs replay backend")

    def serve(*parts: str) -> Response:
        body = read_artifact_bytes(root, *parts)
        if body is None:
            logger.info("replay.missing", artifact="/".join(parts))
            raise HTTPException(status_code=404, detail=f"No recorded artifact for {'/'.join(parts)}")
        return Response(content=body, media_type="application/json")

    @app.get("/api/list")
    async def list_programs():
        return serve("list")

    @app.get("/api/docs")
    async def docs():
        return serve("docs")

    @app.get("/api/type/{name}")
    async def type_definition(name: str):
        return serve("type", name)

    @app.get("/api/class/{name}")
    async def class_members(name: str):
        return serve("class", name)

    @app.get("/api/typeinfer/{prgm_name}")
    async def type_inference(prgm_name: str):
        return serve("typeinfer", prgm_name)

    @app.get("/api/debug/{prgm_name}/{fun}")
    async def debug_trace(prgm_name: str, fun: str):
        return serve("debug", prgm_name, fun)

    @app.get("/api/build/{prgm_name}/{fun}")
    async def build_trace(prgm_name: str, fun: str):
        return serve("build", prgm_name, fun)

    @app.get("/_recorded")
    async def recorded():
        """API paths with a recorded artifact."""
        return {"paths": list_recorded(root)}

    return app
