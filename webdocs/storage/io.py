from __future__ import annotations

from pathlib import Path

ARTIFACT_SUFFIX = ".json"


def artifact_path(root: str | Path, *parts: str) -> Path | None:
    """Location of a recorded artifact, e.g. ``artifact_path(root, "debug", "prog", "main")``.

    Returns None for parts that would escape ``root``.
    """
    if not parts or any(not part or part in (".", "..") or "/" in part or "\\" in part for part in parts):
        return None
    *dirs, last = parts
    return Path(root).joinpath(*dirs, last + ARTIFACT_SUFFIX)


def read_artifact_bytes(root: str | Path, *parts: str) -> bytes | None:
    path = artifact_path(root, *parts)
    if path is None or not path.is_file():
        return None
    return path.read_bytes()


def list_recorded(root: str | Path) -> list[str]:
    """API paths that have a recorded artifact under ``root``."""
    base = Path(root)
    if not base.exists():
        return []
    out = []
    for path in sorted(base.rglob(f"*{ARTIFACT_SUFFIX}")):
        rel = path.relative_to(base).with_suffix("")
        out.append("/api/" + "/".join(rel.parts))
    return out
