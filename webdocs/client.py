from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests
import structlog

from webdocs.core.artifacts import decode_artifact
from webdocs.errors import DecodeError, NetworkError, StatusError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ResourceKey:
    """Identity of one backend resource: an endpoint template and its parameters.

    ``endpoint`` uses ``str.format`` placeholders, e.g. ``/api/debug/{prgmName}/{fun}``.
    """

    endpoint: str
    params: tuple[tuple[str, str], ...] = ()

    def param(self, name: str) -> str:
        for key, value in self.params:
            if key == name:
                return value
        raise KeyError(name)

    def url_path(self) -> str:
        quoted = {key: quote(value, safe="") for key, value in self.params}
        return self.endpoint.format(**quoted)

    def __str__(self) -> str:
        return self.url_path()


class ResourceClient:
    """Read-only client for the compiler's introspection API.

    Every call to :meth:`fetch` issues exactly one GET; nothing is cached and
    nothing is retried.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        session: Any | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def url_for(self, key: ResourceKey) -> str:
        return f"{self.base_url}{key.url_path()}"

    def fetch(self, key: ResourceKey):
        url = self.url_for(key)
        logger.debug("fetch.start", url=url)
        try:
            response = self.session.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
        except requests.RequestException as exc:
            logger.warning("fetch.network_error", url=url, error=str(exc))
            raise NetworkError(f"{url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.info("fetch.status_error", url=url, status=response.status_code)
            raise StatusError(response.status_code, url)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("fetch.decode_error", url=url, error=str(exc))
            raise DecodeError(f"{url} did not return JSON: {exc}") from exc

        artifact = decode_artifact(payload)
        logger.debug("fetch.done", url=url, shape=artifact.shape)
        return artifact

    def close(self) -> None:
        self.session.close()
