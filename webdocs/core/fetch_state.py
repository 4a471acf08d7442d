"""Per-page fetch lifecycle.

A :class:`FetchState` walks ``Idle -> Pending -> Success | Error`` for one
resource key at a time. Every new key bumps a request counter; a resolution
carrying an older request id is dropped, so the latest request always wins
regardless of the order in which responses arrive.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

import structlog

from webdocs.client import ResourceKey
from webdocs.errors import FetchError, WebDocsError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class FetchStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Idle:
    status = FetchStatus.IDLE


@dataclass(frozen=True)
class Pending:
    request_id: int
    status = FetchStatus.PENDING


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    request_id: int
    status = FetchStatus.SUCCESS


@dataclass(frozen=True)
class Error:
    cause: WebDocsError
    request_id: int
    status = FetchStatus.ERROR


FetchResult = Union[Idle, Pending, Success[Any], Error]

IDLE = Idle()


class FetchState:
    def __init__(self, client: Any):
        self._client = client
        self._counter = 0
        self._key: ResourceKey | None = None
        self._result: FetchResult = IDLE

    @property
    def key(self) -> ResourceKey | None:
        return self._key

    @property
    def result(self) -> FetchResult:
        return self._result

    @property
    def request_id(self) -> int:
        return self._counter

    def enter(self, key: ResourceKey) -> int | None:
        """Make ``key`` current and return the request id to fetch it with.

        Returns None when ``key`` is already current and has not been left,
        meaning a request for it is in flight or already applied.
        """
        if key == self._key and not isinstance(self._result, Idle):
            return None
        self._counter += 1
        self._key = key
        self._result = Pending(self._counter)
        logger.debug("fetch_state.pending", key=str(key), request_id=self._counter)
        return self._counter

    def resolve(self, request_id: int, data: Any) -> bool:
        return self._apply(request_id, lambda: Success(data, request_id))

    def reject(self, request_id: int, cause: WebDocsError) -> bool:
        return self._apply(request_id, lambda: Error(cause, request_id))

    def fail(self, cause: WebDocsError) -> None:
        """Go straight to Error without a request, e.g. for an unresolvable path."""
        self._counter += 1
        self._key = None
        self._result = Error(cause, self._counter)
        logger.debug("fetch_state.failed", error=str(cause), request_id=self._counter)

    def leave(self) -> None:
        """Drop interest in whatever is in flight; later resolutions are ignored."""
        self._counter += 1
        self._key = None
        self._result = IDLE

    def load(self, key: ResourceKey) -> FetchResult:
        request_id = self.enter(key)
        if request_id is None:
            return self._result
        try:
            artifact = self._client.fetch(key)
        except FetchError as exc:
            self.reject(request_id, exc)
        else:
            self.resolve(request_id, artifact)
        return self._result

    async def load_async(self, key: ResourceKey) -> FetchResult:
        request_id = self.enter(key)
        if request_id is None:
            return self._result
        try:
            artifact = await asyncio.to_thread(self._client.fetch, key)
        except FetchError as exc:
            self.reject(request_id, exc)
        else:
            self.resolve(request_id, artifact)
        return self._result

    def _apply(self, request_id: int, build) -> bool:
        if request_id != self._counter or not isinstance(self._result, Pending):
            logger.debug("fetch_state.stale_dropped", request_id=request_id, current=self._counter)
            return False
        self._result = build()
        logger.debug("fetch_state.applied", status=self._result.status.value, request_id=request_id)
        return True
