from __future__ import annotations


class WebDocsError(Exception):
    """Base class for every error the viewer surfaces on a page."""


class FetchError(WebDocsError):
    """Raised by ResourceClient when an artifact cannot be obtained."""


class NetworkError(FetchError):
    """The backend could not be reached (connection refused, timeout, ...)."""


class StatusError(FetchError):
    def __init__(self, code: int, url: str = "") -> None:
        self.code = code
        self.url = url
        super().__init__(f"backend returned HTTP {code} for {url or 'request'}")


class DecodeError(FetchError):
    """The response body is not a payload the viewer understands."""


class ResolutionError(WebDocsError):
    """A navigable path is missing a required parameter."""


class UnknownRouteError(ResolutionError):
    """A navigable path does not name any known route."""


def describe_error(exc: BaseException) -> tuple[str, str]:
    """Map an error to a ``(severity, message)`` pair for display.

    Severity is one of ``"warning"`` or ``"error"``.
    """
    if isinstance(exc, StatusError):
        if exc.code == 404:
            return "warning", f"Not found: {exc.url or 'the requested artifact'} does not exist."
        return "error", f"The backend rejected the request (HTTP {exc.code})."
    if isinstance(exc, NetworkError):
        return "error", f"Backend unreachable: {exc}. Navigate again to retry."
    if isinstance(exc, DecodeError):
        # Shown verbatim: this is a backend/viewer contract mismatch.
        return "error", f"Could not decode the backend response: {exc}"
    if isinstance(exc, UnknownRouteError):
        return "error", f"Unknown page: {exc}"
    if isinstance(exc, ResolutionError):
        return "error", f"Invalid page address: {exc}"
    return "error", str(exc)
