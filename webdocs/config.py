from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

import structlog

API_URL_ENV = "WEBDOCS_API_URL"
TIMEOUT_ENV = "WEBDOCS_TIMEOUT"
LOG_LEVEL_ENV = "WEBDOCS_LOG_LEVEL"

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ViewerConfig:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.api_url:
            raise ValueError("api_url must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ViewerConfig:
        env = os.environ if environ is None else environ
        raw_timeout = env.get(TIMEOUT_ENV, "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None
        return cls(
            api_url=env.get(API_URL_ENV, DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
            log_level=env.get(LOG_LEVEL_ENV, "INFO").upper(),
        )

    def to_env(self) -> dict[str, str]:
        """Environment variables that hand this config to a child process."""
        return {
            API_URL_ENV: self.api_url,
            TIMEOUT_ENV: str(self.timeout),
            LOG_LEVEL_ENV: self.log_level,
        }


def configure_logging(level: str = "INFO") -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=True,
    )
