"""Server settings read from environment variables."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["ServerSettings", "load_settings"]

_QUEUE_MAX_SIZE_VARIABLE = "GPSLIB_QUEUE_MAX_SIZE"
_TIMEOUT_VARIABLE = "GPSLIB_WS_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class ServerSettings:
    """Runtime settings of the web service.

    Attributes:
        queue_max_size: Messages buffered per WebSocket client before the
            oldest is dropped.
        timeout_seconds: A WebSocket is closed with code 1001 when no record
            arrives for this long.
    """

    queue_max_size: int = 10
    timeout_seconds: float = 5.0


def load_settings(environ: Mapping[str, str] | None = None) -> ServerSettings:
    """Build ``ServerSettings`` from ``environ`` (default: ``os.environ``).

    Raises:
        ValueError: If a variable is set but not a positive number.
    """
    if environ is None:
        environ = os.environ
    defaults = ServerSettings()

    queue_max_size = int(environ.get(_QUEUE_MAX_SIZE_VARIABLE, defaults.queue_max_size))
    if queue_max_size <= 0:
        raise ValueError(f"{_QUEUE_MAX_SIZE_VARIABLE} must be positive, got {queue_max_size}")

    timeout_seconds = float(environ.get(_TIMEOUT_VARIABLE, defaults.timeout_seconds))
    if timeout_seconds <= 0:
        raise ValueError(f"{_TIMEOUT_VARIABLE} must be positive, got {timeout_seconds}")

    return ServerSettings(queue_max_size=queue_max_size, timeout_seconds=timeout_seconds)
