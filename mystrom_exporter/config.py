"""Runtime configuration for the exporter."""

from __future__ import annotations

from dataclasses import dataclass

from .const import (
    DEFAULT_DEVICE_PATH,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_METRICS_PATH,
    REQUEST_TIMEOUT,
)


def parse_listen_address(address: str) -> tuple[str | None, int]:
    """Split ``host:port`` into its parts.

    An empty host (``":9452"``) means all interfaces and is returned as ``None``.
    """
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"listen address '{address}' must be in the form host:port")
    try:
        port_number = int(port)
    except ValueError as err:
        raise ValueError(f"invalid port in listen address '{address}'") from err
    if not 0 <= port_number <= 65535:
        raise ValueError(f"port out of range in listen address '{address}'")
    host = host.strip("[]")
    return (host or None), port_number


@dataclass
class ExporterConfig:
    """Settings of the HTTP listener."""

    listen_address: str = DEFAULT_LISTEN_ADDRESS
    metrics_path: str = DEFAULT_METRICS_PATH
    device_path: str = DEFAULT_DEVICE_PATH
    log_level: str = "INFO"
    timeout: float = REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        self.host, self.port = parse_listen_address(self.listen_address)
        for path in (self.metrics_path, self.device_path):
            if not path.startswith("/"):
                raise ValueError(f"path '{path}' must start with '/'")
