"""Command-line interface for the myStrom exporter."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from .config import ExporterConfig
from .const import (
    DEFAULT_DEVICE_PATH,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_METRICS_PATH,
    VERSION,
)
from .log import configure_logging
from .server import MystromExporterServer

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mystrom-exporter", description="Prometheus exporter for myStrom switches"
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=DEFAULT_LISTEN_ADDRESS,
        help=f"Address to listen on (default: {DEFAULT_LISTEN_ADDRESS})",
    )
    parser.add_argument(
        "--web.metrics-path",
        dest="metrics_path",
        default=DEFAULT_METRICS_PATH,
        help="Path under which to expose exporters own metrics",
    )
    parser.add_argument(
        "--web.device-path",
        dest="device_path",
        default=DEFAULT_DEVICE_PATH,
        help="Path under which the metrics of the devices are fetched",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="INFO",
        help="Log level name, e.g. DEBUG or INFO",
    )
    parser.add_argument(
        "--version", action="store_true", help="Show version information."
    )
    return parser


async def _serve(config: ExporterConfig) -> None:
    server = MystromExporterServer(config)
    await server.start()
    try:
        await asyncio.Event().wait()
    finally:
        await server.stop()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"mystrom_exporter {VERSION}")
        return 0

    try:
        config = ExporterConfig(
            listen_address=args.listen_address,
            metrics_path=args.metrics_path,
            device_path=args.device_path,
            log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(config.log_level)

    try:
        asyncio.run(_serve(config))
    except KeyboardInterrupt:
        _LOGGER.info("Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
