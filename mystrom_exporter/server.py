"""HTTP server exposing switch scrapes and exporter telemetry."""

from __future__ import annotations

import contextlib
import logging
import platform
import time

from aiohttp import web
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from .config import ExporterConfig
from .const import EXPORTER_NAMESPACE, VERSION, RequestStatus
from .exceptions import MystromError
from .exporter import MystromExporter

_LOGGER = logging.getLogger(__name__)

LANDING_PAGE = """<html>
<head><title>myStrom switch report Exporter</title></head>
<body>
<h1>myStrom Exporter</h1>
<p><a href='{metrics_path}'>Metrics</a></p>
</body>
</html>"""


class ExporterTelemetry:
    """Metrics about the exporter itself, kept in a registry of their own."""

    def __init__(self) -> None:
        self.registry = CollectorRegistry()
        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.duration = Counter(
            "request_duration_seconds",
            "Total duration of mystrom successful requests by target in seconds",
            ["target"],
            namespace=EXPORTER_NAMESPACE,
            registry=self.registry,
        )
        self.requests = Counter(
            "requests",
            "Number of mystrom request by status and target",
            ["target", "status"],
            namespace=EXPORTER_NAMESPACE,
            registry=self.registry,
        )
        build_info = Gauge(
            "build_info",
            "A metric with a constant '1' value labeled by build information.",
            ["version", "pythonversion"],
            namespace=EXPORTER_NAMESPACE,
            registry=self.registry,
        )
        build_info.labels(VERSION, platform.python_version()).set(1)

    def record(self, target: str, status: RequestStatus, duration: float | None = None) -> None:
        """Count one scrape; the duration is only tracked for successful ones."""
        self.requests.labels(target, status.value).inc()
        if duration is not None:
            self.duration.labels(target).inc(duration)


def _metrics_response(registry: CollectorRegistry) -> web.Response:
    return web.Response(
        body=generate_latest(registry),
        headers={"Content-Type": CONTENT_TYPE_LATEST},
    )


class MystromExporterServer:
    """aiohttp application serving the landing page, device scrapes and telemetry."""

    def __init__(self, config: ExporterConfig) -> None:
        self._config = config
        self.telemetry = ExporterTelemetry()
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None

    def build_app(self) -> web.Application:
        """Create the aiohttp application with all routes."""
        app = web.Application()
        app.router.add_get(self._config.metrics_path, self._handle_metrics)
        app.router.add_get(self._config.device_path, self._handle_device)
        app.router.add_get("/", self._handle_landing)
        return app

    async def start(self) -> None:
        """Start listening on the configured address."""
        self._runner = web.AppRunner(self.build_app())
        await self._runner.setup()
        self._site = web.TCPSite(self._runner, self._config.host, self._config.port)
        await self._site.start()
        _LOGGER.info("Listening on address %s", self._config.listen_address)

    async def stop(self) -> None:
        """Stop the listener and release its resources."""
        with contextlib.suppress(RuntimeError):
            if self._site is not None:
                await self._site.stop()
        if self._runner is not None:
            await self._runner.cleanup()
        self._site = None
        self._runner = None

    async def _handle_landing(self, request: web.Request) -> web.Response:
        return web.Response(
            text=LANDING_PAGE.format(metrics_path=self._config.metrics_path),
            content_type="text/html",
        )

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        return _metrics_response(self.telemetry.registry)

    async def _handle_device(self, request: web.Request) -> web.Response:
        target = request.query.get("target", "")
        if not target:
            return web.Response(
                status=400, text="'target' parameter must be specified"
            )

        _LOGGER.info("got scrape request for target '%s'", target)
        exporter = MystromExporter(target, timeout=self._config.timeout)

        start = time.monotonic()
        try:
            registry = await exporter.scrape()
        except MystromError as err:
            self.telemetry.record(target, err.status)
            _LOGGER.error("failed to scrape target '%s': %s", target, err)
            return web.Response(
                status=500, text=f"failed to scrape target '{target}': {err}"
            )
        self.telemetry.record(target, RequestStatus.OK, time.monotonic() - start)

        return _metrics_response(registry)
