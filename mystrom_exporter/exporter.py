"""Per-request exporter turning one switch into a metrics registry."""

from __future__ import annotations

import logging

import aiohttp
from prometheus_client import CollectorRegistry

from .client import MystromClient
from .const import ENDPOINT_INFO, ENDPOINT_REPORT, REQUEST_TIMEOUT
from .exceptions import MystromError
from .metrics import new_registry, register_info_metrics, register_report_metrics
from .models import SwitchInfo, SwitchReport

_LOGGER = logging.getLogger(__name__)


class MystromExporter:
    """Scrapes a single myStrom switch.

    Every call to :meth:`scrape` builds a new registry, so nothing is shared
    between concurrent scrapes of the same or different switches.
    """

    def __init__(
        self,
        target: str,
        websession: aiohttp.ClientSession | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.target = target
        self._websession = websession
        self._timeout = timeout

    async def scrape(self) -> CollectorRegistry:
        """Fetch info and report from the switch and return them as metrics.

        Raises:
            MystromError: on the first failure. Failures on the info endpoint
                carry no registry; failures on the report endpoint carry the
                registry holding the info metric in ``err.registry``.
        """
        async with MystromClient(self.target, self._websession, self._timeout) as client:
            info = SwitchInfo.from_json(await client.fetch(ENDPOINT_INFO))
            _LOGGER.debug("info: %s", info)

            registry = new_registry()
            register_info_metrics(registry, info, self.target)

            try:
                report = SwitchReport.from_json(await client.fetch(ENDPOINT_REPORT))
            except MystromError as err:
                err.registry = registry
                raise
            _LOGGER.debug("report: %s", report)

        register_report_metrics(registry, report, self.target, info.type)
        return registry
