"""Mapping of decoded switch data onto Prometheus gauges."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Gauge

from .const import NAMESPACE, SWITCH_TYPE_NO_SENSORS
from .exceptions import MystromRegistrationError
from .models import SwitchInfo, SwitchReport


def new_registry() -> CollectorRegistry:
    """Create an empty registry for a single scrape."""
    return CollectorRegistry()


def _gauge(
    registry: CollectorRegistry, name: str, documentation: str, labelnames: list[str]
) -> Gauge:
    """Create a gauge in the mystrom namespace and register it."""
    try:
        return Gauge(
            name,
            documentation,
            labelnames,
            namespace=NAMESPACE,
            registry=registry,
        )
    except ValueError as err:
        raise MystromRegistrationError(
            f"failed to register metric {name}: {err}"
        ) from err


def register_info_metrics(
    registry: CollectorRegistry, info: SwitchInfo, target: str
) -> None:
    """Register the info gauge, a constant 1 labeled with the device identity."""
    gauge = _gauge(
        registry,
        "info",
        "general information about the device",
        ["target", "version", "mac", "type", "ssid"],
    )
    gauge.labels(target, info.version, info.mac, info.type_label, info.ssid).set(1)


def register_report_metrics(
    registry: CollectorRegistry,
    report: SwitchReport,
    target: str,
    switch_type: float,
) -> None:
    """Register the gauges for the current switch readings.

    The relay gauge is always present. Switches of type 114 have no power
    or temperature sensing, so those gauges are only added for other types.
    """
    relay = _gauge(
        registry,
        "relay",
        "The current state of the relay (whether or not the relay is currently turned on)",
        ["target"],
    )
    relay.labels(target).set(1 if report.relay else 0)

    if switch_type != SWITCH_TYPE_NO_SENSORS:
        power = _gauge(
            registry,
            "power",
            "The current power consumed by devices attached to the switch",
            ["target"],
        )
        power.labels(target).set(report.power)

        average_power = _gauge(
            registry,
            "average_power",
            "The average power since the last call. For continuous consumption measurements.",
            ["target"],
        )
        average_power.labels(target).set(report.watt_per_sec)

        temperature = _gauge(
            registry,
            "temperature",
            "The currently measured temperature by the switch. (Might initially be wrong, "
            "but will automatically correct itself over the span of a few hours)",
            ["target"],
        )
        temperature.labels(target).set(report.temperature)
