"""Prometheus exporter for myStrom WiFi switches."""

from .const import VERSION
from .exceptions import (
    MystromConnectionError,
    MystromDataError,
    MystromError,
    MystromReadError,
    MystromRegistrationError,
    MystromTimeoutError,
)
from .exporter import MystromExporter
from .models import SwitchInfo, SwitchReport

__version__ = VERSION

__all__ = [
    "MystromConnectionError",
    "MystromDataError",
    "MystromError",
    "MystromExporter",
    "MystromReadError",
    "MystromRegistrationError",
    "MystromTimeoutError",
    "SwitchInfo",
    "SwitchReport",
]
