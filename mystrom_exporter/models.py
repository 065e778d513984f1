"""Data models for the myStrom switch API."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

from .exceptions import MystromDataError


def _reject_constant(token: str) -> float:
    """Refuse the ``NaN`` and ``Infinity`` extensions of the json module."""
    raise ValueError(f"invalid number {token}")


def _load_object(body: bytes, name: str) -> dict[str, Any]:
    """Decode a JSON document that must be an object."""
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError) as err:
        raise MystromDataError(f"unable to decode {name}: {err}") from err
    if not isinstance(data, dict):
        raise MystromDataError(f"unable to decode {name}: expected a JSON object")
    return data


def _field(data: dict[str, Any], key: str, kind: type, name: str) -> Any:
    """Return ``data[key]`` after checking it has the JSON type ``kind``."""
    if key not in data:
        raise MystromDataError(f"unable to decode {name}: missing field '{key}'")
    value = data[key]
    if kind is float:
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if valid and kind is float:
        try:
            value = float(value)
        except OverflowError:
            valid = False
        else:
            valid = math.isfinite(value)
    if not valid:
        raise MystromDataError(
            f"unable to decode {name}: field '{key}' has invalid value {value!r}"
        )
    return value


@dataclass(frozen=True)
class SwitchInfo:
    """General information about the switch from ``/api/v1/info``."""

    version: str
    mac: str
    type: float
    ssid: str
    static: bool
    connected: bool

    @property
    def type_label(self) -> str:
        """Hardware type formatted for use as a label value.

        Integral codes are rendered without a fraction (``101``). This only
        matches the device firmware's own formatting for small codes; huge
        values come out as plain digits rather than in exponent form.
        """
        if self.type.is_integer():
            return str(int(self.type))
        return repr(self.type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwitchInfo:
        """Build the info record from a decoded JSON object."""
        name = "switchInfo"
        return cls(
            version=_field(data, "version", str, name),
            mac=_field(data, "mac", str, name),
            type=_field(data, "type", float, name),
            ssid=_field(data, "ssid", str, name),
            static=_field(data, "static", bool, name),
            connected=_field(data, "connected", bool, name),
        )

    @classmethod
    def from_json(cls, body: bytes) -> SwitchInfo:
        """Decode the raw response body."""
        return cls.from_dict(_load_object(body, "switchInfo"))


@dataclass(frozen=True)
class SwitchReport:
    """Current readings of the switch from ``/report``."""

    power: float
    watt_per_sec: float  # "Ws": average power since the last call
    relay: bool
    temperature: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwitchReport:
        """Build the report from a decoded JSON object."""
        name = "switchReport"
        return cls(
            power=_field(data, "power", float, name),
            watt_per_sec=_field(data, "Ws", float, name),
            relay=_field(data, "relay", bool, name),
            temperature=_field(data, "temperature", float, name),
        )

    @classmethod
    def from_json(cls, body: bytes) -> SwitchReport:
        """Decode the raw response body."""
        return cls.from_dict(_load_object(body, "switchReport"))
