"""Exceptions for the myStrom exporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .const import RequestStatus

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry


class MystromError(Exception):
    """Base exception for myStrom errors.

    ``registry`` holds the partially populated registry when the failure
    happened after the info metric was registered, otherwise ``None``.
    """

    status = RequestStatus.ERROR_PARSING_VALUE

    def __init__(self, message: str, registry: CollectorRegistry | None = None) -> None:
        super().__init__(message)
        self.registry = registry


class MystromConnectionError(MystromError):
    """The switch could not be reached."""

    status = RequestStatus.ERROR_SOCKET


class MystromTimeoutError(MystromError):
    """The request to the switch timed out."""

    status = RequestStatus.ERROR_TIMEOUT


class MystromReadError(MystromError):
    """The response body could not be read."""


class MystromDataError(MystromError):
    """The switch returned data that could not be decoded."""


class MystromRegistrationError(MystromError):
    """A metric was registered twice in the same registry."""
