"""Constants for the myStrom exporter."""

from enum import Enum

VERSION = "0.1.0"

# API endpoints
ENDPOINT_INFO = "/api/v1/info"
ENDPOINT_REPORT = "/report"

# Request settings, 5 seconds might need to be increased
REQUEST_TIMEOUT = 5.0
USER_AGENT = "myStrom-exporter"

# Metric namespaces
NAMESPACE = "mystrom"
EXPORTER_NAMESPACE = "mystrom_exporter"

# Switch type without power and temperature sensing
SWITCH_TYPE_NO_SENSORS = 114

# Web defaults
DEFAULT_LISTEN_ADDRESS = ":9452"
DEFAULT_METRICS_PATH = "/metrics"
DEFAULT_DEVICE_PATH = "/device"


class RequestStatus(str, Enum):
    """Outcome of a scrape request, used as the ``status`` label."""

    OK = "OK"
    ERROR_SOCKET = "ERROR_SOCKET"
    ERROR_TIMEOUT = "ERROR_TIMEOUT"
    ERROR_PARSING_VALUE = "ERROR_PARSING_VALUE"
