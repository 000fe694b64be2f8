"""Error taxonomy and logging helpers."""

from .handling import classify_error, handle_transport_retry, log_error
from .internal import (
    ConfigError,
    ConnectionClosedError,
    InternalError,
    IRCParseError,
    NetworkError,
    ParsingError,
    StoreError,
)

__all__ = [
    "ConfigError",
    "ConnectionClosedError",
    "InternalError",
    "IRCParseError",
    "NetworkError",
    "ParsingError",
    "StoreError",
    "classify_error",
    "handle_transport_retry",
    "log_error",
]
