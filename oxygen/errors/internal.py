"""Centralized internal error hierarchy.

These exceptions give the session loop semantic categories for deciding what
is fatal and what is contained within one loop iteration.

Classes:
  InternalError          – Base for all internal errors.
  NetworkError           – Transport failures (connect, read, write). Fatal.
  ConnectionClosedError  – The remote peer closed the stream. Fatal.
  ParsingError           – Input that does not match an expected format.
  IRCParseError          – A received line does not match the IRC grammar.
  StoreError             – The factoid store could not be persisted. Fatal.
  ConfigError            – The configuration could not be loaded. Startup fatal.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    Covers failed connects, resets and write failures. The session cannot
    continue after one of these.
    """


class ConnectionClosedError(NetworkError):
    """Raised when a read returns zero bytes (peer closed the connection)."""


class ParsingError(InternalError):
    """Exception raised when input does not match its expected format."""


class IRCParseError(ParsingError):
    """Exception raised for a protocol line that does not match the grammar.

    Args:
        message: What was wrong with the line.
        line: The offending raw line.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message, data={"line": line})
        self.line = line


class StoreError(InternalError):
    """Exception raised when the factoid store cannot be written to disk.

    Silent data loss would be worse than stopping, so this is never retried.
    """


class ConfigError(InternalError):
    """Exception raised for a missing, unreadable or invalid configuration."""


__all__ = [
    "InternalError",
    "NetworkError",
    "ConnectionClosedError",
    "ParsingError",
    "IRCParseError",
    "StoreError",
    "ConfigError",
]
