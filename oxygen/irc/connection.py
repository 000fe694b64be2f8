"""TCP transport for the IRC session."""

from __future__ import annotations

import asyncio
import logging

from ..constants import CONNECT_TIMEOUT
from ..errors.handling import handle_transport_retry
from ..errors.internal import NetworkError
from ..logs.logger import logger


class IRCConnection:
    def __init__(self, host: str, port: int, timeout: float = CONNECT_TIMEOUT):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    @property
    def connected(self) -> bool:
        return self.writer is not None

    async def open(self) -> None:
        logger.log_event("irc", "connect_start", host=self.host, port=self.port)
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                timeout=self.timeout,
            )
        except TimeoutError as e:
            raise NetworkError(
                f"timed out connecting to {self.host}:{self.port}",
                data={"timeout": self.timeout},
            ) from e
        except OSError as e:
            raise NetworkError(
                f"could not connect to {self.host}:{self.port}: {e}"
            ) from e
        logger.log_event(
            "irc", "connection_established", host=self.host, port=self.port
        )

    async def read(self, n: int) -> bytes:
        if not self.reader:
            raise NetworkError("read on a connection that is not open")
        try:
            return await self.reader.read(n)
        except OSError as e:
            raise NetworkError(f"could not read from socket: {e}") from e

    async def send_line(self, line: str) -> None:
        if not self.writer:
            raise NetworkError("write on a connection that is not open")
        logger.log_event("irc", "send", level=logging.DEBUG, line=line)
        try:
            self.writer.write(f"{line}\r\n".encode())
            await self.writer.drain()
        except OSError as e:
            raise NetworkError(f"could not send to the server: {e}") from e

    async def close(self) -> None:
        if self.writer:
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except OSError as e:
                logger.log_event(
                    "irc", "close_error", level=logging.WARNING, error=str(e)
                )
            finally:
                self.writer = None
                self.reader = None
        logger.log_event("irc", "disconnected", level=logging.WARNING)


async def connect_with_retry(connection: IRCConnection) -> IRCConnection:
    """Open ``connection``, retrying transient failures with backoff.

    Raises:
        NetworkError: When every attempt failed.
    """
    await handle_transport_retry(
        connection.open, f"connect to {connection.host}:{connection.port}"
    )
    return connection
