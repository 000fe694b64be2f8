"""Session loop: registration, keep-alive, channel joins and command dispatch."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

from ..constants import RPL_WELCOME
from ..errors.internal import IRCParseError
from ..factoids.commands import CommandDispatcher
from ..logs.logger import logger
from .framer import LineFramer
from .models import Message
from .parser import join_line, parse_irc_message, pong_for, registration_lines

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import BotConfig
    from ..factoids.store import FactoidStore


class Transport(Protocol):
    async def read(self, n: int) -> bytes: ...

    async def send_line(self, line: str) -> None: ...


class BotSession:
    """Owns one connection for its whole lifetime.

    Lines are handled strictly in arrival order and each one is finished
    before the next is looked at. A PING is answered before anything else
    happens for that line.
    """

    def __init__(
        self, config: BotConfig, store: FactoidStore, connection: Transport
    ) -> None:
        self.nickname = config.nickname
        self.channels = list(config.channels)
        self.store = store
        self.connection = connection
        self.framer = LineFramer(connection)
        self.commands = CommandDispatcher(store, trigger=config.trigger)
        self._handlers: dict[str, Callable[[str, Message], Awaitable[None]]] = {
            "PING": self._handle_ping,
            RPL_WELCOME: self._handle_welcome,
            "PRIVMSG": self._handle_privmsg,
        }

    async def send_line(self, line: str) -> None:
        await self.connection.send_line(line)

    async def handshake(self) -> None:
        for line in registration_lines(self.nickname):
            await self.send_line(line)
        logger.log_event("irc", "registration_sent", nick=self.nickname)

    async def run(self) -> None:
        """Register, then process lines until the connection ends.

        Raises:
            ConnectionClosedError: When the peer closes the stream.
            NetworkError: On any other transport failure.
            StoreError: If a factoid could not be persisted.
        """
        await self.handshake()
        while True:
            await self.process_batch(await self.framer.read_batch())

    async def process_batch(self, lines: list[str]) -> None:
        for line in lines:
            if not line:
                break
            await self.handle_line(line)

    async def handle_line(self, line: str) -> None:
        if line == "PING" or line.startswith("PING "):
            await self.send_line(pong_for(line))
            logger.log_event("irc", "ping", level=logging.DEBUG, token=line[5:])
            return
        try:
            message = parse_irc_message(line)
        except IRCParseError as e:
            logger.log_event(
                "irc", "parse_error", level=logging.WARNING, error=str(e), raw=line
            )
            return
        handler = self._handlers.get(message.command)
        if handler is None:
            logger.log_event(
                "irc", "ignored", level=logging.DEBUG, command=message.command
            )
            return
        await handler(line, message)

    async def _handle_ping(self, line: str, message: Message) -> None:
        await self.send_line(pong_for(line))
        logger.log_event("irc", "ping", level=logging.DEBUG, token=message.text)

    async def _handle_welcome(self, line: str, message: Message) -> None:
        logger.log_event("irc", "registered", nick=self.nickname)
        for channel in self.channels:
            await self.send_line(join_line(channel))
            logger.log_event("irc", "join", nick=self.nickname, channel=channel)

    async def _handle_privmsg(self, line: str, message: Message) -> None:
        if len(message.params) < 2:
            logger.log_event(
                "irc", "privmsg_malformed", level=logging.WARNING, raw=line
            )
            return
        logger.log_event(
            "chat",
            "privmsg",
            level=logging.DEBUG,
            nick=message.sender.name,
            channel=message.params[0],
            chat_message=message.params[1],
        )
        for reply in self.commands.dispatch(message):
            await self.send_line(reply)
