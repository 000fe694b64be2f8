"""Trigger-prefixed chat commands backed by the factoid store."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..constants import DEFAULT_TRIGGER
from ..irc.models import Message, User
from ..irc.parser import privmsg
from ..logs.logger import logger
from .store import FactoidStore


def parse_command(text: str, trigger: str = DEFAULT_TRIGGER) -> tuple[str, list[str]] | None:
    """Split ``$name arg1 arg2`` into ``("name", ["arg1", "arg2"])``.

    Returns None when ``text`` does not start with the trigger.
    """
    if not text.startswith(trigger):
        return None
    name, _, raw_args = text[len(trigger) :].partition(" ")
    return name, raw_args.split()


class CommandDispatcher:
    """Turns a PRIVMSG into the outbound lines it should produce.

    ``dispatch`` never raises for user mistakes (unknown factoid, missing
    arguments); those are no-ops or a chat notice. Store write failures do
    propagate.
    """

    def __init__(
        self,
        store: FactoidStore,
        trigger: str = DEFAULT_TRIGGER,
    ) -> None:
        self.store = store
        self.trigger = trigger
        self._verbs: dict[str, Callable[[Message, str, list[str]], list[str]]] = {
            "defact": self._defact,
            "factoids": self._factoids,
            "at": self._at,
        }

    def dispatch(self, message: Message) -> list[str]:
        if len(message.params) < 2:
            return []
        parsed = parse_command(message.params[1], self.trigger)
        if parsed is None:
            return []
        name, args = parsed
        target = self.reply_target(message)
        logger.log_event(
            "command",
            "received",
            level=logging.DEBUG,
            nick=message.nick,
            channel=target,
            command=name,
            args=len(args),
        )
        verb = self._verbs.get(name)
        if verb is None:
            return self._lookup(target, name)
        return verb(message, target, args)

    def reply_target(self, message: Message) -> str:
        """Replies go back to where the message arrived (channel or nick)."""
        return message.params[0]

    def _defact(self, message: Message, target: str, args: list[str]) -> list[str]:
        if len(args) < 2:
            logger.log_event(
                "command", "defact_rejected", level=logging.DEBUG, nick=message.nick
            )
            return []
        name, text = args[0], " ".join(args[1:])
        self.store.define(name, text)
        if isinstance(message.sender, User):
            return [privmsg(target, f"{message.sender.nick}: defined {name}")]
        return []

    def _factoids(self, message: Message, target: str, args: list[str]) -> list[str]:
        listing = " ".join(self.store.names())
        if isinstance(message.sender, User):
            return [privmsg(target, f"{message.sender.nick}: {listing}")]
        return [privmsg(target, listing)]

    def _at(self, message: Message, target: str, args: list[str]) -> list[str]:
        if len(args) < 2:
            return []
        recipient, name = args[0], args[1]
        value = self.store.get(name)
        if value is not None:
            return [privmsg(target, f"{recipient}: {value}")]
        if isinstance(message.sender, User):
            return [privmsg(target, f"{message.sender.nick}: No such factoid: {name}")]
        return []

    def _lookup(self, target: str, name: str) -> list[str]:
        value = self.store.get(name)
        if value is None:
            return []
        return [privmsg(target, value)]
