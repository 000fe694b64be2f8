"""IRC data models: message sender variants and the parsed message."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Server:
    """Message originated from a server (prefix without ``!user@host``)."""

    host: str

    @property
    def name(self) -> str:
        return self.host


@dataclass(frozen=True, slots=True)
class User:
    """Message originated from a user (``nick!user@host`` prefix)."""

    nick: str
    user: str
    host: str

    @property
    def name(self) -> str:
        return self.nick


@dataclass(frozen=True, slots=True)
class Nobody:
    """Message carried no prefix at all (e.g. a bare ``PING``)."""

    @property
    def name(self) -> None:
        return None


Sender = Server | User | Nobody


@dataclass(frozen=True, slots=True)
class Message:
    sender: Sender
    command: str
    params: tuple[str, ...] = ()

    @property
    def target(self) -> str | None:
        return self.params[0] if self.params else None

    @property
    def text(self) -> str | None:
        return self.params[-1] if self.params else None

    @property
    def nick(self) -> str | None:
        return self.sender.nick if isinstance(self.sender, User) else None
