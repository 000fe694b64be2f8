"""IRC line parsing and outbound line formatting.

Grammar handled here::

    line    = [ ":" prefix " " ] command [ " " params ]
    prefix  = nick [ "!" user "@" host ]
    params  = *( middle " " ) [ ":" trailing ]

Tags, escaping and capability negotiation are not supported.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..errors.internal import IRCParseError
from .models import Message, Nobody, Sender, Server, User


def parse_irc_message(line: str) -> Message:
    """Parse one protocol line (terminator already stripped).

    Raises:
        IRCParseError: If the line does not match the prefix/command shape.
    """
    if not line:
        raise IRCParseError("empty line", line)

    sender: Sender = Nobody()
    rest = line
    if line.startswith(":"):
        prefix, sep, rest = line[1:].partition(" ")
        if not sep:
            raise IRCParseError("prefix without command", line)
        sender = _parse_prefix(prefix, line)

    command, _, params = rest.partition(" ")
    if not _is_word(command):
        raise IRCParseError(f"invalid command token {command!r}", line)

    return Message(sender=sender, command=command, params=split_params(params))


def _parse_prefix(prefix: str, line: str) -> Sender:
    if not prefix:
        raise IRCParseError("empty prefix", line)
    if "!" not in prefix:
        return Server(prefix)
    nick, _, userhost = prefix.partition("!")
    user, at, host = userhost.partition("@")
    if not (nick and user and at and host):
        raise IRCParseError(f"malformed user prefix {prefix!r}", line)
    return User(nick, user, host)


def _is_word(token: str) -> bool:
    return bool(token) and all(c.isalnum() or c == "_" for c in token)


def split_params(text: str) -> tuple[str, ...]:
    """Split a parameter section, honouring the trailing ``:`` parameter.

    Tokens are whitespace separated until one starts with ``:``; that token
    (colon stripped) and everything after it, rejoined with single spaces,
    becomes the last parameter.
    """
    output: list[str] = []
    parts = text.split()
    for i, part in enumerate(parts):
        if part.startswith(":"):
            output.append(" ".join([part[1:], *parts[i + 1 :]]))
            break
        output.append(part)
    return tuple(output)


def pong_for(line: str) -> str:
    """Build the keep-alive answer by swapping the command token in place.

    A leading ``:prefix `` is kept verbatim; the swap happens after it.
    """
    prefix = ""
    if line.startswith(":"):
        head, sep, rest = line.partition(" ")
        prefix, line = head + sep, rest
    return prefix + line.replace("PING", "PONG", 1)


def format_line(command: str, *params: str, trailing: str | None = None) -> str:
    """Build an outbound line (without terminator).

    ``trailing`` is always emitted with its ``:`` marker so it may hold spaces.
    """
    parts = [command, *params]
    if trailing is not None:
        parts.append(f":{trailing}")
    return " ".join(parts)


def privmsg(target: str, text: str) -> str:
    return format_line("PRIVMSG", target, trailing=text)


def registration_lines(nickname: str) -> Iterator[str]:
    yield format_line("NICK", nickname)
    yield format_line("USER", nickname, "*", "*", trailing=nickname)


def join_line(channel: str) -> str:
    return format_line("JOIN", channel)
