"""IRC subsystem package.

Contains the message model, parser, line framer and transport. The session
loop lives in ``oxygen.irc.session`` (it depends on ``oxygen.factoids``).
"""

from .connection import IRCConnection, connect_with_retry  # noqa: F401
from .framer import LineFramer  # noqa: F401
from .models import Message, Nobody, Sender, Server, User  # noqa: F401
from .parser import (  # noqa: F401
    format_line,
    parse_irc_message,
    pong_for,
    privmsg,
    split_params,
)

__all__ = [
    "IRCConnection",
    "LineFramer",
    "Message",
    "Nobody",
    "Sender",
    "Server",
    "User",
    "connect_with_retry",
    "format_line",
    "parse_irc_message",
    "pong_for",
    "privmsg",
    "split_params",
]
