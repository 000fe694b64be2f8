"""Factoid storage and the chat commands that use it."""

from .commands import CommandDispatcher, parse_command  # noqa: F401
from .store import FactoidStore, parse_factoids, serialize_factoids  # noqa: F401

__all__ = [
    "CommandDispatcher",
    "FactoidStore",
    "parse_command",
    "parse_factoids",
    "serialize_factoids",
]
