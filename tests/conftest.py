from __future__ import annotations

from pathlib import Path

import pytest

from oxygen.config.model import BotConfig
from oxygen.factoids.store import FactoidStore


class FakeTransport:
    """Replays byte chunks on read and records every line sent."""

    def __init__(self, chunks: list[bytes] | None = None) -> None:
        self.chunks = list(chunks or [])
        self.sent: list[str] = []
        self.reads: list[int] = []

    async def read(self, n: int) -> bytes:
        self.reads.append(n)
        if not self.chunks:
            return b""
        return self.chunks.pop(0)

    async def send_line(self, line: str) -> None:
        self.sent.append(line)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def factoids_path(tmp_path: Path) -> Path:
    return tmp_path / "factoids.txt"


@pytest.fixture
def store(factoids_path: Path) -> FactoidStore:
    return FactoidStore.load(factoids_path)


@pytest.fixture
def config(factoids_path: Path) -> BotConfig:
    return BotConfig(
        nickname="oxygen",
        channels=["#room", "#lobby"],
        host="irc.example.net",
        port=6667,
        factoids_file=str(factoids_path),
    )
