from __future__ import annotations

import pytest

from oxygen.errors.internal import ConnectionClosedError, NetworkError, ParsingError
from oxygen.irc.framer import LineFramer
from tests.conftest import FakeTransport


@pytest.mark.asyncio
async def test_single_line_batch_ends_with_sentinel():
    framer = LineFramer(FakeTransport([b"PING :abc\r\n"]))
    assert await framer.read_batch() == ["PING :abc", ""]


@pytest.mark.asyncio
async def test_multiple_lines_in_one_chunk():
    framer = LineFramer(FakeTransport([b"A\r\nB\r\nC\r\n"]))
    assert await framer.read_batch() == ["A", "B", "C", ""]


@pytest.mark.asyncio
async def test_line_split_across_reads():
    src = FakeTransport([b"PRIVMSG #room :hel", b"lo\r", b"\n"])
    framer = LineFramer(src)
    assert await framer.read_batch() == ["PRIVMSG #room :hello", ""]
    assert len(src.reads) == 3


@pytest.mark.asyncio
async def test_partial_tail_is_carried_forward():
    framer = LineFramer(FakeTransport([b"A\r\nB", b"C\r\n"]))
    assert await framer.read_batch() == ["A", ""]
    assert framer.pending == b"B"
    assert await framer.read_batch() == ["BC", ""]
    assert framer.pending == b""


@pytest.mark.asyncio
async def test_consecutive_delimiters_produce_empty_lines():
    framer = LineFramer(FakeTransport([b"A\r\n\r\nB\r\n"]))
    assert await framer.read_batch() == ["A", "", "B", ""]


@pytest.mark.asyncio
async def test_invalid_utf8_is_replaced():
    framer = LineFramer(FakeTransport([b"caf\xe9\r\n"]))
    assert await framer.read_batch() == ["caf\ufffd", ""]


@pytest.mark.asyncio
async def test_zero_byte_read_is_terminal():
    framer = LineFramer(FakeTransport([b"partial"]))
    with pytest.raises(ConnectionClosedError) as exc:
        await framer.read_batch()
    assert isinstance(exc.value, NetworkError)
    assert exc.value.data["pending_bytes"] == 7


@pytest.mark.asyncio
async def test_chunk_size_passed_to_source():
    src = FakeTransport([b"X\r\n"])
    await LineFramer(src, chunk_size=16).read_batch()
    assert src.reads == [16]


@pytest.mark.asyncio
async def test_unterminated_flood_is_rejected():
    src = FakeTransport([b"x" * 10, b"y" * 10, b"\r\n"])
    framer = LineFramer(src, chunk_size=10, max_buffer=15)
    with pytest.raises(ParsingError) as exc:
        await framer.read_batch()
    assert exc.value.data["buffered_bytes"] == 20
    assert len(src.reads) == 2


@pytest.mark.asyncio
async def test_terminated_chunk_over_limit_is_accepted():
    framer = LineFramer(FakeTransport([b"A" * 20 + b"\r\n"]), max_buffer=15)
    assert await framer.read_batch() == ["A" * 20, ""]
