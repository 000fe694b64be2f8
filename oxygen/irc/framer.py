"""Split an incoming byte stream into CR LF terminated protocol lines."""

from __future__ import annotations

from typing import Protocol

from ..constants import LINE_TERMINATOR, MAX_LINE_BUFFER, READ_CHUNK_SIZE
from ..errors.internal import ConnectionClosedError, ParsingError


class ByteSource(Protocol):
    async def read(self, n: int) -> bytes: ...


class LineFramer:
    """Produces lines in batches, one batch per read-to-terminator cycle.

    Each batch holds every complete line received so far, in order, followed
    by an empty string marking the end of the batch. Bytes after the last
    terminator are kept and completed by the next cycle, up to ``max_buffer``
    bytes.
    """

    def __init__(
        self,
        source: ByteSource,
        chunk_size: int = READ_CHUNK_SIZE,
        max_buffer: int = MAX_LINE_BUFFER,
    ) -> None:
        self.source = source
        self.chunk_size = chunk_size
        self.max_buffer = max_buffer
        self._buffer = b""

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet terminated."""
        return self._buffer

    async def read_batch(self) -> list[str]:
        """Read until at least one full line is buffered and return the batch.

        Raises:
            ConnectionClosedError: If the source reports end of stream.
            ParsingError: If more than ``max_buffer`` bytes arrive without a
                line terminator.
        """
        while LINE_TERMINATOR not in self._buffer:
            chunk = await self.source.read(self.chunk_size)
            if not chunk:
                raise ConnectionClosedError(
                    "connection closed by peer",
                    data={"pending_bytes": len(self._buffer)},
                )
            self._buffer += chunk
            if (
                len(self._buffer) > self.max_buffer
                and LINE_TERMINATOR not in self._buffer
            ):
                raise ParsingError(
                    "unterminated line exceeds buffer limit",
                    data={
                        "buffered_bytes": len(self._buffer),
                        "max_buffer": self.max_buffer,
                    },
                )

        segments = self._buffer.split(LINE_TERMINATOR)
        self._buffer = segments.pop()
        lines = [segment.decode("utf-8", errors="replace") for segment in segments]
        lines.append("")
        return lines
