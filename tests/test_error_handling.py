from __future__ import annotations

import logging

import pytest

from oxygen.errors import (
    ConfigError,
    ConnectionClosedError,
    InternalError,
    IRCParseError,
    NetworkError,
    StoreError,
    classify_error,
    handle_transport_retry,
    log_error,
)
from oxygen.logging_config import error_aggregator


@pytest.fixture(autouse=True)
def _reset_aggregator():
    error_aggregator.reset()
    yield
    error_aggregator.reset()


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NetworkError("x"), "network"),
        (ConnectionClosedError("x"), "network"),
        (ConnectionResetError(), "network"),
        (IRCParseError("x", "line"), "parsing"),
        (StoreError("x"), "store"),
        (ConfigError("x"), "config"),
        (InternalError("x"), "internal"),
        (RuntimeError("x"), "unknown"),
    ],
)
def test_classify_error(error, expected):
    assert classify_error(error) == expected


def test_internal_error_copies_data():
    data = {"a": 1}
    err = InternalError("boom", data=data)
    data["a"] = 2
    assert err.data == {"a": 1}
    assert InternalError("x").data == {}


def test_log_error_records_and_logs(caplog):
    with caplog.at_level(logging.ERROR):
        log_error("Saving failed", StoreError("disk full", data={"path": "f.txt"}))
    assert "[STORE] Saving failed: disk full" in caplog.text
    assert "path=f.txt" in caplog.text
    summary = error_aggregator.get_error_summary()
    assert summary["store"]["total_count"] == 1


@pytest.mark.asyncio
async def test_transport_retry_succeeds_after_failures():
    calls = 0

    async def flaky() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise NetworkError("refused")
        return "ok"

    assert await handle_transport_retry(flaky, "connect", max_attempts=3, max_wait=0) == "ok"
    assert calls == 3


@pytest.mark.asyncio
async def test_transport_retry_exhausted_raises_network_error():
    async def down() -> None:
        raise OSError("unreachable")

    with pytest.raises(NetworkError) as exc:
        await handle_transport_retry(down, "connect", max_attempts=2, max_wait=0)
    assert exc.value.data == {"attempts": 2}
    assert isinstance(exc.value.__cause__, OSError)


@pytest.mark.asyncio
async def test_transport_retry_does_not_retry_other_errors():
    calls = 0

    async def broken() -> None:
        nonlocal calls
        calls += 1
        raise ValueError("bug")

    with pytest.raises(ValueError):
        await handle_transport_retry(broken, "connect", max_attempts=3, max_wait=0)
    assert calls == 1
