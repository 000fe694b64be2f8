from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from oxygen import main as main_mod
from oxygen.errors.internal import ConnectionClosedError, NetworkError, StoreError


@pytest.mark.asyncio
async def test_serve_stops_when_closed_without_reconnect(config):
    run_session = AsyncMock(side_effect=ConnectionClosedError("closed"))
    with patch.object(main_mod, "run_session", run_session):
        with pytest.raises(ConnectionClosedError):
            await main_mod.serve(config)
    assert run_session.await_count == 1


@pytest.mark.asyncio
async def test_serve_reconnects_with_same_store(config):
    config = config.model_copy(update={"reconnect": True})
    run_session = AsyncMock(
        side_effect=[ConnectionClosedError("closed"), NetworkError("down")]
    )
    with (
        patch.object(main_mod, "run_session", run_session),
        patch.object(main_mod, "RECONNECT_DELAY", 0),
    ):
        with pytest.raises(NetworkError):
            await main_mod.serve(config)
    assert run_session.await_count == 2
    first_store = run_session.await_args_list[0].args[1]
    second_store = run_session.await_args_list[1].args[1]
    assert first_store is second_store


@pytest.mark.asyncio
async def test_run_session_closes_connection(config, store):
    connection = AsyncMock()
    with (
        patch.object(main_mod, "connect_with_retry", AsyncMock(return_value=connection)),
        patch.object(main_mod, "BotSession") as session_cls,
    ):
        session_cls.return_value.run = AsyncMock(side_effect=StoreError("disk"))
        with pytest.raises(StoreError):
            await main_mod.run_session(config, store)
    connection.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_main_exits_on_fatal_error(config):
    with (
        patch.object(main_mod, "get_configuration", return_value=config),
        patch.object(main_mod, "serve", AsyncMock(side_effect=NetworkError("down"))),
        patch.object(main_mod, "log_error") as log_error,
    ):
        with pytest.raises(SystemExit) as exc:
            await main_mod.main()
    assert exc.value.code == 1
    log_error.assert_called_once()
