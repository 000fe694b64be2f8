#!/usr/bin/env python3
"""
Main entry point for the Oxygen factoid bot
"""

import asyncio
import logging
import sys

from .config import get_configuration
from .config.model import BotConfig
from .constants import RECONNECT_DELAY
from .errors.handling import log_error
from .errors.internal import ConnectionClosedError
from .factoids.store import FactoidStore
from .irc.connection import IRCConnection, connect_with_retry
from .irc.session import BotSession
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def run_session(config: BotConfig, store: FactoidStore) -> None:
    """Connect and run one session until the connection ends.

    Raises:
        ConnectionClosedError: When the server closed the connection.
        NetworkError: If connecting, reading or writing failed.
        StoreError: If a factoid could not be saved.
    """
    connection = await connect_with_retry(IRCConnection(config.host, config.port))
    try:
        await BotSession(config, store, connection).run()
    finally:
        await connection.close()


async def serve(config: BotConfig) -> None:
    """Run sessions with one factoid store, reconnecting only if configured."""
    store = FactoidStore.load(config.factoids_file)
    while True:
        try:
            await run_session(config, store)
        except ConnectionClosedError:
            if not config.reconnect:
                raise
            logger.log_event(
                "irc", "reconnect_wait", level=logging.WARNING, delay=RECONNECT_DELAY
            )
            await asyncio.sleep(RECONNECT_DELAY)


async def main() -> None:
    """Load configuration and serve until the connection ends.

    Raises:
        SystemExit: On a fatal transport or store error.
    """
    try:
        logging.info("🚀 Starting Oxygen factoid bot")
        config = get_configuration()
        await serve(config)
    except asyncio.CancelledError:
        raise
    except ConnectionClosedError as e:
        log_error("Connection ended", e)
        sys.exit(1)
    except Exception as e:
        log_error("Main application error", e)
        sys.exit(1)
    finally:
        logging.info("✅ Application shutdown complete")


def run() -> None:
    """Synchronous entry point for the application."""
    LoggerConfigurator().configure()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except asyncio.CancelledError:
        sys.exit(0)


if __name__ == "__main__":
    run()
