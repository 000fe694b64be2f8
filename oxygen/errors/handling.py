from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..constants import CONNECT_MAX_ATTEMPTS, CONNECT_RETRY_MAX_WAIT
from ..logging_config import log_structured_error
from .internal import (
    ConfigError,
    InternalError,
    NetworkError,
    ParsingError,
    StoreError,
)

T = TypeVar("T")


def classify_error(error: BaseException) -> str:
    """Map an exception onto the error type used for structured logging."""
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, StoreError):
        return "store"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged = dict(getattr(error, "data", None) or {})
    if context:
        merged.update(context)
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=merged or None,
    )


async def handle_transport_retry(
    operation: Callable[[], Awaitable[T]],
    context: str,
    max_attempts: int | None = None,
    max_wait: float | None = None,
) -> T:
    """Run a transport operation with Tenacity-based exponential backoff.

    Only NetworkError / OSError are retried; anything else propagates on the
    first attempt.

    Args:
        operation: The async operation to execute.
        context: Descriptive context for log lines.
        max_attempts: Maximum number of attempts (CONNECT_MAX_ATTEMPTS if None).
        max_wait: Backoff ceiling in seconds (CONNECT_RETRY_MAX_WAIT if None).

    Returns:
        The result of the first successful attempt.

    Raises:
        NetworkError: If every attempt failed.
    """
    if max_attempts is None:
        max_attempts = CONNECT_MAX_ATTEMPTS
    if max_wait is None:
        max_wait = CONNECT_RETRY_MAX_WAIT

    def before_attempt(retry_state):
        if retry_state.attempt_number > 1:
            logging.info(f"Retrying {context} (attempt {retry_state.attempt_number})")

    def after_attempt(retry_state):
        if retry_state.outcome.failed:
            log_error(
                f"Attempt {retry_state.attempt_number} failed for {context}",
                retry_state.outcome.exception(),
                context={"attempt": retry_state.attempt_number},
            )

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, max=max_wait),
        retry=retry_if_exception_type((NetworkError, OSError)),
        before=before_attempt,
        after=after_attempt,
    )
    try:
        return await retrying(operation)
    except RetryError as e:
        last = e.last_attempt.exception()
        raise NetworkError(
            f"{context} failed after {max_attempts} attempts: {last}",
            data={"attempts": max_attempts},
        ) from last
