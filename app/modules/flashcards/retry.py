"""Bounded exponential-backoff retry around a single backend call.

The wait before retry ``i`` (1-based) is ``base_delay * 2**(i - 1)``: with the
default one second base that is 1s, 2s, 4s, ... No jitter and no shared state,
so concurrent invocations never interact. Backoff waits go through an
awaitable ``sleep`` so cancelling the calling task interrupts them.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.core.logging import get_logger
from app.modules.flashcards.errors import RemoteInvocationFailed

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 1.0

SleepFn = Callable[[float], Awaitable[None]]

logger = get_logger(__name__)


def _log_retry(max_attempts: int) -> Callable[[RetryCallState], None]:
    def before_sleep(state: RetryCallState) -> None:
        logger.warning(
            "Retrying after error... (%d/%d) in %.1fs: %s",
            state.attempt_number,
            max_attempts,
            state.next_action.sleep if state.next_action else 0.0,
            state.outcome.exception() if state.outcome else None,
        )

    return before_sleep


async def invoke(
    request_fn: Callable[[], Awaitable[T]],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    base_delay: float = DEFAULT_BASE_DELAY,
    sleep: SleepFn = asyncio.sleep,
) -> T:
    """Await ``request_fn()`` until it succeeds or attempts run out.

    Raises ``RemoteInvocationFailed`` chained to the last error once every
    attempt failed. ``CancelledError`` is a ``BaseException`` and so is never
    retried.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=base_delay),
        retry=retry_if_exception_type(Exception),
        sleep=sleep,
        before_sleep=_log_retry(max_attempts),
    )
    try:
        async for attempt in retrying:
            with attempt:
                return await request_fn()
    except RetryError as e:
        last_error = e.last_attempt.exception()
        logger.error(
            "Remote call failed after %d attempt(s): %s", max_attempts, last_error
        )
        raise RemoteInvocationFailed(max_attempts, last_error) from last_error

    # Unreachable: the retry loop either returns or raises
    raise RuntimeError("Max retries reached")
