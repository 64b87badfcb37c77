r"""Asynchronous retry controller.

This module provides the AsyncRetryController class that runs the
attempts of one call sequentially until the retry policy settles on an
outcome.
"""

from __future__ import annotations

__all__ = ["AsyncRetryController"]

import logging
import time
from typing import TYPE_CHECKING, Any

from refetch.retry.decider import RetryDecider
from refetch.utils.sleep import sleep_ms

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from refetch.core.config import RequestSpec
    from refetch.executor import RequestExecutor
    from refetch.outcome import Outcome
    from refetch.response import ResponseHandle

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryController:
    """Runs request attempts with retry logic.

    The controller moves between three states: attempting (the executor
    runs once), waiting (``retry_delay(attempt)`` milliseconds of
    non-blocking sleep) and settled (the last outcome is returned).
    Attempts of a call never overlap and earlier failures are not
    accumulated: the result is always the outcome of the last attempt.

    Attributes:
        executor: Executor performing single attempts.
        decider: Logic for deciding whether to retry.
        retry_delay: Function mapping the attempt index to a delay in
            milliseconds.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from refetch.core.config import ClientConfig, RequestSpec
        >>> from refetch.executor import RequestExecutor
        >>> from refetch.retry import AsyncRetryController
        >>> from refetch.transport import HttpxTransport
        >>> async def main():  # doctest: +SKIP
        ...     config = ClientConfig(base_url="https://api.example.com", retries=3)
        ...     async with httpx.AsyncClient() as client:
        ...         controller = AsyncRetryController(
        ...             RequestExecutor(config, HttpxTransport(client)),
        ...             retries=config.retries,
        ...             retry_delay=config.retry_delay,
        ...             retry_on=config.retry_on,
        ...         )
        ...         return await controller.execute(RequestSpec("/data"))
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        executor: RequestExecutor,
        *,
        retries: int | None,
        retry_delay: Callable[[int], float],
        retry_on: Callable[[int, Outcome[Any]], bool],
    ) -> None:
        self.executor = executor
        self.decider: RetryDecider = RetryDecider(retries, retry_on)
        self.retry_delay = retry_delay

    async def execute(
        self, spec: RequestSpec, cancel_event: asyncio.Event | None = None
    ) -> Outcome[ResponseHandle[Any]]:
        """Execute a call with automatic retry logic.

        Args:
            spec: The call description, reused unchanged by every attempt.
            cancel_event: Optional event cancelling the call. Once set,
                the in-flight attempt is aborted and no further attempt is
                made.

        Returns:
            The outcome of the last attempt, or a cancellation failure.
        """
        start_time = time.time()
        attempt = 0
        while True:
            outcome = await self.executor.execute(spec, cancel_event)
            if cancel_event is not None and cancel_event.is_set():
                logger.debug(f"{spec.method} {spec.path}: cancelled after attempt {attempt + 1}")
                return outcome

            should_retry, reason = self.decider.should_retry(attempt, outcome)
            if not should_retry:
                logger.debug(
                    f"{spec.method} {spec.path}: settled after {attempt + 1} attempt(s) "
                    f"in {time.time() - start_time:.2f}s ({reason})"
                )
                return outcome

            delay = self.retry_delay(attempt)
            logger.debug(f"{spec.method} {spec.path}: will retry in {delay}ms ({reason})")
            if await sleep_ms(delay, cancel_event):
                return self.executor.cancelled(spec.path)
            attempt += 1
