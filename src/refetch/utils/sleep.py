r"""Sleep helpers for the wait between two attempts."""

from __future__ import annotations

__all__ = ["sleep_ms"]

import asyncio
import logging

logger: logging.Logger = logging.getLogger(__name__)


async def sleep_ms(delay_ms: float, cancel_event: asyncio.Event | None = None) -> bool:
    """Suspend the current task for ``delay_ms`` milliseconds.

    When a cancel event is given the wait ends early as soon as the event
    is set.

    Args:
        delay_ms: The delay in milliseconds. Negative values are treated
            as zero.
        cancel_event: Optional event interrupting the wait.

    Returns:
        ``True`` if the wait was interrupted by the cancel event,
        ``False`` if the full delay elapsed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from refetch.utils.sleep import sleep_ms
        >>> asyncio.run(sleep_ms(1))
        False

        ```
    """
    seconds = max(delay_ms, 0) / 1000
    logger.debug(f"Waiting {seconds:.3f}s before next attempt")
    if cancel_event is None:
        await asyncio.sleep(seconds)
        return False
    if cancel_event.is_set():
        return True
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        return False
    return True
