r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff", "retry_delay_exp2"]

from refetch.backoff.base import BaseBackoffStrategy, cap_delay, check_delays
from refetch.config import DEFAULT_RETRY_DELAY_MS


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt), with optional max_delay cap.

    Args:
        base_delay: The delay in milliseconds before the first retry
            (default: 1000).
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from refetch.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=100)
        >>> [backoff(attempt) for attempt in range(4)]
        [100, 200, 400, 800]
        >>> ExponentialBackoff(base_delay=1000, max_delay=5000)(10)
        5000

        ```
    """

    def __init__(
        self, base_delay: float = DEFAULT_RETRY_DELAY_MS, max_delay: float | None = None
    ) -> None:
        check_delays("base_delay", base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        return cap_delay(self.base_delay * (2**attempt), self.max_delay)


def retry_delay_exp2(start_delay: float = DEFAULT_RETRY_DELAY_MS) -> ExponentialBackoff:
    """Return a delay function computing ``2 ** attempt * start_delay``.

    Example:
        ```pycon
        >>> from refetch.backoff import retry_delay_exp2
        >>> delay = retry_delay_exp2(500)
        >>> delay(0), delay(1), delay(2)
        (500, 1000, 2000)

        ```
    """
    return ExponentialBackoff(base_delay=start_delay)
