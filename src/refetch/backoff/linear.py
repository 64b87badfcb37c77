r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from refetch.backoff.base import BaseBackoffStrategy, cap_delay, check_delays
from refetch.config import DEFAULT_RETRY_DELAY_MS


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1), with optional max_delay cap.

    Args:
        base_delay: The delay step in milliseconds (default: 1000).
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from refetch.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=200, max_delay=500)
        >>> [backoff(attempt) for attempt in range(4)]
        [200, 400, 500, 500]

        ```
    """

    def __init__(
        self, base_delay: float = DEFAULT_RETRY_DELAY_MS, max_delay: float | None = None
    ) -> None:
        check_delays("base_delay", base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        return cap_delay(self.base_delay * (attempt + 1), self.max_delay)
