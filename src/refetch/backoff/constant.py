r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from refetch.backoff.base import BaseBackoffStrategy, check_delays
from refetch.config import DEFAULT_RETRY_DELAY_MS


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every attempt. This is the default
    ``retry_delay`` of a ``ClientConfig``.

    Args:
        delay: The fixed delay in milliseconds (default: 1000).

    Example:
        ```pycon
        >>> from refetch.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=250)
        >>> backoff(0)
        250
        >>> backoff(7)
        250

        ```
    """

    def __init__(self, delay: float = DEFAULT_RETRY_DELAY_MS) -> None:
        check_delays("delay", delay)
        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
