r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "cap_delay", "check_delays"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the attempt index to a wait duration in
    milliseconds. Instances are callable so they can be passed directly
    as the ``retry_delay`` of a ``ClientConfig``.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given attempt.

        Args:
            attempt: The index of the attempt that just completed
                (0-indexed). attempt=0 is the delay before the first retry.

        Returns:
            The delay in milliseconds before the next attempt.
        """

    def __call__(self, attempt: int) -> float:
        return self.calculate(attempt)

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


def check_delays(name: str, delay: float, max_delay: float | None = None) -> None:
    """Validate the delay parameters shared by the backoff strategies.

    Raises:
        ValueError: If ``delay`` is negative or ``max_delay`` is not positive.
    """
    if delay < 0:
        msg = f"{name} must be non-negative, got {delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def cap_delay(delay: float, max_delay: float | None) -> float:
    return delay if max_delay is None else min(delay, max_delay)
