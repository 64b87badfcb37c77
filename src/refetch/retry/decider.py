r"""Retry decision logic combining the retry predicate and the attempt
ceiling."""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from refetch.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether another attempt should be made.

    A retry happens only when a ceiling is configured, the ceiling has
    not been reached and the predicate asks for it. Without a ceiling
    every call makes exactly one attempt, so a predicate that always
    returns ``True`` can never loop forever.

    Args:
        retries: Optional ceiling on the total number of attempts.
        retry_on: The retry predicate.

    Example:
        ```pycon
        >>> from refetch.exceptions import make_error
        >>> from refetch.outcome import Failure
        >>> from refetch.retry import RetryDecider, retry_on_failure
        >>> decider = RetryDecider(retries=2, retry_on=retry_on_failure)
        >>> decider.should_retry(0, Failure(make_error()))
        (True, 'retry_on predicate')
        >>> decider.should_retry(1, Failure(make_error()))
        (False, 'attempt ceiling reached')

        ```
    """

    def __init__(
        self,
        retries: int | None,
        retry_on: Callable[[int, Outcome[Any]], bool],
    ) -> None:
        self.retries = retries
        self.retry_on = retry_on

    def should_retry(self, attempt: int, outcome: Outcome[Any]) -> tuple[bool, str]:
        """Determine if the outcome of ``attempt`` should trigger a retry.

        Args:
            attempt: Index of the attempt that produced the outcome
                (0-indexed).
            outcome: The outcome of that attempt.

        Returns:
            Tuple of (should_retry, reason).
        """
        if not self.retry_on(attempt, outcome):
            return (False, "retry_on returned False")
        if self.retries is None:
            return (False, "no retry ceiling configured")
        if attempt + 1 >= self.retries:
            return (False, "attempt ceiling reached")
        return (True, "retry_on predicate")
