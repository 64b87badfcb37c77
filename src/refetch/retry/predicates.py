r"""Retry predicates deciding whether an outcome deserves another
attempt.

A retry predicate is called with the attempt index (0-indexed) and the
outcome of that attempt and returns ``True`` to request another attempt.
The attempt ceiling is enforced separately by ``RetryDecider``.
"""

from __future__ import annotations

__all__ = ["RetryPredicate", "outcome_status_code", "retry_on_failure", "retry_on_status"]

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from refetch.config import RETRY_STATUS_CODES
from refetch.outcome import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

    from refetch.outcome import Outcome

RetryPredicate = Callable[[int, "Outcome[Any]"], bool]


def retry_on_failure(attempt: int, outcome: Outcome[Any]) -> bool:  # noqa: ARG001
    """Default predicate: retry every failure, never retry a success.

    Example:
        ```pycon
        >>> from refetch.exceptions import make_error
        >>> from refetch.outcome import Failure, Success
        >>> from refetch.retry import retry_on_failure
        >>> retry_on_failure(0, Failure(make_error()))
        True
        >>> retry_on_failure(0, Success(None))
        False

        ```
    """
    return isinstance(outcome, Failure)


def outcome_status_code(outcome: Outcome[Any]) -> int | None:
    """Return the HTTP status code carried by an outcome, if any.

    Successes expose the status of the wrapped response. Failures expose
    ``error.status_code`` and fall back to the status of ``error.response``.
    """
    if isinstance(outcome, Success):
        return getattr(outcome.value, "status_code", None)
    error = outcome.error
    if error.status_code is not None:
        return error.status_code
    if error.response is not None:
        return error.response.status_code
    return None


def retry_on_status(statuses: Iterable[int] = RETRY_STATUS_CODES) -> RetryPredicate:
    """Build a predicate retrying only outcomes with one of ``statuses``.

    Both paths are checked: the status of a successful response and the
    status code of a failure. Failures without a status (transport or
    decoding failures) are not retried.

    Args:
        statuses: The retryable HTTP status codes.

    Returns:
        The retry predicate.

    Example:
        ```pycon
        >>> from refetch.exceptions import make_error
        >>> from refetch.outcome import Failure
        >>> from refetch.retry import retry_on_status
        >>> retry_on = retry_on_status([401, 500])
        >>> retry_on(0, Failure(make_error(status_code=500)))
        True
        >>> retry_on(0, Failure(make_error(status_code=404)))
        False

        ```
    """
    retryable = frozenset(statuses)

    def predicate(attempt: int, outcome: Outcome[Any]) -> bool:  # noqa: ARG001
        return outcome_status_code(outcome) in retryable

    return predicate
