r"""Retry policy and retry loop.

Public API:
    - AsyncRetryController: runs the attempts of one call
    - RetryDecider: combines the retry predicate with the attempt ceiling
    - retry_on_failure: default predicate, retries every failure
    - retry_on_status: builds a predicate from retryable status codes
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryController",
    "RetryDecider",
    "RetryPredicate",
    "outcome_status_code",
    "retry_on_failure",
    "retry_on_status",
]

from refetch.retry.controller import AsyncRetryController
from refetch.retry.decider import RetryDecider
from refetch.retry.predicates import (
    RetryPredicate,
    outcome_status_code,
    retry_on_failure,
    retry_on_status,
)
