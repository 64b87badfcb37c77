from __future__ import annotations

from unittest.mock import Mock

import pytest

from refetch.exceptions import make_error
from refetch.outcome import Failure, Success
from refetch.retry import RetryDecider, retry_on_failure

FAILURE = Failure(make_error(message="boom"))
SUCCESS = Success("value")

##################################
#     Tests for RetryDecider     #
##################################


def test_retry_decider_retries_failure_below_ceiling() -> None:
    decider = RetryDecider(retries=3, retry_on=retry_on_failure)
    assert decider.should_retry(0, FAILURE) == (True, "retry_on predicate")
    assert decider.should_retry(1, FAILURE) == (True, "retry_on predicate")


def test_retry_decider_stops_at_ceiling() -> None:
    decider = RetryDecider(retries=3, retry_on=retry_on_failure)
    assert decider.should_retry(2, FAILURE) == (False, "attempt ceiling reached")


def test_retry_decider_never_retries_success_by_default() -> None:
    decider = RetryDecider(retries=3, retry_on=retry_on_failure)
    assert decider.should_retry(0, SUCCESS) == (False, "retry_on returned False")


@pytest.mark.parametrize("retries", [0, 1])
def test_retry_decider_single_attempt_ceilings(retries: int) -> None:
    decider = RetryDecider(retries=retries, retry_on=retry_on_failure)
    assert decider.should_retry(0, FAILURE) == (False, "attempt ceiling reached")


def test_retry_decider_no_ceiling() -> None:
    decider = RetryDecider(retries=None, retry_on=lambda attempt, outcome: True)
    assert decider.should_retry(0, FAILURE) == (False, "no retry ceiling configured")


def test_retry_decider_evaluates_predicate_first() -> None:
    retry_on = Mock(return_value=True)
    decider = RetryDecider(retries=None, retry_on=retry_on)
    decider.should_retry(0, FAILURE)
    retry_on.assert_called_once_with(0, FAILURE)


def test_retry_decider_predicate_receives_attempt() -> None:
    retry_on = Mock(return_value=False)
    decider = RetryDecider(retries=5, retry_on=retry_on)
    decider.should_retry(3, SUCCESS)
    retry_on.assert_called_once_with(3, SUCCESS)


def test_retry_decider_predicate_can_retry_success() -> None:
    decider = RetryDecider(retries=2, retry_on=lambda attempt, outcome: True)
    assert decider.should_retry(0, SUCCESS) == (True, "retry_on predicate")
