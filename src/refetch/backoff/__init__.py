r"""Backoff strategies for the delay between attempts.

Every strategy maps an attempt index to a delay in milliseconds and is
callable, so an instance can be used as the ``retry_delay`` of a
``ClientConfig``.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "LinearBackoff",
    "retry_delay_exp2",
]

from refetch.backoff.base import BaseBackoffStrategy
from refetch.backoff.constant import ConstantBackoff
from refetch.backoff.exponential import ExponentialBackoff, retry_delay_exp2
from refetch.backoff.linear import LinearBackoff
