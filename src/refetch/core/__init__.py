r"""Configuration, validation and request-building logic."""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "ClientConfig",
    "RequestSpec",
    "build_url",
    "merge_options",
    "serialize_data",
    "validate_callable",
    "validate_retries",
    "validate_timeout",
]

from refetch.core.config import (
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
    ClientConfig,
    RequestSpec,
)
from refetch.core.request import build_url, merge_options, serialize_data
from refetch.core.validation import validate_callable, validate_retries, validate_timeout
