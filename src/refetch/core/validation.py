r"""Parameter validation utilities for client configuration.

This module provides validation functions for the parameters of
``ClientConfig`` and ``AsyncHttpClient`` so that invalid settings fail
when the client is built rather than on the first request.
"""

from __future__ import annotations

__all__ = ["validate_callable", "validate_retries", "validate_timeout"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from refetch.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retries(retries: int | None) -> None:
    """Validate the attempt ceiling.

    Args:
        retries: Maximum number of attempts, or ``None`` for a single
            attempt. Must be >= 0 when provided.

    Raises:
        ValueError: If retries is negative.

    Example:
        ```pycon
        >>> from refetch.core.validation import validate_retries
        >>> validate_retries(3)
        >>> validate_retries(None)

        ```
    """
    if retries is not None and retries < 0:
        msg = f"retries must be >= 0, got {retries}"
        raise ValueError(msg)


def validate_callable(name: str, value: Any, *, optional: bool = True) -> None:
    """Validate that a configured hook or policy function is callable.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.
        optional: Whether ``None`` is accepted.

    Raises:
        TypeError: If value is not callable.
    """
    if value is None and optional:
        return
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)
