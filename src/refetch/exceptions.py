r"""Error model shared by every failure the client reports.

A single ``ClientError`` type represents the three failure kinds the
client can produce. They are told apart by which fields are populated:

- transport failure: ``cause`` is set, ``status_code`` is ``None``
- status failure: ``status`` and ``status_code`` are set
- body decode failure: ``cause`` is set, ``response`` is set, no status
"""

from __future__ import annotations

__all__ = ["DEFAULT_ERROR_MESSAGE", "ClientError", "is_client_error", "make_error"]

import asyncio
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import TypeGuard

    import httpx

DEFAULT_ERROR_MESSAGE = "Http Client Error"


class ClientError(Exception):
    """Failure value carried by ``Failure`` outcomes.

    Transport and body-read failures use the message of the causing
    exception. An exception with an empty message (e.g.
    ``httpx.ConnectError("")``) falls back to ``DEFAULT_ERROR_MESSAGE``
    through ``make_error``.

    Args:
        message: Human readable description of the failure.
        status: Optional textual status (the reason phrase, e.g. ``"Not Found"``).
        status_code: Optional numeric HTTP status code.
        cause: Optional underlying exception.
        request: Optional originating request.
        response: Optional response that produced the failure.

    Example:
        ```pycon
        >>> from refetch.exceptions import ClientError
        >>> error = ClientError("Not Found", status="Not Found", status_code=404)
        >>> error.status_code
        404
        >>> error.cause is None
        True

        ```
    """

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        status: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.status_code = status_code
        self.cause = cause
        self.request = request
        self.response = response
        if cause is not None:
            self.__cause__ = cause

    @property
    def is_transport_failure(self) -> bool:
        """Whether the request never produced a response."""
        return self.cause is not None and self.response is None

    @property
    def is_status_failure(self) -> bool:
        """Whether a response arrived with a status outside the success
        range."""
        return self.status_code is not None

    @property
    def is_cancelled(self) -> bool:
        """Whether the failure was caused by cancellation."""
        return isinstance(self.cause, asyncio.CancelledError)

    def __repr__(self) -> str:
        parts = [repr(self.message)]
        if self.status_code is not None:
            parts.append(f"status_code={self.status_code}")
        if self.cause is not None:
            parts.append(f"cause={type(self.cause).__name__}")
        return f"{type(self).__name__}({', '.join(parts)})"


def make_error(
    *,
    message: str | None = None,
    cause: BaseException | None = None,
    status: str | None = None,
    status_code: int | None = None,
    request: httpx.Request | None = None,
    response: httpx.Response | None = None,
) -> ClientError:
    """Create a ``ClientError`` from optional fields.

    Fields that are not provided stay ``None`` so callers can tell "no
    status" apart from a status of ``0``. An empty or missing message
    falls back to ``DEFAULT_ERROR_MESSAGE``.

    Args:
        message: Optional error message.
        cause: Optional underlying exception.
        status: Optional textual status.
        status_code: Optional numeric status code.
        request: Optional originating request.
        response: Optional response.

    Returns:
        The new error.

    Example:
        ```pycon
        >>> from refetch.exceptions import make_error
        >>> error = make_error(cause=ValueError("boom"))
        >>> error.message
        'Http Client Error'
        >>> error.status_code is None
        True
        >>> make_error(status_code=0).status_code
        0

        ```
    """
    return ClientError(
        message or DEFAULT_ERROR_MESSAGE,
        status=status,
        status_code=status_code,
        cause=cause,
        request=request,
        response=response,
    )


def is_client_error(value: Any) -> TypeGuard[ClientError]:
    """Return whether ``value`` is a ``ClientError``.

    Example:
        ```pycon
        >>> from refetch.exceptions import is_client_error, make_error
        >>> is_client_error(make_error())
        True
        >>> is_client_error(ValueError())
        False

        ```
    """
    return isinstance(value, ClientError)
