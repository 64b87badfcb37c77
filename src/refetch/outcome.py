r"""Outcome type returned by every public operation.

An outcome is either ``Success(value)`` or ``Failure(error)``. Failures
always carry a ``ClientError``; nothing in the client signals a request,
status or decoding failure by raising.

Example:
    ```pycon
    >>> from refetch.outcome import Failure, Success
    >>> from refetch.exceptions import make_error
    >>> Success(2).map(lambda x: x * 10).unwrap()
    20
    >>> Failure(make_error(message="boom")).unwrap_or(0)
    0

    ```
"""

from __future__ import annotations

__all__ = ["Failure", "Outcome", "Success"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar, Union

from refetch.exceptions import ClientError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> ClientError:
        msg = f"Called unwrap_err() on a success: {self.value!r}"
        raise RuntimeError(msg)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def map(self, func: Callable[[T], U]) -> Success[U]:
        """Apply ``func`` to the value."""
        return Success(func(self.value))

    def map_err(self, func: Callable[[ClientError], ClientError]) -> Success[T]:  # noqa: ARG002
        return self

    async def and_then(self, func: Callable[[T], Awaitable[Outcome[U]]]) -> Outcome[U]:
        """Chain an asynchronous operation that itself returns an outcome.

        Example:
            ```pycon
            >>> import asyncio
            >>> from refetch.outcome import Success
            >>> async def double(x):
            ...     return Success(x * 2)
            ...
            >>> asyncio.run(Success(21).and_then(double))
            Success(value=42)

            ```
        """
        return await func(self.value)


@dataclass(frozen=True)
class Failure:
    """Failed outcome holding a ``ClientError``."""

    error: ClientError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        msg = f"Called unwrap() on a failure: {self.error!r}"
        raise RuntimeError(msg) from self.error

    def unwrap_err(self) -> ClientError:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[object], object]) -> Failure:  # noqa: ARG002
        return self

    def map_err(self, func: Callable[[ClientError], ClientError]) -> Failure:
        """Apply ``func`` to the error."""
        return Failure(func(self.error))

    async def and_then(self, func: Callable[[object], Awaitable[Outcome[U]]]) -> Failure:  # noqa: ARG002
        return self


Outcome = Union[Success[T], Failure]
