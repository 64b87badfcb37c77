r"""Asynchronous client facade.

This module provides the AsyncHttpClient class binding a
``ClientConfig`` once and exposing verb-specific entry points. Every
entry point returns an outcome: ``Success(ResponseHandle)`` or
``Failure(ClientError)``.
"""

from __future__ import annotations

__all__ = ["AsyncHttpClient"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from refetch.core.config import DEFAULT_TIMEOUT, ClientConfig, RequestSpec
from refetch.core.request import serialize_data
from refetch.core.validation import validate_timeout
from refetch.exceptions import make_error
from refetch.executor import RequestExecutor
from refetch.retry.controller import AsyncRetryController
from refetch.transport import HttpxTransport

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from refetch.outcome import Outcome
    from refetch.response import ResponseHandle
    from refetch.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)


class AsyncHttpClient:
    r"""Retrying HTTP client returning outcomes instead of raising.

    Args:
        config: Optional ClientConfig instance. If ``None``, a default
            ClientConfig is used (single attempt, no hooks).
        transport: Optional transport. When omitted the client owns an
            ``httpx.AsyncClient`` and must be used as an async context
            manager.
        timeout: Timeout in seconds of the owned ``httpx.AsyncClient``.
            Ignored when a transport is given.

    Example:
        ```pycon
        >>> import asyncio
        >>> from refetch import AsyncHttpClient, ClientConfig, retry_delay_exp2, retry_on_status
        >>> async def main():  # doctest: +SKIP
        ...     config = ClientConfig(
        ...         base_url="https://api.example.com",
        ...         retries=3,
        ...         retry_delay=retry_delay_exp2(1000),
        ...         retry_on=retry_on_status([401, 500]),
        ...     )
        ...     async with AsyncHttpClient(config) as client:
        ...         outcome = await client.get("/data")
        ...         data = await outcome.and_then(lambda response: response.json())
        ...     return data.unwrap_or({"message": "hello"})
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._timeout = timeout
        self._config = config if config is not None else ClientConfig()
        self._transport = transport
        self._owned_client: httpx.AsyncClient | None = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> Self:
        """Enter the async context manager and create the owned httpx
        client when no transport was injected."""
        if self._transport is None:
            self._owned_client = httpx.AsyncClient(timeout=self._timeout)
            self._transport = HttpxTransport(self._owned_client)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the async context manager and close the owned httpx
        client."""
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
            self._transport = None

    def _ensure_transport(self) -> Transport:
        """Return the transport.

        Raises:
            RuntimeError: If the client owns its transport and is used
                outside of an async context manager.
        """
        if self._transport is None:
            msg = "AsyncHttpClient must be used within an async context manager (async with statement)"
            raise RuntimeError(msg)
        return self._transport

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
        data: Any = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            path: The request path, appended to the configured base URL.
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS, etc.).
            headers: Per-call headers, overriding the default headers.
            content: Optional raw body.
            data: Optional structured payload sent as JSON. Mutually
                exclusive with ``content``. A payload that cannot be
                serialized settles the call as a ``Failure`` without any
                dispatch.
            query: Optional query parameters merged into the URL.
            cancel_event: Optional event cancelling the call when set.
            **kwargs: Per-call transport options (``timeout``,
                ``follow_redirects``, ``extensions``, ...).

        Returns:
            ``Success`` with the response handle, or ``Failure`` with the
            error of the last attempt.

        Raises:
            RuntimeError: If called outside of a context manager while the
                client owns its transport.
        """
        transport = self._ensure_transport()
        spec = RequestSpec(
            path=path,
            method=method,
            headers=headers,
            content=content,
            data=data,
            query=query,
            options=kwargs,
        )
        executor = RequestExecutor(self._config, transport)
        if spec.has_conflicting_body:
            msg = f"{spec.method} {path}: content and data are mutually exclusive"
            logger.debug(msg)
            return executor.fail(make_error(message=msg))
        if spec.data is not None:
            try:
                serialize_data(spec.data)
            except (TypeError, ValueError) as exc:
                logger.debug(f"{spec.method} {path}: cannot serialize data: {exc}")
                return executor.fail(make_error(message=str(exc), cause=exc))

        controller = AsyncRetryController(
            executor,
            retries=self._config.retries,
            retry_delay=self._config.retry_delay,
            retry_on=self._config.retry_on,
        )
        return await controller.execute(spec, cancel_event)

    async def get(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP GET request with automatic retry logic."""
        return await self.request(
            path, method="GET", headers=headers, query=query, cancel_event=cancel_event, **kwargs
        )

    async def head(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP HEAD request with automatic retry logic."""
        return await self.request(
            path, method="HEAD", headers=headers, query=query, cancel_event=cancel_event, **kwargs
        )

    async def options(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP OPTIONS request with automatic retry logic."""
        return await self.request(
            path,
            method="OPTIONS",
            headers=headers,
            query=query,
            cancel_event=cancel_event,
            **kwargs,
        )

    async def delete(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP DELETE request with automatic retry logic."""
        return await self.request(
            path,
            method="DELETE",
            headers=headers,
            query=query,
            cancel_event=cancel_event,
            **kwargs,
        )

    async def post(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
        data: Any = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP POST request with automatic retry logic.

        Example:
            ```pycon
            >>> import asyncio
            >>> from refetch import AsyncHttpClient
            >>> async def main():  # doctest: +SKIP
            ...     async with AsyncHttpClient() as client:
            ...         return await client.post(
            ...             "https://api.example.com/data", data={"key": "value"}
            ...         )
            ...
            >>> asyncio.run(main())  # doctest: +SKIP

            ```
        """
        return await self._send_body(
            "POST", path, headers, content, data, query, cancel_event, kwargs
        )

    async def put(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
        data: Any = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP PUT request with automatic retry logic."""
        return await self._send_body(
            "PUT", path, headers, content, data, query, cancel_event, kwargs
        )

    async def patch(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | bytes | None = None,
        data: Any = None,
        query: Mapping[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Outcome[ResponseHandle[Any]]:
        """Send an HTTP PATCH request with automatic retry logic."""
        return await self._send_body(
            "PATCH", path, headers, content, data, query, cancel_event, kwargs
        )

    async def _send_body(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str] | None,
        content: str | bytes | None,
        data: Any,
        query: Mapping[str, Any] | None,
        cancel_event: asyncio.Event | None,
        kwargs: dict[str, Any],
    ) -> Outcome[ResponseHandle[Any]]:
        return await self.request(
            path,
            method=method,
            headers=headers,
            content=content,
            data=data,
            query=query,
            cancel_event=cancel_event,
            **kwargs,
        )
