r"""Transport collaborator performing the actual HTTP exchange.

The client only needs one operation from its transport:
``dispatch(url, options)`` returning a response whose body has not been
read yet. ``HttpxTransport`` implements it on top of
``httpx.AsyncClient`` in streaming mode, so the body is only downloaded
when one of the ``ResponseHandle`` accessors is awaited.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport"]

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

# Options understood by ``httpx.AsyncClient.build_request``
_REQUEST_OPTIONS = ("cookies", "timeout", "extensions")
# Options understood by ``httpx.AsyncClient.send``
_SEND_OPTIONS = ("auth", "follow_redirects")


class Transport(Protocol):
    """Protocol implemented by transports.

    ``dispatch`` raises on network-level failures (DNS, refused
    connection, TLS, timeout) and returns the response otherwise, whatever
    its status code.
    """

    async def dispatch(self, url: str, options: Mapping[str, Any]) -> httpx.Response: ...


class HttpxTransport:
    """Transport backed by an ``httpx.AsyncClient``.

    Args:
        client: The httpx client used to send requests. Its lifecycle is
            owned by the caller.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from refetch.transport import HttpxTransport
        >>> async def main():  # doctest: +SKIP
        ...     async with httpx.AsyncClient() as client:
        ...         transport = HttpxTransport(client)
        ...         response = await transport.dispatch(
        ...             "https://api.example.com/data", {"method": "GET"}
        ...         )
        ...         await response.aclose()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def dispatch(self, url: str, options: Mapping[str, Any]) -> httpx.Response:
        """Send one request and return the response with an unread body.

        Args:
            url: The target URL.
            options: The merged options: ``method``, ``headers``,
                ``content`` plus any of ``cookies``, ``timeout``,
                ``extensions``, ``auth`` and ``follow_redirects``.

        Returns:
            The response, opened in streaming mode.

        Raises:
            httpx.RequestError: On network-level failures.
        """
        unknown = set(options) - {"method", "headers", "content", *_REQUEST_OPTIONS, *_SEND_OPTIONS}
        if unknown:
            logger.debug(f"Ignoring unsupported transport options: {sorted(unknown)}")
        request = self.client.build_request(
            method=options.get("method", "GET"),
            url=url,
            headers=options.get("headers"),
            content=options.get("content"),
            **{key: options[key] for key in _REQUEST_OPTIONS if key in options},
        )
        return await self.client.send(
            request,
            stream=True,
            **{key: options[key] for key in _SEND_OPTIONS if key in options},
        )
