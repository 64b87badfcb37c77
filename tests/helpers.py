r"""Shared test helpers.

The network is replaced with ``httpx.MockTransport`` so that tests go
through the real httpx request/response machinery.
"""

from __future__ import annotations

__all__ = [
    "BASE_URL",
    "FailingStream",
    "RecordingHandler",
    "ResetStream",
    "make_request",
    "mock_http_client",
    "reply",
]

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import httpx

from refetch import AsyncHttpClient, HttpxTransport

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from refetch import ClientConfig

BASE_URL = "https://example.com"


def reply(status_code: int = 200, **kwargs: Any) -> Callable[[httpx.Request], httpx.Response]:
    """Return a reply building a fresh ``httpx.Response`` on every call."""

    def build(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(status_code, **kwargs)

    return build


class RecordingHandler:
    """MockTransport handler replaying a sequence of replies.

    Each reply is either an exception, raised as a transport failure, or
    a callable building the response. The last reply is repeated once
    the sequence is exhausted. Every received request is recorded.
    """

    def __init__(self, *replies: Exception | Callable[[httpx.Request], httpx.Response]) -> None:
        self.replies = list(replies) or [reply(200)]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        index = min(len(self.requests), len(self.replies) - 1)
        self.requests.append(request)
        current = self.replies[index]
        if isinstance(current, Exception):
            raise current
        return current(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


class FailingStream(httpx.AsyncByteStream):
    """Body stream that breaks after the first chunk."""

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield b'{"partial'
        msg = "connection reset by peer"
        raise httpx.ReadError(msg)


class ResetStream(httpx.AsyncByteStream):
    """Body stream failing with a non-httpx error after the first chunk."""

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield b"partial"
        msg = "reset"
        raise OSError(msg)


@asynccontextmanager
async def mock_http_client(
    handler: Callable[[httpx.Request], Any], config: ClientConfig | None = None
) -> AsyncIterator[AsyncHttpClient]:
    """Yield an ``AsyncHttpClient`` whose network is ``handler``."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        yield AsyncHttpClient(config, transport=HttpxTransport(http))


def make_request(url: str = f"{BASE_URL}/data") -> httpx.Request:
    return httpx.Request("GET", url)
