r"""Response wrapper turning body reads into outcomes.

``ResponseHandle`` is an adapter over an ``httpx.Response`` whose body
has not been read yet. Metadata is exposed synchronously while each body
accessor reads the body on demand and returns an outcome: a truncated
stream, an undecodable payload or malformed JSON becomes a ``Failure``
whose error ``cause`` is the original exception.

The handle does not cache decoded values. Whatever the underlying
response does on a second read (httpx returns the buffered bytes, other
transports may fail) is what the accessor reports.
"""

from __future__ import annotations

__all__ = ["FORM_CONTENT_TYPE", "Blob", "ResponseHandle", "wrap_response"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx

from refetch.config import SUCCESS_STATUS_RANGE
from refetch.exceptions import make_error
from refetch.outcome import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from refetch.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Blob:
    """Raw body bytes with their declared media type."""

    content: bytes
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


class ResponseHandle(Generic[T]):
    """Successful response with outcome-returning body accessors.

    Args:
        raw: The underlying response, opened in streaming mode.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from refetch.response import ResponseHandle
        >>> handle = ResponseHandle(httpx.Response(200, json={"message": "hi"}))
        >>> handle.status_code, handle.ok
        (200, True)
        >>> asyncio.run(handle.json()).unwrap()
        {'message': 'hi'}

        ```
    """

    def __init__(self, raw: httpx.Response) -> None:
        self.raw = raw

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def reason_phrase(self) -> str:
        return self.raw.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def ok(self) -> bool:
        return self.raw.status_code in SUCCESS_STATUS_RANGE

    @property
    def url(self) -> httpx.URL:
        return self.raw.url

    @property
    def http_version(self) -> str:
        return self.raw.http_version

    async def text(self) -> Outcome[str]:
        """Read the body as text, decoded with the response charset."""
        return await self._read(lambda raw: raw.text)

    async def json(self) -> Outcome[T]:
        """Read the body and parse it as JSON."""
        return await self._read(lambda raw: raw.json())

    async def binary(self) -> Outcome[bytes]:
        """Read the body as raw bytes."""
        return await self._read(lambda raw: raw.content)

    async def blob(self) -> Outcome[Blob]:
        """Read the body as a ``Blob`` carrying the content type."""
        return await self._read(
            lambda raw: Blob(content=raw.content, content_type=raw.headers.get("content-type"))
        )

    async def form(self) -> Outcome[dict[str, list[str]]]:
        """Read a url-encoded form body.

        Multipart bodies are reported as a failure.
        """
        return await self._read(_decode_form)

    async def aclose(self) -> None:
        """Release the connection without reading the body."""
        await self.raw.aclose()

    async def _read(self, decode: Callable[[httpx.Response], V]) -> Outcome[V]:
        try:
            await self.raw.aread()
            return Success(decode(self.raw))
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"Failed to read body of {self.raw.url}: {type(exc).__name__}: {exc}")
            return Failure(make_error(message=str(exc), cause=exc, response=self.raw))

    def __repr__(self) -> str:
        return f"<ResponseHandle [{self.status_code} {self.reason_phrase}]>"


def _decode_form(raw: httpx.Response) -> dict[str, list[str]]:
    content_type = raw.headers.get("content-type", FORM_CONTENT_TYPE)
    if not content_type.lower().startswith(FORM_CONTENT_TYPE):
        msg = f"Cannot decode a {content_type!r} body as a url-encoded form"
        raise ValueError(msg)
    params = httpx.QueryParams(raw.text)
    return {key: params.get_list(key) for key in params}


def wrap_response(raw: httpx.Response) -> ResponseHandle[Any]:
    """Wrap a raw response into a ``ResponseHandle``."""
    return ResponseHandle(raw)
