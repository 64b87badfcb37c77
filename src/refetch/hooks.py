r"""Request, response and error hooks.

The client exposes three hooks, all configured on ``ClientConfig``:

- intercept_request: called with the final URL and the merged options
  before every attempt; it may mutate the options (e.g. inject headers)
- inspect_response: called with the metadata of every successful response
- inspect_error: called with every failure, including each failed attempt

Hook exceptions are not caught.

Example:
    ```pycon
    >>> from refetch.core.config import ClientConfig
    >>> def add_token(url, options):
    ...     options["headers"]["Authorization"] = "Bearer token"
    ...
    >>> config = ClientConfig(intercept_request=add_token)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["HookManager", "ResponseMetadata"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from refetch.config import SUCCESS_STATUS_RANGE

if TYPE_CHECKING:
    import httpx

    from refetch.core.config import ClientConfig
    from refetch.exceptions import ClientError

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseMetadata:
    """Information passed to the inspect_response hook.

    The body is deliberately absent since it has not been read yet.

    Attributes:
        url: The URL of the response.
        status_code: The numeric HTTP status code.
        reason_phrase: The textual status (e.g. ``"OK"``).
        headers: The response headers.
        http_version: The HTTP version (e.g. ``"HTTP/1.1"``).
    """

    url: str
    status_code: int
    reason_phrase: str
    headers: httpx.Headers
    http_version: str

    @property
    def ok(self) -> bool:
        return self.status_code in SUCCESS_STATUS_RANGE

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResponseMetadata:
        return cls(
            url=str(response.url),
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=response.headers,
            http_version=response.http_version,
        )


class HookManager:
    """Invokes the hooks of a client configuration.

    Attributes:
        config: Configuration holding the hook functions.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def intercept_request(self, url: str, options: dict[str, Any]) -> None:
        """Invoke the intercept_request hook.

        Args:
            url: The final URL of the attempt.
            options: The merged options, mutable in place by the hook.
        """
        if self.config.intercept_request is not None:
            self.config.intercept_request(url, options)

    def inspect_response(self, response: httpx.Response) -> None:
        """Invoke the inspect_response hook with the response metadata.

        Args:
            response: The successful response.
        """
        if self.config.inspect_response is not None:
            self.config.inspect_response(ResponseMetadata.from_response(response))

    def inspect_error(self, error: ClientError) -> None:
        """Invoke the inspect_error hook.

        Args:
            error: The failure of the attempt.
        """
        logger.debug(f"Request failed: {error!r}")
        if self.config.inspect_error is not None:
            self.config.inspect_error(error)
