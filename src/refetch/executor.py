r"""Request executor performing a single attempt.

One attempt merges the configuration with the call, builds the target
URL, lets the request interceptor see the final options, dispatches
through the transport and classifies what comes back:

- the transport raises: ``Failure`` with ``cause`` set
- the status is outside 2xx: ``Failure`` with ``status`` and
  ``status_code`` set
- otherwise: ``Success(ResponseHandle)``

Every failure is shown to the inspect_error hook before it is returned.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from refetch.config import SUCCESS_STATUS_RANGE
from refetch.core.request import build_url, merge_options
from refetch.exceptions import ClientError, make_error
from refetch.hooks import HookManager
from refetch.outcome import Failure, Success
from refetch.response import ResponseHandle, wrap_response

if TYPE_CHECKING:
    import httpx

    from refetch.core.config import ClientConfig, RequestSpec
    from refetch.outcome import Outcome
    from refetch.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)


class RequestCancelledError(Exception):
    """Raised internally when the cancel event fires during a dispatch."""


class RequestExecutor:
    """Performs single request attempts for a client configuration.

    Attributes:
        config: The client configuration.
        transport: The transport used to dispatch requests.
        hooks: Manager invoking the configured hooks.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from refetch.core.config import ClientConfig, RequestSpec
        >>> from refetch.executor import RequestExecutor
        >>> from refetch.transport import HttpxTransport
        >>> async def main():
        ...     transport = httpx.MockTransport(lambda request: httpx.Response(404))
        ...     async with httpx.AsyncClient(transport=transport) as client:
        ...         executor = RequestExecutor(
        ...             ClientConfig(base_url="https://example.com"), HttpxTransport(client)
        ...         )
        ...         outcome = await executor.execute(RequestSpec("/data"))
        ...     return outcome.unwrap_err().status_code
        ...
        >>> asyncio.run(main())
        404

        ```
    """

    def __init__(self, config: ClientConfig, transport: Transport) -> None:
        self.config = config
        self.transport = transport
        self.hooks = HookManager(config)

    def prepare(self, spec: RequestSpec) -> tuple[str, dict[str, Any]]:
        """Build the target URL and the merged options of an attempt.

        Args:
            spec: The call description.

        Returns:
            A tuple of (url, options). The options dict is new on every
            call.
        """
        url = build_url(self.config.base_url, spec.path, spec.query)
        return url, merge_options(self.config, spec)

    async def execute(
        self, spec: RequestSpec, cancel_event: asyncio.Event | None = None
    ) -> Outcome[ResponseHandle[Any]]:
        """Perform one attempt.

        Args:
            spec: The call description.
            cancel_event: Optional event aborting the in-flight dispatch
                when set.

        Returns:
            ``Success`` with the wrapped response when the status is in
            the 2xx range, ``Failure`` otherwise.
        """
        try:
            url, options = self.prepare(spec)
        except (TypeError, ValueError) as exc:
            logger.debug(f"{spec.method} {spec.path}: cannot serialize payload: {exc}")
            return self.fail(make_error(message=str(exc), cause=exc))
        self.hooks.intercept_request(url, options)
        logger.debug(f"{spec.method} {url}: dispatching")

        try:
            raw = await self._dispatch(url, options, cancel_event)
        except RequestCancelledError:
            return self.cancelled(url)
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"{spec.method} {url}: transport failed with {type(exc).__name__}: {exc}")
            return self.fail(
                make_error(
                    message=str(exc),
                    cause=exc,
                    request=_request_of(exc),
                )
            )

        if raw.status_code not in SUCCESS_STATUS_RANGE:
            logger.debug(f"{spec.method} {url}: failed with status {raw.status_code}")
            await _release(raw)
            return self.fail(
                make_error(
                    message=raw.reason_phrase,
                    status=raw.reason_phrase,
                    status_code=raw.status_code,
                    request=_request_of(raw),
                    response=raw,
                )
            )

        logger.debug(f"{spec.method} {url}: succeeded with status {raw.status_code}")
        handle = wrap_response(raw)
        self.hooks.inspect_response(raw)
        return Success(handle)

    def fail(self, error: ClientError) -> Failure:
        """Show ``error`` to the inspect_error hook and wrap it."""
        self.hooks.inspect_error(error)
        return Failure(error)

    def cancelled(self, url: str) -> Failure:
        """Build the failure reported for a cancelled call."""
        logger.debug(f"Request to {url} cancelled")
        return self.fail(make_error(message="Request cancelled", cause=asyncio.CancelledError()))

    async def _dispatch(
        self, url: str, options: dict[str, Any], cancel_event: asyncio.Event | None
    ) -> httpx.Response:
        if cancel_event is None:
            return await self.transport.dispatch(url, options)
        if cancel_event.is_set():
            raise RequestCancelledError

        dispatch = asyncio.ensure_future(self.transport.dispatch(url, options))
        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({dispatch, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not dispatch.done():
                dispatch.cancel()
                await asyncio.wait({dispatch})
        if dispatch.cancelled():
            raise RequestCancelledError
        return dispatch.result()


def _request_of(source: Exception | httpx.Response) -> httpx.Request | None:
    try:
        return source.request
    except (AttributeError, RuntimeError):
        # httpx raises RuntimeError when no request was attached
        return None


async def _release(raw: httpx.Response) -> None:
    # Buffer the error body so the connection is released and
    # ``error.response.text`` stays readable.
    try:
        await raw.aread()
    except Exception as exc:  # noqa: BLE001
        logger.debug(f"Could not read error body: {type(exc).__name__}: {exc}")
        await raw.aclose()
