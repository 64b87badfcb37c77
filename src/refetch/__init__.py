r"""refetch - Retrying HTTP client returning outcomes instead of raising.

This package wraps an ``httpx.AsyncClient`` with a configurable retry
policy, request/response/error hooks and an outcome-typed return
contract: every call returns ``Success(ResponseHandle)`` or
``Failure(ClientError)``, and reading the body of a response returns an
outcome too.

Key Features:
    - Retry ceiling, retry predicate and delay function per client
    - Backoff strategies: Constant (default, 1s), Exponential and Linear
    - Predicate helpers: retry every failure (default) or selected statuses
    - Hooks to intercept requests and inspect responses and errors
    - Cooperative cancellation through an ``asyncio.Event``

Example:
    ```pycon
    >>> import asyncio
    >>> from refetch import AsyncHttpClient, ClientConfig, retry_delay_exp2
    >>> async def main():  # doctest: +SKIP
    ...     config = ClientConfig(
    ...         base_url="https://api.example.com", retries=3, retry_delay=retry_delay_exp2()
    ...     )
    ...     async with AsyncHttpClient(config) as client:
    ...         outcome = await client.get("/data", query={"page": 1})
    ...         return await outcome.and_then(lambda response: response.json())
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncHttpClient",
    "Blob",
    "ClientConfig",
    "ClientError",
    "ConstantBackoff",
    "ExponentialBackoff",
    "Failure",
    "HttpxTransport",
    "LinearBackoff",
    "Outcome",
    "RequestSpec",
    "ResponseHandle",
    "ResponseMetadata",
    "Success",
    "Transport",
    "__version__",
    "is_client_error",
    "make_error",
    "retry_delay_exp2",
    "retry_on_failure",
    "retry_on_status",
]

from importlib.metadata import PackageNotFoundError, version

from refetch.backoff import ConstantBackoff, ExponentialBackoff, LinearBackoff, retry_delay_exp2
from refetch.client import AsyncHttpClient
from refetch.core.config import ClientConfig, RequestSpec
from refetch.exceptions import ClientError, is_client_error, make_error
from refetch.hooks import ResponseMetadata
from refetch.outcome import Failure, Outcome, Success
from refetch.response import Blob, ResponseHandle
from refetch.retry import retry_on_failure, retry_on_status
from refetch.transport import HttpxTransport, Transport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
