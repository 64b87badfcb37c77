r"""Configuration dataclasses for the client and for single requests.

``ClientConfig`` is bound once to an ``AsyncHttpClient`` and shared
read-only by every request made through it. ``RequestSpec`` describes one
call and is consumed by every attempt of that call.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "ClientConfig",
    "RequestSpec",
]

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from refetch.backoff.constant import ConstantBackoff
from refetch.config import DEFAULT_RETRY_DELAY_MS, DEFAULT_TIMEOUT, RETRY_STATUS_CODES
from refetch.core.validation import validate_callable, validate_retries
from refetch.retry.predicates import retry_on_failure

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from refetch.exceptions import ClientError
    from refetch.hooks import ResponseMetadata
    from refetch.outcome import Outcome


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class ClientConfig:
    """Configuration shared by every request of a client.

    Args:
        base_url: Optional prefix prepended to every request path.
        headers: Default headers. Per-call headers win on key collision.
        options: Default transport options (``timeout``,
            ``follow_redirects``, ``extensions``). Per-call options win.
        retries: Optional ceiling on the total number of attempts. ``None``,
            ``0`` and ``1`` all mean a single attempt.
        retry_delay: Function mapping the attempt index to the wait in
            milliseconds before the next attempt.
        retry_on: Function deciding from the attempt index and its outcome
            whether another attempt should be made.
        intercept_request: Optional hook called with the final URL and the
            merged options before every dispatch. It may mutate the options.
        inspect_response: Optional hook called with the metadata of every
            successful response.
        inspect_error: Optional hook called with every failure.

    Example:
        ```pycon
        >>> from refetch.core.config import ClientConfig
        >>> config = ClientConfig(base_url="https://api.example.com", retries=3)
        >>> config.retries
        3
        >>> config.merge(retries=5).retries
        5
        >>> config.retries  # Original unchanged
        3

        ```
    """

    base_url: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)
    retries: int | None = None
    retry_delay: Callable[[int], float] = field(default_factory=ConstantBackoff)
    retry_on: Callable[[int, Outcome[Any]], bool] = retry_on_failure
    intercept_request: Callable[[str, dict[str, Any]], None] | None = None
    inspect_response: Callable[[ResponseMetadata], None] | None = None
    inspect_error: Callable[[ClientError], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters and freeze the mappings.

        Raises:
            ValueError: If retries is negative.
            TypeError: If a hook or policy function is not callable.
        """
        validate_retries(self.retries)
        validate_callable("retry_delay", self.retry_delay, optional=False)
        validate_callable("retry_on", self.retry_on, optional=False)
        validate_callable("intercept_request", self.intercept_request)
        validate_callable("inspect_response", self.inspect_response)
        validate_callable("inspect_error", self.inspect_error)
        object.__setattr__(self, "headers", _frozen(self.headers))
        object.__setattr__(self, "options", _frozen(self.options))

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass(frozen=True)
class RequestSpec:
    """Description of a single call.

    ``content`` and ``data`` are mutually exclusive: ``data`` is
    serialized to JSON and sent as the body.

    Args:
        path: The request path, appended to the client base URL.
        method: The HTTP method.
        headers: Per-call headers.
        content: Optional raw body.
        data: Optional structured payload serialized to JSON.
        query: Optional query parameters merged into the URL.
        options: Per-call transport options.
    """

    path: str
    method: str = "GET"
    headers: Mapping[str, str] | None = None
    content: str | bytes | None = None
    data: Any = None
    query: Mapping[str, Any] | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    @property
    def has_conflicting_body(self) -> bool:
        """Whether both a raw body and a structured payload were given."""
        return self.content is not None and self.data is not None
