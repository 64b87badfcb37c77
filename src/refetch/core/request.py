r"""Helpers building the target URL and transport options of an attempt.

These functions are pure: they read the client configuration and the
request spec and return fresh objects, so every attempt of a call starts
from the same state regardless of what the request interceptor did to the
previous attempt's options.
"""

from __future__ import annotations

__all__ = ["JSON_CONTENT_TYPE", "build_url", "merge_options", "serialize_data"]

import json
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

    from refetch.core.config import ClientConfig, RequestSpec

JSON_CONTENT_TYPE = "application/json"


def build_url(base_url: str | None, path: str, query: Mapping[str, Any] | None = None) -> str:
    """Build the target URL of a request.

    The path is appended to ``base_url`` when one is configured. Query
    parameters are merged with the parameters already present in the URL;
    a new value replaces an existing parameter with the same name.

    Args:
        base_url: Optional URL prefix.
        path: The request path, possibly with its own query string.
        query: Optional query parameters to merge.

    Returns:
        The final URL.

    Example:
        ```pycon
        >>> from refetch.core.request import build_url
        >>> build_url("https://example.com", "/data?x=1", {"y": 2})
        'https://example.com/data?x=1&y=2'
        >>> build_url(None, "https://example.com/data?x=1", {"x": 3})
        'https://example.com/data?x=3'

        ```
    """
    url = httpx.URL(f"{base_url}{path}" if base_url else path)
    if query:
        url = url.copy_merge_params(query)
    return str(url)


def serialize_data(data: Any) -> str:
    """Serialize a structured payload to a JSON body.

    Example:
        ```pycon
        >>> from refetch.core.request import serialize_data
        >>> serialize_data({"name": "John", "age": 30})
        '{"name":"John","age":30}'

        ```
    """
    return json.dumps(data, separators=(",", ":"))


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    name = name.lower()
    return any(key.lower() == name for key in headers)


def merge_options(config: ClientConfig, spec: RequestSpec) -> dict[str, Any]:
    """Merge the client defaults with the options of one call.

    Headers and transport options are shallow-merged, call-site values
    winning on key collision. A structured payload is serialized to JSON
    and gets a JSON content type unless the caller already set one.

    Args:
        config: The client configuration.
        spec: The call description.

    Returns:
        A new mutable options dict with ``method``, ``headers`` and
        ``content`` keys plus any transport option.

    Example:
        ```pycon
        >>> from refetch.core.config import ClientConfig, RequestSpec
        >>> from refetch.core.request import merge_options
        >>> config = ClientConfig(headers={"A": "1"})
        >>> options = merge_options(config, RequestSpec("/x", headers={"A": "2", "B": "3"}))
        >>> options["headers"]
        {'A': '2', 'B': '3'}

        ```
    """
    headers = {**config.headers, **(spec.headers or {})}
    if spec.data is not None:
        content: str | bytes | None = serialize_data(spec.data)
        if not _has_header(headers, "content-type"):
            headers["Content-Type"] = JSON_CONTENT_TYPE
    else:
        content = spec.content
    return {
        **config.options,
        **spec.options,
        "method": spec.method,
        "headers": headers,
        "content": content,
    }
