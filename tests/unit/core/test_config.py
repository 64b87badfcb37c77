from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from refetch.backoff import ConstantBackoff, ExponentialBackoff
from refetch.core.config import (
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
    ClientConfig,
    RequestSpec,
)
from refetch.retry import retry_on_failure


def test_defaults() -> None:
    assert DEFAULT_TIMEOUT == 10.0
    assert DEFAULT_RETRY_DELAY_MS == 1000.0
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


###################################
#     Tests for ClientConfig     #
###################################


def test_client_config_defaults() -> None:
    config = ClientConfig()
    assert config.base_url is None
    assert dict(config.headers) == {}
    assert dict(config.options) == {}
    assert config.retries is None
    assert isinstance(config.retry_delay, ConstantBackoff)
    assert config.retry_delay(0) == DEFAULT_RETRY_DELAY_MS
    assert config.retry_on is retry_on_failure
    assert config.intercept_request is None
    assert config.inspect_response is None
    assert config.inspect_error is None


def test_client_config_is_frozen() -> None:
    config = ClientConfig(retries=3)
    with pytest.raises(FrozenInstanceError):
        config.retries = 5  # type: ignore[misc]


def test_client_config_copies_headers() -> None:
    headers = {"A": "1"}
    config = ClientConfig(headers=headers)
    headers["A"] = "2"
    assert config.headers["A"] == "1"


def test_client_config_headers_are_read_only() -> None:
    config = ClientConfig(headers={"A": "1"})
    with pytest.raises(TypeError):
        config.headers["A"] = "2"  # type: ignore[index]


def test_client_config_invalid_retries() -> None:
    with pytest.raises(ValueError, match=r"retries must be >= 0"):
        ClientConfig(retries=-1)


def test_client_config_invalid_hook() -> None:
    with pytest.raises(TypeError, match=r"inspect_error must be callable"):
        ClientConfig(inspect_error="not callable")  # type: ignore[arg-type]


def test_client_config_invalid_retry_delay() -> None:
    with pytest.raises(TypeError, match=r"retry_delay must be callable"):
        ClientConfig(retry_delay=1000)  # type: ignore[arg-type]


def test_client_config_merge() -> None:
    config = ClientConfig(base_url="https://example.com", retries=3)
    merged = config.merge(retries=5, retry_delay=ExponentialBackoff())
    assert merged.retries == 5
    assert merged.base_url == "https://example.com"
    assert isinstance(merged.retry_delay, ExponentialBackoff)
    assert config.retries == 3


def test_client_config_merge_ignores_none() -> None:
    config = ClientConfig(retries=3)
    assert config.merge(retries=None).retries == 3


def test_client_config_merge_revalidates() -> None:
    with pytest.raises(ValueError, match=r"retries must be >= 0"):
        ClientConfig().merge(retries=-2)


##################################
#     Tests for RequestSpec     #
##################################


def test_request_spec_defaults() -> None:
    spec = RequestSpec("/data")
    assert spec.path == "/data"
    assert spec.method == "GET"
    assert spec.headers is None
    assert spec.content is None
    assert spec.data is None
    assert spec.query is None
    assert spec.options == {}


def test_request_spec_normalizes_method() -> None:
    assert RequestSpec("/data", method="post").method == "POST"


def test_request_spec_has_conflicting_body() -> None:
    assert RequestSpec("/data", content="x", data={"a": 1}).has_conflicting_body
    assert not RequestSpec("/data", content="x").has_conflicting_body
    assert not RequestSpec("/data", data={"a": 1}).has_conflicting_body
