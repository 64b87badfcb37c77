r"""Default values for the client configuration.

This module only holds constants so it can be imported from anywhere in
the package without import cycles. ``refetch.core.config`` re-exports
them next to the ``ClientConfig`` dataclass.
"""

from __future__ import annotations

__all__ = ["DEFAULT_RETRY_DELAY_MS", "DEFAULT_TIMEOUT", "RETRY_STATUS_CODES", "SUCCESS_STATUS_RANGE"]

# Default timeout in seconds for each attempt, enforced by httpx
DEFAULT_TIMEOUT = 10.0

# Default wait in milliseconds between two attempts
DEFAULT_RETRY_DELAY_MS = 1000.0

# HTTP status codes retried by ``retry_on_status()`` when none are given
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Responses with a status in this range are successes, anything else fails
SUCCESS_STATUS_RANGE = range(200, 300)
