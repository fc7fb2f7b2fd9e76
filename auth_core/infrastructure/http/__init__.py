"""HTTP Infrastructure."""

from auth_core.infrastructure.http.httpx_client import HttpxHttpClient
from auth_core.infrastructure.http.request import (
    RequestOptions,
    call_backend,
    handle_response,
    request,
    request_with_retry,
)

__all__ = [
    "HttpxHttpClient",
    "RequestOptions",
    "call_backend",
    "handle_response",
    "request",
    "request_with_retry",
]
