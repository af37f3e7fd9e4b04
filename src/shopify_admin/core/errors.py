"""Exception hierarchy for the Admin API client.

Every error raised by the client itself derives from `ShopifyError`. Parsing
primitives used by the pagination extractor (`int()` and the strict query
parser) raise plain `ValueError` subclasses that are propagated unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

UNKNOWN_ERROR_MESSAGE = "Unknown Error"


class ShopifyError(RuntimeError):
    """Base exception raised for Admin API failures."""


class ResponseError(ShopifyError):
    """Raised when the API answers with a non-2xx status.

    `message` is the primary message extracted from the body, `errors` holds
    every individual error string the body carried.
    """

    def __init__(
        self,
        status: int,
        message: str = "",
        errors: Sequence[str] | None = None,
    ) -> None:
        self.status = status
        self.message = message
        self.errors = list(errors or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return self.message
        joined = ", ".join(sorted(self.errors))
        if joined:
            return joined
        return UNKNOWN_ERROR_MESSAGE


class RateLimitError(ResponseError):
    """Raised on HTTP 429; `retry_after` is the server's hint in seconds."""

    def __init__(
        self,
        status: int,
        message: str = "",
        errors: Sequence[str] | None = None,
        *,
        retry_after: int = 0,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(status, message, errors)


class ResponseDecodingError(ShopifyError):
    """Raised when a response cannot be decoded.

    Pagination protocol violations (bad `Link` syntax, invalid cursor URLs,
    missing `page_info`) always use this type so callers can tell them apart
    from transport failures and from "no more pages".
    """

    def __init__(self, message: str, *, body: bytes = b"", status: int = 0) -> None:
        self.message = message
        self.body = body
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseDecodingError):
            return NotImplemented
        return (self.message, self.body, self.status) == (other.message, other.body, other.status)

    __hash__ = ShopifyError.__hash__


class ShopifyTransportError(ShopifyError):
    """Raised when the HTTP transport fails before a response is received."""


class PartialListError(ShopifyError):
    """Raised by exhaustive listing when a page fails mid-stream.

    `items` holds everything collected before the failure, in page order.
    `error` is the original exception, also available as `__cause__`.
    """

    def __init__(self, items: list[Any], error: BaseException) -> None:
        self.items = items
        self.error = error
        super().__init__(str(error))
