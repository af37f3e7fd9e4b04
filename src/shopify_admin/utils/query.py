# src/shopify_admin/utils/query.py
"""URL and query-string helpers.

`urllib.parse` silently keeps malformed percent escapes, which would let a
corrupt pagination cursor slip through. The parser here rejects them the
same way the server-side URL grammar does.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from urllib.parse import SplitResult, unquote_plus, urlsplit

_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{2}")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
# RFC 3986 unreserved, sub-delims, userinfo/port separators, IPv6 brackets and escapes
_HOST_CHARS = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:@\[\]%]*")


class QueryDecodingError(ValueError):
    """Raised when a query string contains an invalid percent escape or separator."""


def check_escapes(value: str) -> None:
    """Raise `QueryDecodingError` if `value` holds a `%` not followed by two hex digits."""

    position = value.find("%")
    while position != -1:
        if not _HEX_PAIR.fullmatch(value[position + 1 : position + 3]):
            raise QueryDecodingError(f'invalid URL escape "{value[position : position + 3]}"')
        position = value.find("%", position + 3)


def unescape_component(value: str) -> str:
    """Decode a single query key or value, rejecting malformed escapes."""

    check_escapes(value)
    return unquote_plus(value)


def parse_query(query: str) -> dict[str, list[str]]:
    """Parse a raw query string into a mapping of key to values.

    Pairs are separated by `&` only; a `;` anywhere in a pair is an error.
    Every pair is decoded before the first error is raised, so the error
    reported is always the earliest one in the string.
    """

    values: dict[str, list[str]] = {}
    first_error: QueryDecodingError | None = None

    for pair in query.split("&"):
        if not pair:
            continue
        if ";" in pair:
            if first_error is None:
                first_error = QueryDecodingError("invalid semicolon separator in query")
            continue
        key, _, value = pair.partition("=")
        try:
            decoded_key = unescape_component(key)
            decoded_value = unescape_component(value)
        except QueryDecodingError as exc:
            if first_error is None:
                first_error = exc
            continue
        values.setdefault(decoded_key, []).append(decoded_value)

    if first_error is not None:
        raise first_error
    return values


def first_value(values: dict[str, list[str]], key: str) -> str:
    """Return the first value for `key`, or an empty string."""

    found = values.get(key)
    return found[0] if found else ""


def split_url(raw: str) -> SplitResult:
    """Split `raw` into URL components, raising `ValueError` if malformed.

    The query is left unchecked; `parse_query` validates it separately.
    """

    if raw.startswith(":"):
        raise ValueError(f"missing protocol scheme in {raw!r}")
    if _CONTROL_CHARS.search(raw):
        raise ValueError(f"invalid control character in URL {raw!r}")

    parts = urlsplit(raw)
    if not _HOST_CHARS.fullmatch(parts.netloc):
        raise ValueError(f"invalid character in host name {parts.netloc!r}")
    check_escapes(parts.netloc)
    check_escapes(parts.path)
    # Accessing the port validates it.
    _ = parts.port
    return parts


def encode_query_value(value: object) -> str:
    """Render a single option value the way the API expects it."""

    if isinstance(value, Enum):
        return encode_query_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        if value.utcoffset() == timezone.utc.utcoffset(None):
            return value.strftime("%Y-%m-%dT%H:%M:%SZ")
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        return ",".join(encode_query_value(item) for item in value)
    return str(value)
