"""Cursor pagination driven by the `Link` response header.

List endpoints answer with a header such as::

    Link: <https://shop.myshopify.com/admin/products.json?page_info=abc&limit=50>; rel="next",
          <https://shop.myshopify.com/admin/products.json?page_info=xyz&limit=50>; rel="previous"

`extract_pagination` turns that header into typed next/previous page
options. `iterate_pages` and `collect_all` follow the `next` cursor until the
server stops handing one out.

A malformed header is never treated as "no more pages": it raises, so a
result set cannot be truncated silently.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from shopify_admin.core.errors import PartialListError, ResponseDecodingError
from shopify_admin.schemas.common import ListOptions
from shopify_admin.utils.query import first_value, parse_query, split_url

logger = logging.getLogger(__name__)

LINK_HEADER = "Link"
REL_NEXT = "next"
REL_PREVIOUS = "previous"

_LINK_PATTERN = re.compile(rf'^ *<([^>]+)>; rel="({REL_PREVIOUS}|{REL_NEXT})" *$')
_UNSIGNED_INT = re.compile(r"[0-9]+")

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """Cursor options for the pages around the current response."""

    next_page_options: ListOptions | None = None
    previous_page_options: ListOptions | None = None

    @property
    def has_next(self) -> bool:
        return self.next_page_options is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page_options is not None


def _options_from_url(raw_url: str) -> ListOptions:
    try:
        parts = split_url(raw_url)
    except ValueError as exc:
        raise ResponseDecodingError("pagination does not contain a valid URL") from exc

    # Escape and limit parse errors propagate unwrapped.
    params = parse_query(parts.query)

    page_info = first_value(params, "page_info")
    if not page_info:
        raise ResponseDecodingError("page_info is missing")

    limit: int | None = None
    raw_limit = first_value(params, "limit")
    if raw_limit:
        if not _UNSIGNED_INT.fullmatch(raw_limit):
            raise ValueError(f"invalid page size {raw_limit!r}: expected an unsigned integer")
        limit = int(raw_limit)

    return ListOptions(page_info=page_info, limit=limit)


def extract_pagination(link_header: str | None) -> Pagination:
    """Build a `Pagination` from a raw `Link` header value.

    Args:
        link_header: The header value; `None` or empty means a terminal page.

    Returns:
        Pagination with the options for every relation present.

    Raises:
        ResponseDecodingError: If an entry is not a `next`/`previous` link,
            its URL is invalid, or it carries no `page_info`.
        ValueError: If the cursor URL has a malformed escape or a
            non-numeric `limit`.
    """

    if not link_header:
        return Pagination()

    next_options: ListOptions | None = None
    previous_options: ListOptions | None = None

    for link in link_header.split(","):
        match = _LINK_PATTERN.match(link)
        if match is None:
            raise ResponseDecodingError("could not extract pagination link header")

        raw_url, rel = match.groups()
        options = _options_from_url(raw_url)
        if rel == REL_NEXT:
            next_options = options
        elif rel == REL_PREVIOUS:
            previous_options = options

    return Pagination(next_page_options=next_options, previous_page_options=previous_options)


FetchPage = Callable[[ListOptions | None], Awaitable[tuple[list[T], Pagination]]]


async def iterate_pages(
    fetch_page: FetchPage[T],
    options: ListOptions | None = None,
) -> AsyncIterator[tuple[list[T], Pagination]]:
    """Yield `(items, pagination)` for each page, following `next` cursors.

    The options for every page after the first are replaced wholesale by the
    previous page's `next_page_options`.
    """

    page_number = 1
    while True:
        items, pagination = await fetch_page(options)
        logger.debug("Fetched page %d with %d items", page_number, len(items))
        yield items, pagination

        if pagination.next_page_options is None:
            return
        options = pagination.next_page_options
        page_number += 1


async def collect_all(
    fetch_page: FetchPage[T],
    options: ListOptions | None = None,
) -> list[T]:
    """Fetch every page and concatenate the items in arrival order.

    Raises:
        PartialListError: If any page fails; carries the items collected
            before the failure and the original exception.
    """

    collected: list[T] = []
    try:
        async for items, _ in iterate_pages(fetch_page, options):
            collected.extend(items)
    except Exception as exc:
        logger.warning("Pagination stopped after %d items: %s", len(collected), exc)
        raise PartialListError(collected, exc) from exc
    return collected
