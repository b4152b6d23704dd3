"""Accumulate every page of a list response."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from typing import TypeVar

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixPaginationError
from nutanix_client.schemas.common import PageableList

logger = logging.getLogger(__name__)

ListT = TypeVar("ListT", bound=PageableList)


def has_next(remaining: int, page_size: int) -> tuple[bool, int]:
    """Decrement the remaining-count by one page and report whether to keep going.

    The loop stops only once the counter falls below ``-page_size``, so a total
    that is an exact multiple of the page size costs one trailing empty fetch.
    """
    remaining -= page_size
    return remaining >= -page_size, remaining


def paginate(
    first_page: Any,
    fetch_page: Callable[[int], ListT],
    *,
    page_size: int,
    ctx: RequestContext | None = None,
) -> ListT:
    """Extend ``first_page`` with the entities of every following page.

    ``fetch_page`` receives the offset to request and returns the decoded page.
    Any error raised while fetching propagates and the accumulation is dropped.
    """
    if not isinstance(first_page, PageableList):
        raise NutanixPaginationError(f"type not supported {type(first_page).__name__}")
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    if not type(first_page).paginated:
        return first_page

    total = first_page.total_matches
    if total <= page_size:
        return first_page

    logger.info(
        "Paginating %s total_matches=%s page_size=%s",
        type(first_page).__name__,
        total,
        page_size,
    )

    offset = first_page.offset
    # The first page already consumed one decrement.
    _, remaining = has_next(total, page_size)
    pages = 1
    while True:
        more, remaining = has_next(remaining, page_size)
        if not more:
            break
        if ctx is not None:
            ctx.check()
        offset += page_size
        page = fetch_page(offset)
        first_page.append_entities(page.entities)
        pages += 1

    logger.debug("Fetched %s pages with %s entities", pages, len(first_page.entities))
    return first_page
