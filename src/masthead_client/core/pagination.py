"""
Page-number aggregation for list endpoints.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from .envelope import Pagination
from .observability import log_event

T = TypeVar("T")

FIRST_PAGE = 1
MAX_PAGES = 1000

logger = logging.getLogger("masthead_client.pagination")

PageFetcher = Callable[[int], Tuple[Sequence[T], Pagination]]


def collect_pages(
    fetch_page: PageFetcher,
    *,
    max_pages: int = MAX_PAGES,
    resource: Optional[str] = None,
) -> List[T]:
    """
    Call fetch_page(1), fetch_page(2), ... and concatenate the items in order.
    Stops on the first empty page, once the accumulated count reaches the
    server-reported total, or after max_pages pages.
    """
    if max_pages < 1:
        raise ValueError("max_pages must be >= 1")

    items: List[T] = []
    total = 0
    pages = 0
    for page in range(FIRST_PAGE, FIRST_PAGE + max_pages):
        batch, pagination = fetch_page(page)
        pages += 1
        total = pagination.total
        if not batch:
            break
        items.extend(batch)
        if len(items) >= total:
            break
    else:
        log_event(
            "masthead.pagination_capped",
            logger,
            level=logging.WARNING,
            resource=resource,
            pages=pages,
            items=len(items),
            total=total,
        )
        return items

    log_event(
        "masthead.pagination_done",
        logger,
        level=logging.DEBUG,
        resource=resource,
        pages=pages,
        items=len(items),
        total=total,
    )
    return items


__all__ = ["collect_pages", "PageFetcher", "FIRST_PAGE", "MAX_PAGES"]
