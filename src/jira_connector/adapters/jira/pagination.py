"""
Pagination - collect every issue of a saved filter across search pages.
"""

from __future__ import annotations

import logging
from typing import Any

from ...core.constants import PAGE_SIZE, JiraResource, SearchParam
from ...core.domain.entities import Issue, IssuePage
from ...core.domain.enums import OperationKind
from ...core.ports.transport import TransportPort
from .classifier import decode_body, decoding, ensure_success


def additional_pages(total_available: int, page_size: int = PAGE_SIZE) -> int:
    """
    Number of pages still to fetch after the first one.

    Uses integer ceiling division, so an exact multiple of the page size
    adds no extra page.
    """
    remaining = total_available - page_size
    if remaining <= 0:
        return 0
    pages, remainder = divmod(remaining, page_size)
    if remainder > 0:
        pages += 1
    return pages


class IssueAggregator:
    """
    Drives sequential search calls until a filter's issues are all collected.

    The total reported by the first page is the only stopping criterion. It is
    not re-checked on later pages, so a filter whose result set changes
    mid-listing can yield duplicated or missing issues.
    """

    def __init__(self, transport: TransportPort, page_size: int = PAGE_SIZE):
        self._transport = transport
        self.page_size = page_size
        self.logger = logging.getLogger("IssueAggregator")

    def fetch_page(self, filter_id: str, start_at: int = 0) -> dict[str, Any]:
        """Fetch and decode one raw search page."""
        response = self._transport.execute(
            "GET",
            JiraResource.SEARCH,
            params={
                SearchParam.JQL: f"filter={filter_id}",
                SearchParam.MAX_RESULTS: str(self.page_size),
                SearchParam.START_AT: str(start_at),
            },
        )
        ensure_success(response, OperationKind.READ)
        return decode_body(response)

    def collect(self, filter_id: str) -> list[Issue]:
        """
        Return all issues matched by the filter, in page-fetch order.

        Any failing page aborts the listing; partial results are discarded.
        """
        first = self.fetch_page(filter_id)
        with decoding("search page"):
            page = IssuePage.from_json(first)
        if page.total_available <= self.page_size:
            return page.issues

        extra = additional_pages(page.total_available, self.page_size)
        self.logger.info(
            f"Filter {filter_id} has {page.total_available} issues, "
            f"fetching {extra} more page(s)"
        )
        for i in range(1, extra + 1):
            data = self.fetch_page(filter_id, start_at=i * self.page_size)
            with decoding("search page"):
                page.add_issues(data)

        return page.issues
