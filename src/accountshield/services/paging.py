"""Paging window resolution for validated list queries."""
from __future__ import annotations

from dataclasses import dataclass

from accountshield.core.config import get_settings
from accountshield.schemas.user import PagedQuery

__all__ = ["PageWindow", "resolve_paging"]

DEFAULT_PAGE = 1


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def resolve_paging(query: PagedQuery, default_limit: int | None = None) -> PageWindow:
    """Fill in defaults for omitted ``page`` / ``limit``.

    ``query`` must already have passed the paged query schema; bounds are not
    re-checked here.
    """
    if default_limit is None:
        default_limit = get_settings().default_page_limit
    return PageWindow(
        page=query.page if query.page is not None else DEFAULT_PAGE,
        limit=query.limit if query.limit is not None else default_limit,
    )
