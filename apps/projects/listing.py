"""
Category filtering and pagination for project listings.

Shared by the projects page, the homepage featured section and the JSON API
so all three agree on which projects a category selects.
"""
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from apps.projects.catalog import ALL_CATEGORIES
from apps.projects.models import ProjectRecord

PROJECTS_PER_PAGE = 12


@dataclass(frozen=True)
class PageWindow:
    """One page of a filtered listing."""
    items: list[ProjectRecord]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class PageLink:
    """Entry in the page-number control: a page number or an ellipsis."""
    page: Optional[int]
    is_active: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.page is None


def filter_by_category(
    records: Sequence[ProjectRecord], category: str
) -> list[ProjectRecord]:
    """Projects in the given category, or all of them for "All". Order is kept."""
    if category == ALL_CATEGORIES:
        return list(records)
    return [record for record in records if record.category == category]


def total_pages(count: int, page_size: int = PROJECTS_PER_PAGE) -> int:
    return math.ceil(count / page_size)


def clamp_page(page: int, pages: int) -> int:
    """Keep page within [1, pages]. An empty listing still has page 1."""
    return max(1, min(page, max(pages, 1)))


def paginate(
    records: Sequence[ProjectRecord],
    page: int,
    page_size: int = PROJECTS_PER_PAGE,
) -> PageWindow:
    pages = total_pages(len(records), page_size)
    page = clamp_page(page, pages)
    start = (page - 1) * page_size

    return PageWindow(
        items=list(records[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(records),
        total_pages=pages,
    )


def page_links(current: int, pages: int) -> list[PageLink]:
    """
    Page numbers to render in the pagination control.

    First and last page are always shown, plus the current page and its
    immediate neighbours. A page two steps from the current one collapses
    into an ellipsis; everything further out is omitted.
    """
    links = []
    for page in range(1, pages + 1):
        if page == 1 or page == pages or current - 1 <= page <= current + 1:
            links.append(PageLink(page=page, is_active=page == current))
        elif page == current - 2 or page == current + 2:
            links.append(PageLink(page=None))
    return links
