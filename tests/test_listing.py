import math

import pytest

from apps.projects.catalog import ALL_CATEGORIES
from apps.projects.listing import (
    PROJECTS_PER_PAGE,
    clamp_page,
    filter_by_category,
    page_links,
    paginate,
    total_pages,
)


def render(links):
    """Page control as a compact list, '...' for ellipsis markers."""
    return ["..." if link.is_ellipsis else link.page for link in links]


def test_retail_fits_on_one_page(sample_catalog):
    retail = filter_by_category(sample_catalog.all(), "Retail")
    window = paginate(retail, 1)

    assert len(window.items) == 5
    assert window.total_pages == 1
    assert all(p.category == "Retail" for p in window.items)


def test_all_splits_into_two_pages(sample_catalog):
    everything = filter_by_category(sample_catalog.all(), ALL_CATEGORIES)

    first = paginate(everything, 1)
    second = paginate(everything, 2)

    assert first.total_pages == 2
    assert len(first.items) == 12
    assert len(second.items) == 2
    assert first.has_next and not first.has_previous
    assert second.has_previous and not second.has_next


def test_filter_preserves_source_order(sample_catalog):
    residential = filter_by_category(sample_catalog.all(), "Residential")
    assert [p.id for p in residential] == [1, 3, 5, 7, 9, 11, 12, 13, 14]


@pytest.mark.parametrize("category", [ALL_CATEGORIES, "Retail", "Residential", "Healthcare"])
def test_pages_cover_filtered_set_exactly_once(sample_catalog, category):
    filtered = filter_by_category(sample_catalog.all(), category)
    pages = total_pages(len(filtered))

    seen = []
    for page in range(1, pages + 1):
        window = paginate(filtered, page)
        assert len(window.items) <= PROJECTS_PER_PAGE
        seen.extend(p.id for p in window.items)

    assert pages == math.ceil(len(filtered) / PROJECTS_PER_PAGE)
    assert len(seen) == len(set(seen))
    assert seen == [p.id for p in filtered]


def test_unknown_category_is_empty_not_an_error(sample_catalog):
    filtered = filter_by_category(sample_catalog.all(), "Healthcare")
    window = paginate(filtered, 1)

    assert filtered == []
    assert window.total_pages == 0
    assert window.items == []
    assert window.page == 1
    assert page_links(window.page, window.total_pages) == []


def test_total_pages_boundaries():
    assert total_pages(0) == 0
    assert total_pages(1) == 1
    assert total_pages(12) == 1
    assert total_pages(13) == 2


@pytest.mark.parametrize(
    ("page", "pages", "expected"),
    [(1, 3, 1), (3, 3, 3), (7, 3, 3), (0, 3, 1), (-4, 3, 1), (5, 0, 1)],
)
def test_clamp_page(page, pages, expected):
    assert clamp_page(page, pages) == expected


def test_out_of_range_page_shows_last_page(sample_catalog):
    window = paginate(sample_catalog.all(), 9)
    assert window.page == 2
    assert [p.id for p in window.items] == [13, 14]


def test_page_links_short_range_has_no_ellipsis():
    assert render(page_links(1, 1)) == [1]
    assert render(page_links(1, 3)) == [1, 2, 3]
    assert render(page_links(2, 3)) == [1, 2, 3]


def test_page_links_collapse_gaps():
    assert render(page_links(1, 10)) == [1, 2, "...", 10]
    assert render(page_links(5, 10)) == [1, "...", 4, 5, 6, "...", 10]
    assert render(page_links(10, 10)) == [1, "...", 9, 10]


def test_page_links_neighbour_of_first_page_is_not_ellipsis():
    # current - 2 is page 1, which is always shown as a number
    assert render(page_links(3, 10)) == [1, 2, 3, 4, "...", 10]


def test_page_links_gap_wider_than_one_page_is_single_ellipsis():
    assert render(page_links(5, 20)).count("...") == 2
    assert render(page_links(4, 5)) == [1, "...", 3, 4, 5]


def test_page_links_mark_active_page():
    active = [link.page for link in page_links(5, 10) if link.is_active]
    assert active == [5]
