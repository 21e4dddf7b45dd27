import pytest
from pydantic import ValidationError

from apps.projects.catalog import ALL_CATEGORIES, ProjectCatalog, ProjectNotFound
from apps.projects.main import catalog
from tests.factories import make_record


def test_get_by_slug_returns_matching_record(sample_catalog):
    project = sample_catalog.get_by_slug("project-4")
    assert project is not None
    assert project.id == 4
    assert project.category == "Retail"


def test_get_by_slug_miss_returns_none(sample_catalog):
    assert sample_catalog.get_by_slug("does-not-exist") is None
    assert "does-not-exist" not in sample_catalog


def test_require_raises_not_found_with_slug(sample_catalog):
    with pytest.raises(ProjectNotFound) as exc_info:
        sample_catalog.require("does-not-exist")
    assert exc_info.value.slug == "does-not-exist"
    assert isinstance(exc_info.value, LookupError)


def test_all_preserves_source_order(sample_catalog):
    assert [p.id for p in sample_catalog.all()] == list(range(1, 15))
    assert len(sample_catalog) == 14


def test_featured_subset_in_catalog_order(sample_catalog):
    assert [p.id for p in sample_catalog.featured()] == [3, 6, 9, 12]


def test_categories_start_with_all_then_first_appearance(sample_catalog):
    assert sample_catalog.categories() == [ALL_CATEGORIES, "Residential", "Retail"]


def test_duplicate_slug_rejected():
    with pytest.raises(ValueError, match="slug"):
        ProjectCatalog([
            make_record(1, "Retail", slug="same"),
            make_record(2, "Retail", slug="same"),
        ])


def test_duplicate_id_rejected():
    with pytest.raises(ValueError, match="id"):
        ProjectCatalog([
            make_record(1, "Retail", slug="first"),
            make_record(1, "Retail", slug="second"),
        ])


def test_records_are_frozen(sample_catalog):
    project = sample_catalog.get_by_slug("project-1")
    with pytest.raises(ValidationError):
        project.slug = "renamed"


def test_invalid_slug_rejected():
    with pytest.raises(ValidationError):
        make_record(1, "Retail", slug="Not A Slug")


def test_is_completed():
    assert make_record(1, "Retail").is_completed
    assert not make_record(2, "Retail", status="In Progress").is_completed


def test_site_catalog_loads():
    assert len(catalog) == 16
    assert catalog.categories()[0] == ALL_CATEGORIES
    assert len(set(catalog.slugs())) == len(catalog)
    assert all(p.featured for p in catalog.featured())
