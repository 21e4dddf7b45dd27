import pytest
from fastapi.testclient import TestClient

from apps.projects.catalog import ProjectCatalog
from apps.projects.main import app
from tests.factories import make_record


@pytest.fixture
def sample_catalog() -> ProjectCatalog:
    """14 projects: 5 Retail interleaved with 9 Residential, every third one featured."""
    categories = ["Residential", "Retail"] * 5 + ["Residential"] * 4
    return ProjectCatalog(
        make_record(n, category, featured=n % 3 == 0)
        for n, category in enumerate(categories, start=1)
    )


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(app)
