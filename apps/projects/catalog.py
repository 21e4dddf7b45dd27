"""
Project catalog

Read-only, ordered collection of project records with slug lookup.
"""
import logging
from typing import Iterable, Iterator, Optional

from apps.projects.models import ProjectRecord

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


class ProjectNotFound(LookupError):
    """Raised when no project matches a slug."""

    def __init__(self, slug: str):
        super().__init__(f"Project not found: {slug}")
        self.slug = slug


class ProjectCatalog:
    """
    Immutable catalog of projects in publication order.

    Usage:
        catalog = ProjectCatalog.from_dicts(PROJECTS)
        project = catalog.get_by_slug("harbour-view-towers")
    """

    def __init__(self, records: Iterable[ProjectRecord]):
        self._records = tuple(records)
        self._by_slug: dict[str, ProjectRecord] = {}
        seen_ids: set[int] = set()

        for record in self._records:
            if record.slug in self._by_slug:
                raise ValueError(f"Duplicate project slug: {record.slug}")
            if record.id in seen_ids:
                raise ValueError(f"Duplicate project id: {record.id}")
            self._by_slug[record.slug] = record
            seen_ids.add(record.id)

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "ProjectCatalog":
        return cls(ProjectRecord(**row) for row in rows)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProjectRecord]:
        return iter(self._records)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def all(self) -> tuple[ProjectRecord, ...]:
        return self._records

    def featured(self) -> tuple[ProjectRecord, ...]:
        """Projects flagged for the homepage, in catalog order."""
        return tuple(record for record in self._records if record.featured)

    def categories(self) -> list[str]:
        """
        Filter options for the category buttons.

        "All" first, then each distinct category in order of first appearance.
        """
        categories = [ALL_CATEGORIES]
        for record in self._records:
            if record.category not in categories:
                categories.append(record.category)
        return categories

    def slugs(self) -> list[str]:
        return [record.slug for record in self._records]

    def get_by_slug(self, slug: str) -> Optional[ProjectRecord]:
        return self._by_slug.get(slug)

    def require(self, slug: str) -> ProjectRecord:
        """Look up a project by slug, raising ProjectNotFound on a miss."""
        project = self._by_slug.get(slug)
        if project is None:
            logger.info("No project with slug %r", slug)
            raise ProjectNotFound(slug)
        return project
