"""
Project catalog models.

Immutable project records making up the portfolio catalog.
"""
from typing import Optional
from pydantic import BaseModel, Field

COMPLETED = "Completed"


class ProjectStats(BaseModel):
    """Display stats shown on cards and the detail page."""
    area: str
    duration: str

    class Config:
        frozen = True


class ProjectRecord(BaseModel):
    """
    A single portfolio project.

    Records are frozen once loaded:
    - slug is the permanent routing key
    - gallery is an ordered tuple of image URLs
    - featured selects the homepage subset
    """
    id: int
    slug: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9-]+$")
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: str = Field(..., min_length=1)
    status: str = COMPLETED
    location: str = ""
    year: str = ""
    image: str = ""
    gallery: tuple[str, ...] = ()
    video_url: Optional[str] = None
    stats: ProjectStats
    featured: bool = False

    class Config:
        frozen = True

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED
