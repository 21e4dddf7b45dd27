"""
Pydantic schemas for Projects API.

Defines response models for listings, featured projects and detail pages.
"""
from typing import Optional
from pydantic import BaseModel


class StatsResponse(BaseModel):
    area: str
    duration: str

    class Config:
        from_attributes = True


class ProjectSummary(BaseModel):
    """Card-sized view of a project, as used in grids."""
    id: int
    slug: str
    title: str
    description: str
    category: str
    status: str
    location: str
    year: str
    image: str
    stats: StatsResponse
    featured: bool

    class Config:
        from_attributes = True


class GalleryResponse(BaseModel):
    """Gallery as displayed: at most six images plus the full count."""
    mode: str
    images: list[str]
    total: int
    note: Optional[str] = None

    class Config:
        from_attributes = True


class ProjectDetail(ProjectSummary):
    """Full project including media."""
    gallery: list[str]
    video_url: Optional[str] = None
    gallery_view: Optional[GalleryResponse] = None


class ProjectPage(BaseModel):
    """One page of a filtered project listing."""
    items: list[ProjectSummary]
    category: str
    categories: list[str]
    page: int
    page_size: int
    total_items: int
    total_pages: int
