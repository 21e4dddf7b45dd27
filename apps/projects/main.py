"""
Projects Site

Server-rendered portfolio pages and a read-only JSON API over the static
project catalog.
"""
import os
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from fastapi import FastAPI, APIRouter, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from apps.shared.cors import setup_cors
from apps.shared.errors import register_exception_handlers
from apps.shared.headers import setup_security_headers, setup_cache_control
from apps.shared.logging_config import setup_logging
from apps.projects.catalog import ALL_CATEGORIES, ProjectCatalog, ProjectNotFound
from apps.projects.data import PROJECTS
from apps.projects.gallery import select_gallery
from apps.projects.listing import filter_by_category, paginate, page_links
from apps.projects.models import ProjectRecord
from apps.projects.schemas import (
    GalleryResponse,
    ProjectDetail,
    ProjectPage,
    ProjectSummary,
)

setup_logging()
logger = logging.getLogger(__name__)

SITE_NAME = os.getenv("SITE_NAME", "Aurum Facades")
SITE_URL = os.getenv("SITE_URL", "https://www.example-facades.com").rstrip("/")
CONTACT_URL = os.getenv("CONTACT_URL", "/#contact")
CACHE_MAX_AGE = int(os.getenv("CACHE_MAX_AGE", "300"))
PLACEHOLDER_IMAGE = "/static/placeholder.svg"

BASE_DIR = Path(__file__).resolve().parent

catalog = ProjectCatalog.from_dicts(PROJECTS)
logger.info(
    "Loaded %d projects (%d featured) in %d categories",
    len(catalog),
    len(catalog.featured()),
    len(catalog.categories()) - 1,
)

app = FastAPI(
    title="Projects Site",
    version="1.0.0",
    description="Portfolio of facade and glazing projects",
    docs_url=None,
    redoc_url=None,
    openapi_url="/api/openapi.json",
)

setup_cors(app)
setup_security_headers(app)
setup_cache_control(app, CACHE_MAX_AGE)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def listing_url(path: str, category: str = ALL_CATEGORIES, page: int = 1) -> str:
    """
    Link to a listing with the given filter.

    Default values are left out, so a category link always lands on page 1.
    """
    params = {}
    if category != ALL_CATEGORIES:
        params["category"] = category
    if page > 1:
        params["page"] = page
    return f"{path}?{urlencode(params)}" if params else path


def page_title(title: Optional[str] = None) -> str:
    return f"{title} | {SITE_NAME}" if title else SITE_NAME


templates.env.globals.update(
    site_name=SITE_NAME,
    contact_url=CONTACT_URL,
    placeholder_image=PLACEHOLDER_IMAGE,
    listing_url=listing_url,
    page_title=page_title,
)


def render_error_page(
    request: Request, status_code: int, message: str, exc: Exception
) -> Response:
    if isinstance(exc, ProjectNotFound):
        title = "Project not found"
    elif status_code == 404:
        title = "Page not found"
    else:
        title = "Something went wrong"
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "title": title, "message": message},
        status_code=status_code,
    )


register_exception_handlers(app, render_error_page, (ProjectNotFound,))


def to_detail(project: ProjectRecord) -> ProjectDetail:
    gallery = select_gallery(project.gallery)
    gallery_view = None
    if gallery is not None:
        gallery_view = GalleryResponse(
            mode=gallery.mode,
            images=gallery.images,
            total=gallery.total,
            note=gallery.note,
        )
    return ProjectDetail(
        **ProjectSummary.model_validate(project).model_dump(),
        gallery=list(project.gallery),
        video_url=project.video_url,
        gallery_view=gallery_view,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Service endpoints
# ──────────────────────────────────────────────────────────────────────────────

@app.get("/health", include_in_schema=False)
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "projects", "projects": len(catalog)}


@app.get("/sitemap.xml", include_in_schema=False)
def sitemap(request: Request):
    """Sitemap with the homepage, the listing and every project page."""
    paths = ["/", "/projects"] + [f"/projects/{slug}" for slug in catalog.slugs()]
    return templates.TemplateResponse(
        request,
        "sitemap.xml",
        {"urls": [f"{SITE_URL}{path}" for path in paths]},
        media_type="application/xml",
    )


# ──────────────────────────────────────────────────────────────────────────────
# JSON API
# ──────────────────────────────────────────────────────────────────────────────

api = APIRouter(prefix="/api/projects", tags=["projects"])


@api.get("", response_model=ProjectPage)
def list_projects(category: str = ALL_CATEGORIES, page: int = 1):
    """
    One page of projects in a category.
    Out-of-range pages are clamped to the nearest valid page.
    """
    window = paginate(filter_by_category(catalog.all(), category), page)
    return ProjectPage(
        items=[ProjectSummary.model_validate(p) for p in window.items],
        category=category,
        categories=catalog.categories(),
        page=window.page,
        page_size=window.page_size,
        total_items=window.total_items,
        total_pages=window.total_pages,
    )


@api.get("/featured", response_model=list[ProjectSummary])
def list_featured_projects(category: str = ALL_CATEGORIES):
    """Featured projects for the homepage, optionally filtered by category."""
    projects = filter_by_category(catalog.featured(), category)
    return [ProjectSummary.model_validate(p) for p in projects]


@api.get("/categories", response_model=list[str])
def list_categories():
    """Category filter options, "All" first."""
    return catalog.categories()


@api.get("/{slug}", response_model=ProjectDetail)
def get_project(slug: str):
    """Get a single project by slug."""
    return to_detail(catalog.require(slug))


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────

pages = APIRouter(tags=["pages"], include_in_schema=False)


@pages.get("/", response_class=HTMLResponse)
def home(request: Request, category: str = ALL_CATEGORIES):
    """Homepage with the featured projects section."""
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "projects": filter_by_category(catalog.featured(), category),
            "categories": catalog.categories(),
            "selected_category": category,
        },
    )


@pages.get("/projects", response_class=HTMLResponse)
def projects_page(request: Request, category: str = ALL_CATEGORIES, page: int = 1):
    """All projects with category filter and pagination."""
    window = paginate(filter_by_category(catalog.all(), category), page)
    return templates.TemplateResponse(
        request,
        "projects.html",
        {
            "window": window,
            "page_links": page_links(window.page, window.total_pages),
            "categories": catalog.categories(),
            "selected_category": category,
        },
    )


@pages.get("/projects/{slug}", response_class=HTMLResponse)
def project_detail_page(request: Request, slug: str):
    """Project detail page. Unknown slugs render the 404 page."""
    project = catalog.require(slug)
    return templates.TemplateResponse(
        request,
        "project_detail.html",
        {
            "project": project,
            "gallery": select_gallery(project.gallery),
        },
    )


app.include_router(api)
app.include_router(pages)
