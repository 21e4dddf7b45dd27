"""Gallery selection for the project detail page."""
from dataclasses import dataclass
from typing import Optional, Sequence

GALLERY_LIMIT = 6


@dataclass(frozen=True)
class GalleryView:
    mode: str  # "single" or "carousel"
    images: list[str]
    total: int

    @property
    def note(self) -> Optional[str]:
        if self.total > len(self.images):
            return f"Showing {len(self.images)} of {self.total} images"
        return None


def select_gallery(
    images: Sequence[str], limit: int = GALLERY_LIMIT
) -> Optional[GalleryView]:
    """
    Decide how a project's gallery is displayed.

    No images means no gallery section. A single image is shown on its own,
    anything more goes into a carousel capped at `limit` items.
    """
    if not images:
        return None
    if len(images) == 1:
        return GalleryView(mode="single", images=[images[0]], total=1)
    return GalleryView(
        mode="carousel",
        images=list(images[:limit]),
        total=len(images),
    )
