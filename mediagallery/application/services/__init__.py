"""Application services - business logic layer."""

from .gallery_service import GalleryService

__all__ = [
    "GalleryService",
]
