"""Application layer - gallery business logic.

This layer contains the asset model, gallery errors and the service that
aggregates provider listings. Services are independent of HTTP/FastAPI and
can be tested in isolation.
"""

from .errors import GalleryError, InvalidFolderError, NotFoundError, UpstreamFetchError
from .models import Asset, FolderListing, GalleryListing, ResourceKind
from .services.gallery_service import GalleryService

__all__ = [
    "Asset",
    "FolderListing",
    "GalleryListing",
    "ResourceKind",
    "GalleryError",
    "InvalidFolderError",
    "NotFoundError",
    "UpstreamFetchError",
    "GalleryService",
]
