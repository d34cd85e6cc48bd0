"""Shared FastAPI dependencies."""
from .application.services import GalleryService
from .config import get_gallery_config
from .infrastructure.media import LazyProvider


def get_gallery_service() -> GalleryService:
    """Create GalleryService with the configured media provider.

    The provider is resolved on the first upstream call, so folder
    validation runs even when credentials are missing (those surface as
    HTTP 500).
    """
    return GalleryService(provider=LazyProvider(), config=get_gallery_config())
