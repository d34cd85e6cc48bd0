"""Gallery API routes - full listing and single-folder listing."""
from fastapi import APIRouter, Depends

from ..application.models import FolderListing, GalleryListing
from ..application.services import GalleryService
from ..dependencies import get_gallery_service

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


class GalleryResponse(GalleryListing):
    success: bool = True


class FolderResponse(FolderListing):
    success: bool = True


@router.get("", response_model=GalleryResponse)
async def get_gallery(service: GalleryService = Depends(get_gallery_service)):
    """Get every image and video, grouped by asset folder."""
    listing = await service.list_all()
    return GalleryResponse(**dict(listing))


@router.get("/{folder}", response_model=FolderResponse)
async def get_gallery_folder(
    folder: str,
    service: GalleryService = Depends(get_gallery_service)
):
    """Get the files of one allowed folder (case-insensitive).

    Returns 400 for folders outside the allow-list and 404 when the folder
    has no files; both bodies list folders the caller can use instead.
    """
    listing = await service.list_by_folder(folder)
    return FolderResponse(**dict(listing))
