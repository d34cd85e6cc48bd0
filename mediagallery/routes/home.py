"""Root route - service description."""
from fastapi import APIRouter

from ..config import get_gallery_config

router = APIRouter()


@router.get("/")
def index():
    """Describe the service and list its endpoints."""
    config = get_gallery_config()
    folder_examples = ", ".join(
        f"GET /api/gallery/{folder}" for folder in config.allowed_folders
    )
    return {
        "message": "Media gallery backend running",
        "endpoints": {
            "Full gallery (grouped)": "GET /api/gallery",
            "Files by folder": "GET /api/gallery/{folder}",
            "Folder examples": folder_examples,
        }
    }
