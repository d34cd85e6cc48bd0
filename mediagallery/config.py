"""Application configuration and constants."""
import os
from dataclasses import dataclass


def _split_env(name: str, default: str) -> list[str]:
    """Read a comma separated environment variable into a list."""
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# Folders that can be queried through /api/gallery/{folder}
ALLOWED_FOLDERS = [
    folder.lower()
    for folder in _split_env(
        "GALLERY_ALLOWED_FOLDERS",
        "gallery,flyers,electronic,programming,design,art",
    )
]

# Upper bound on records requested per resource type
MAX_RESULTS = int(os.environ.get("GALLERY_MAX_RESULTS", "500"))

# Bucket name for assets without an asset_folder
UNGROUPED_LABEL = os.environ.get("GALLERY_UNGROUPED_LABEL", "Sin carpeta")

# CORS configuration
CORS_ORIGINS = _split_env(
    "GALLERY_CORS_ORIGINS",
    "http://localhost:4321,http://localhost:3000,https://bluemindr.netlify.app",
)
CORS_ORIGIN_REGEX = os.environ.get("GALLERY_CORS_ORIGIN_REGEX", r"https://.*\.netlify\.app")

# Server configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))


@dataclass(frozen=True)
class GalleryConfig:
    """Settings handed to GalleryService."""
    allowed_folders: tuple[str, ...]
    max_results: int = 500
    ungrouped_label: str = "Sin carpeta"

    def is_allowed(self, folder: str) -> bool:
        return folder.lower() in self.allowed_folders


def get_gallery_config() -> GalleryConfig:
    """Build GalleryConfig from the module-level settings."""
    return GalleryConfig(
        allowed_folders=tuple(ALLOWED_FOLDERS),
        max_results=MAX_RESULTS,
        ungrouped_label=UNGROUPED_LABEL,
    )
