"""Gallery data model - normalized assets and listing results."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ResourceKind(str, Enum):
    """Upstream resource types the gallery aggregates."""
    IMAGE = "image"
    VIDEO = "video"


class Asset(BaseModel):
    """One image or video as returned to gallery consumers."""
    model_config = ConfigDict(frozen=True)

    asset_id: Optional[str] = None
    public_id: Optional[str] = None
    format: Optional[str] = None
    version: Optional[int] = None
    resource_type: ResourceKind
    created_at: Optional[str] = None
    bytes: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    asset_folder: Optional[str] = None
    display_name: Optional[str] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None
    context: Optional[dict[str, Any]] = None
    description: Optional[str] = None


class GalleryListing(BaseModel):
    """Full gallery grouped by asset folder."""
    model_config = ConfigDict(frozen=True)

    total: int
    folders: list[str]
    grouped_by_folder: dict[str, list[Asset]]
    all_resources: list[Asset]


class FolderListing(BaseModel):
    """Assets of a single folder."""
    model_config = ConfigDict(frozen=True)

    folder: str
    total: int
    resources: list[Asset]
