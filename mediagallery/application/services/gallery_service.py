"""Gallery service - folder-scoped asset aggregation.

This service fetches images and videos from the media provider, normalizes
them into Asset records and serves grouped or single-folder views.
Nothing is cached: every call re-fetches from the provider.
"""
import asyncio
import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from ...config import GalleryConfig
from ..errors import InvalidFolderError, NotFoundError, UpstreamFetchError
from ..models import Asset, FolderListing, GalleryListing, ResourceKind

if TYPE_CHECKING:
    from ...infrastructure.media import MediaProvider

logger = logging.getLogger(__name__)


def extract_description(raw: Mapping[str, Any]) -> Optional[str]:
    """Return ``context.custom.alt`` of a raw record, or None if any step is missing."""
    node: Any = raw
    for key in ("context", "custom", "alt"):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node or None


def normalize(raw: Mapping[str, Any], kind: ResourceKind) -> Asset:
    """Build an Asset from a raw provider record.

    The resource type always comes from ``kind``, whatever the record says.
    """
    return Asset(
        asset_id=raw.get("asset_id"),
        public_id=raw.get("public_id"),
        format=raw.get("format"),
        version=raw.get("version"),
        resource_type=kind,
        created_at=raw.get("created_at"),
        bytes=raw.get("bytes"),
        width=raw.get("width"),
        height=raw.get("height"),
        asset_folder=raw.get("asset_folder"),
        display_name=raw.get("display_name"),
        url=raw.get("url"),
        secure_url=raw.get("secure_url"),
        context=raw.get("context"),
        description=extract_description(raw),
    )


def group_by_folder(assets: Iterable[Asset], ungrouped_label: str) -> dict[str, list[Asset]]:
    """Group assets by their raw folder value.

    Keys keep first-seen order and are case-sensitive ("Art" and "art" are
    separate buckets). Assets without a folder go to ``ungrouped_label``.
    """
    grouped: dict[str, list[Asset]] = {}
    for asset in assets:
        folder = asset.asset_folder or ungrouped_label
        grouped.setdefault(folder, []).append(asset)
    return grouped


def observed_folders(assets: Iterable[Asset]) -> list[str]:
    """Distinct non-empty folder values in first-seen order."""
    seen: dict[str, None] = {}
    for asset in assets:
        if asset.asset_folder:
            seen.setdefault(asset.asset_folder, None)
    return list(seen)


class GalleryService:
    """Service for gallery listing operations.

    Responsibilities:
    - Concurrent image/video fetches from the provider
    - Normalization of raw records into Asset
    - Folder grouping and case-insensitive single-folder filtering
    - Allow-list validation before any upstream call
    """

    def __init__(self, provider: "MediaProvider", config: GalleryConfig):
        self.provider = provider
        self.config = config

    async def _fetch(self, kind: ResourceKind) -> list[Asset]:
        raw_records = await asyncio.to_thread(
            self.provider.list_resources,
            kind,
            self.config.max_results,
            True
        )
        try:
            return [normalize(raw, kind) for raw in raw_records]
        except (AttributeError, TypeError, ValueError) as e:
            raise UpstreamFetchError(f"Malformed {kind.value} resource: {e}") from e

    async def fetch_assets(self) -> list[Asset]:
        """Fetch images and videos concurrently; images first in the result.

        Raises:
            UpstreamFetchError: If either fetch fails
        """
        try:
            images, videos = await asyncio.gather(
                self._fetch(ResourceKind.IMAGE),
                self._fetch(ResourceKind.VIDEO)
            )
        except UpstreamFetchError as e:
            logger.error("Upstream fetch failed: %s", e.message)
            raise
        return images + videos

    async def list_all(self) -> GalleryListing:
        """Return every asset, grouped by folder.

        Returns:
            GalleryListing with total, folder keys, buckets and the flat list

        Raises:
            UpstreamFetchError: If the provider call fails
        """
        logger.info("Fetching full gallery")
        assets = await self.fetch_assets()
        grouped = group_by_folder(assets, self.config.ungrouped_label)

        logger.info("Total: %d files", len(assets))
        logger.info("Folders found: %s", list(grouped))

        return GalleryListing(
            total=len(assets),
            folders=list(grouped),
            grouped_by_folder=grouped,
            all_resources=assets,
        )

    async def list_by_folder(self, requested: str) -> FolderListing:
        """Return the assets of one allowed folder.

        Args:
            requested: Folder name, matched case-insensitively

        Returns:
            FolderListing echoing ``requested`` as given

        Raises:
            InvalidFolderError: If the folder is not in the allow-list
            NotFoundError: If no fetched asset belongs to the folder
            UpstreamFetchError: If the provider call fails
        """
        if not self.config.is_allowed(requested):
            raise InvalidFolderError(requested, self.config.allowed_folders)

        logger.info('Looking up files with asset_folder "%s"', requested)
        assets = await self.fetch_assets()

        wanted = requested.lower()
        filtered = [
            asset for asset in assets
            if asset.asset_folder and asset.asset_folder.lower() == wanted
        ]
        logger.info('Found %d files in "%s"', len(filtered), requested)

        if not filtered:
            raise NotFoundError(requested, observed_folders(assets))

        return FolderListing(
            folder=requested,
            total=len(filtered),
            resources=filtered,
        )
