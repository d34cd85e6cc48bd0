"""Abstract media provider interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ...application.models import ResourceKind


@dataclass
class ProviderConfig:
    """Media provider configuration."""
    cloud_name: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    api_base: str = "https://api.cloudinary.com"

    # None means the HTTP client's own default (no timeout)
    timeout: Optional[float] = None


class MediaProvider(ABC):
    """Abstract interface for the upstream media-asset provider.

    Implementations:
    - CloudinaryProvider: Cloudinary Admin API over HTTP
    """

    @abstractmethod
    def list_resources(
        self,
        kind: ResourceKind,
        max_results: int,
        with_context: bool = True
    ) -> list[dict[str, Any]]:
        """List uploaded resources of one type.

        Args:
            kind: Resource type to list (image or video)
            max_results: Maximum number of records to return
            with_context: Include custom context metadata in each record

        Returns:
            Raw resource records as returned by the provider

        Raises:
            UpstreamFetchError: If the call fails or the response is malformed
        """
        pass
