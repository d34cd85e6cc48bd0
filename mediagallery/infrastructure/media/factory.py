"""Factory for creating the media provider."""
import os
from typing import Callable, Optional
from urllib.parse import urlparse

from ...application.errors import UpstreamFetchError
from .base import MediaProvider, ProviderConfig
from .cloudinary_provider import CloudinaryProvider


# Singleton instance
_provider_instance: Optional[MediaProvider] = None


def get_provider_config() -> ProviderConfig:
    """Get provider configuration from environment variables.

    Environment variables:
    - CLOUDINARY_CLOUD_NAME: Cloud name
    - CLOUDINARY_API_KEY: API key
    - CLOUDINARY_API_SECRET: API secret
    - CLOUDINARY_URL: Alternative to the three above,
      cloudinary://<api_key>:<api_secret>@<cloud_name>
    - CLOUDINARY_API_BASE: API host (default: https://api.cloudinary.com)
    - CLOUDINARY_TIMEOUT: Request timeout in seconds (default: none)
    """
    cloud_name = os.environ.get("CLOUDINARY_CLOUD_NAME")
    api_key = os.environ.get("CLOUDINARY_API_KEY")
    api_secret = os.environ.get("CLOUDINARY_API_SECRET")

    cloudinary_url = os.environ.get("CLOUDINARY_URL")
    if cloudinary_url:
        parsed = urlparse(cloudinary_url)
        if parsed.scheme != "cloudinary":
            raise ValueError("CLOUDINARY_URL must start with cloudinary://")
        cloud_name = cloud_name or parsed.hostname
        api_key = api_key or parsed.username
        api_secret = api_secret or parsed.password

    timeout = os.environ.get("CLOUDINARY_TIMEOUT")

    return ProviderConfig(
        cloud_name=cloud_name,
        api_key=api_key,
        api_secret=api_secret,
        api_base=os.environ.get("CLOUDINARY_API_BASE", "https://api.cloudinary.com"),
        timeout=float(timeout) if timeout else None
    )


def get_provider() -> MediaProvider:
    """Get or create singleton provider instance.

    Raises:
        ValueError: If Cloudinary credentials are missing
    """
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = CloudinaryProvider(get_provider_config())

    return _provider_instance


def reset_provider():
    """Reset provider singleton (useful for testing)."""
    global _provider_instance
    _provider_instance = None


class LazyProvider(MediaProvider):
    """MediaProvider that resolves the configured provider on first listing.

    Configuration errors surface from ``list_resources`` as
    UpstreamFetchError, so callers can validate input before touching
    the provider at all.
    """

    def __init__(self, resolve: Optional[Callable[[], MediaProvider]] = None):
        self.resolve = resolve or get_provider

    def list_resources(self, kind, max_results, with_context=True):
        try:
            provider = self.resolve()
        except ValueError as e:
            raise UpstreamFetchError(str(e)) from e
        return provider.list_resources(kind, max_results, with_context)
