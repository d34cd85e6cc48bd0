"""Media provider abstraction layer.

Wraps the upstream media-asset service behind a narrow listing interface.
"""
from .base import MediaProvider, ProviderConfig
from .cloudinary_provider import CloudinaryProvider
from .factory import LazyProvider, get_provider, get_provider_config, reset_provider

__all__ = [
    "MediaProvider",
    "ProviderConfig",
    "CloudinaryProvider",
    "LazyProvider",
    "get_provider",
    "get_provider_config",
    "reset_provider",
]
