"""Test configuration and fixtures for the media gallery backend.

This module provides isolated test environments:
- A fake media provider returning canned records
- A gallery config with a small allow-list
- A TestClient whose gallery service is wired to the fake provider
"""
import asyncio
import sys
import threading
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

# Ensure mediagallery is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from mediagallery.application.errors import UpstreamFetchError
from mediagallery.application.models import ResourceKind
from mediagallery.application.services import GalleryService
from mediagallery.config import GalleryConfig
from mediagallery.infrastructure.media import MediaProvider


class FakeMediaProvider(MediaProvider):
    """In-memory MediaProvider returning canned records per resource kind."""

    def __init__(
        self,
        images: Optional[List[Dict[str, Any]]] = None,
        videos: Optional[List[Dict[str, Any]]] = None,
        fail_on: Optional[ResourceKind] = None,
        error_message: str = "Upstream unavailable"
    ):
        self.records = {
            ResourceKind.IMAGE: list(images or []),
            ResourceKind.VIDEO: list(videos or []),
        }
        self.fail_on = fail_on
        self.error_message = error_message
        self.calls: List[tuple] = []
        self._lock = threading.Lock()

    def list_resources(self, kind, max_results, with_context=True):
        with self._lock:
            self.calls.append((kind, max_results, with_context))
        if kind == self.fail_on:
            raise UpstreamFetchError(self.error_message)
        return [dict(r) for r in self.records[kind][:max_results]]


def make_resource(
    public_id: str,
    asset_folder: Optional[str] = None,
    alt: Optional[str] = None,
    **extra
) -> Dict[str, Any]:
    """Build a raw provider record shaped like Cloudinary's Admin API output."""
    record = {
        "asset_id": f"asset-{public_id}",
        "public_id": public_id,
        "format": "jpg",
        "version": 1700000000,
        "created_at": "2024-05-01T10:00:00Z",
        "bytes": 12345,
        "width": 800,
        "height": 600,
        "display_name": public_id,
        "url": f"http://res.example.com/{public_id}.jpg",
        "secure_url": f"https://res.example.com/{public_id}.jpg",
    }
    if asset_folder is not None:
        record["asset_folder"] = asset_folder
    if alt is not None:
        record["context"] = {"custom": {"alt": alt}}
    record.update(extra)
    return record


@pytest.fixture
def run_async():
    """Helper to run async functions in sync context."""
    def _run(coro):
        return asyncio.run(coro)
    return _run


@pytest.fixture
def gallery_config() -> GalleryConfig:
    """Allow-list of two folders, default limits."""
    return GalleryConfig(allowed_folders=("art", "design"))


@pytest.fixture
def fake_provider() -> FakeMediaProvider:
    """Provider with a small mixed gallery.

    Images: two in "Art", one in "design", one without folder.
    Videos: one in "art" (lowercase), one in "music".
    """
    return FakeMediaProvider(
        images=[
            make_resource("sunset", asset_folder="Art", alt="Sunset over the bay"),
            make_resource("poster", asset_folder="design"),
            make_resource("loose"),
            make_resource("portrait", asset_folder="Art"),
        ],
        videos=[
            make_resource("timelapse", asset_folder="art", format="mp4"),
            make_resource("concert", asset_folder="music", format="mp4"),
        ],
    )


@pytest.fixture
def gallery_service(fake_provider: FakeMediaProvider, gallery_config: GalleryConfig) -> GalleryService:
    return GalleryService(provider=fake_provider, config=gallery_config)


@pytest.fixture
def make_client(gallery_config: GalleryConfig):
    """Factory for TestClients backed by a given provider.

    Usage:
        def test_something(make_client):
            client = make_client(FakeMediaProvider(images=[...]))
            response = client.get("/api/gallery")
    """
    from mediagallery.dependencies import get_gallery_service
    from mediagallery.main import create_app

    clients = []

    def _make(provider: MediaProvider, config: GalleryConfig = gallery_config) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_gallery_service] = (
            lambda: GalleryService(provider=provider, config=config)
        )
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.close()


@pytest.fixture
def client(make_client, fake_provider: FakeMediaProvider) -> Generator[TestClient, None, None]:
    """TestClient wired to the default fake provider."""
    yield make_client(fake_provider)
