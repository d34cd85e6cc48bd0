"""Cloudinary Admin API implementation of MediaProvider."""
import logging
from typing import Any, Callable

import requests

from ...application.errors import UpstreamFetchError
from ...application.models import ResourceKind
from .base import MediaProvider, ProviderConfig

logger = logging.getLogger(__name__)


class CloudinaryProvider(MediaProvider):
    """Lists uploaded resources through Cloudinary's Admin REST API.

    Each call is a single blocking GET on its own session, so concurrent
    worker threads never share one. There is no retry and no paging past
    the first ``max_results`` records.
    """

    def __init__(
        self,
        config: ProviderConfig,
        session_factory: Callable[[], requests.Session] = requests.Session
    ):
        """Initialize Cloudinary provider.

        Args:
            config: Provider configuration with Cloudinary credentials
            session_factory: Builds the HTTP session used for each call
        """
        missing = [
            name for name in ("cloud_name", "api_key", "api_secret")
            if not getattr(config, name)
        ]
        if missing:
            raise ValueError(
                "Cloudinary credentials not configured: " + ", ".join(missing)
            )

        self.config = config
        self.session_factory = session_factory
        self.auth = (config.api_key, config.api_secret)

    def _resources_url(self, kind: ResourceKind) -> str:
        base = self.config.api_base.rstrip("/")
        return f"{base}/v1_1/{self.config.cloud_name}/resources/{kind.value}/upload"

    def list_resources(
        self,
        kind: ResourceKind,
        max_results: int,
        with_context: bool = True
    ) -> list[dict[str, Any]]:
        """List uploaded resources of one type from Cloudinary."""
        params = {"max_results": max_results}
        if with_context:
            params["context"] = "true"

        logger.debug("Requesting %s resources (max %s)", kind.value, max_results)
        try:
            with self.session_factory() as session:
                response = session.get(
                    self._resources_url(kind),
                    params=params,
                    auth=self.auth,
                    timeout=self.config.timeout
                )
        except requests.RequestException as e:
            raise UpstreamFetchError(f"Cloudinary request failed: {e}") from e

        if not response.ok:
            raise UpstreamFetchError(self._error_message(response))

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamFetchError("Cloudinary returned a non-JSON response") from e

        resources = payload.get("resources") if isinstance(payload, dict) else None
        if not isinstance(resources, list):
            raise UpstreamFetchError("Cloudinary response has no resources list")
        if not all(isinstance(r, dict) for r in resources):
            raise UpstreamFetchError("Cloudinary response contains malformed resources")

        return resources

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull the upstream error message out of a failed response."""
        try:
            error = response.json().get("error") or {}
            message = error.get("message")
        except (ValueError, AttributeError):
            message = None
        if message:
            return message
        return f"Cloudinary returned {response.status_code} {response.reason}"
