"""Gallery exceptions.

Every error carries the message shown to API consumers. Route-level
exception handlers turn them into ``{"success": false, ...}`` bodies.
"""
from typing import Sequence


class GalleryError(Exception):
    """Base exception for gallery operations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFolderError(GalleryError):
    """Requested folder is not in the allow-list."""

    def __init__(self, folder: str, available_folders: Sequence[str]):
        self.folder = folder
        self.available_folders = list(available_folders)
        super().__init__(f'Folder "{folder}" is not an allowed category folder.')


class NotFoundError(GalleryError):
    """Allowed folder, but no asset upstream belongs to it."""

    def __init__(self, folder: str, available_folders: Sequence[str]):
        self.folder = folder
        self.available_folders = list(available_folders)
        self.hint = (
            "Folders that contain resources: " + ", ".join(self.available_folders)
        )
        super().__init__(f'No files found in folder "{folder}"')


class UpstreamFetchError(GalleryError):
    """The media provider call failed or returned malformed data."""
    pass
