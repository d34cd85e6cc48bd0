"""Media gallery backend - folder-grouped views over a media-asset provider."""

__version__ = "1.0.0"
