"""Exceptions raised while building popups."""

__all__ = [
    "PopupError",
    "ImageNotFoundError",
    "ImageMetadataError",
    "PopupTemplateError",
]


class PopupError(Exception):
    """Base class for all leafpop errors."""


class ImageNotFoundError(PopupError, FileNotFoundError):
    """A local image was requested but the file does not exist."""


class ImageMetadataError(PopupError, ValueError):
    """The image header could not be read or reports an empty size."""


class PopupTemplateError(PopupError):
    """The popup template could not be found or rendered."""
