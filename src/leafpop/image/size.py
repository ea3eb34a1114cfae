"""
Image size utilities - requires Pillow.

Reads pixel dimensions from an image header without decoding pixel data.
"""

__all__ = [
    "ImageSize",
    "image_size",
]

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from loguru import logger
from PIL import Image, UnidentifiedImageError

from leafpop.errors import ImageMetadataError, ImageNotFoundError


@dataclass(frozen=True)
class ImageSize:
    """Pixel dimensions of an image (columns x rows)."""

    width: int
    height: int

    @property
    def yx_ratio(self) -> float:
        """Rows per column."""
        return self.height / self.width

    @property
    def xy_ratio(self) -> float:
        """Columns per row."""
        return self.width / self.height


def image_size(path: Union[str, os.PathLike]) -> ImageSize:
    """
    Read the pixel size of an image file.

    Args:
        path: Path to a local image file

    Returns:
        ImageSize with width (columns) and height (rows)

    Raises:
        ImageNotFoundError: If the file does not exist
        ImageMetadataError: If the header cannot be parsed or a side is zero
    """
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"Image file not found: {path}")

    try:
        with Image.open(path) as image:
            width, height = image.size
    except (UnidentifiedImageError, OSError) as e:
        raise ImageMetadataError(f"Cannot read image size of {path}: {e}") from e

    if width <= 0 or height <= 0:
        raise ImageMetadataError(f"Image {path} reports empty size {width}x{height}")

    logger.debug(f"Read size {width}x{height} from {path.name}")
    return ImageSize(width=width, height=height)
