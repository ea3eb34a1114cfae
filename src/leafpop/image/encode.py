"""Base64 encoding of local images into data URIs."""

__all__ = [
    "mime_type",
    "encode_base64",
    "data_uri",
]

import base64
import mimetypes
import os
from pathlib import Path
from typing import Union

from leafpop.config import CONFIG
from leafpop.errors import ImageNotFoundError


def mime_type(path: Union[str, os.PathLike]) -> str:
    """Guess the MIME type from the file extension, defaulting to PNG."""
    guessed, _ = mimetypes.guess_type(str(path))
    if guessed and guessed.startswith("image/"):
        return guessed
    return CONFIG["fallback_mime_type"]


def encode_base64(path: Union[str, os.PathLike]) -> str:
    """
    Encode an image file to a base64 string.

    Raises:
        ImageNotFoundError: If the image file doesn't exist.
    """
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"Image file not found: {path}")
    return base64.b64encode(path.read_bytes()).decode("ascii")


def data_uri(path: Union[str, os.PathLike]) -> str:
    """Build a data URI (data:<mime>;base64,...) for an image file."""
    return f"data:{mime_type(path)};base64,{encode_base64(path)}"
