"""
Scratch directory for images referenced (not embedded) by popups.

Popups for non-embedded local images point at ``../graphs/<name>``, so the
image is copied into a ``graphs`` folder that has to be shipped next to the
saved map.
"""

__all__ = [
    "graphs_dir",
    "copy_to_graphs",
    "relative_src",
]

import atexit
import os
import shutil
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from leafpop.config import CONFIG
from leafpop.errors import ImageNotFoundError


@lru_cache(maxsize=1)
def _session_dir() -> Path:
    # lives until interpreter exit
    session = Path(tempfile.mkdtemp(prefix="leafpop-"))
    atexit.register(shutil.rmtree, session, ignore_errors=True)
    return session


def graphs_dir(base: Optional[Union[str, os.PathLike]] = None) -> Path:
    """
    Return the graphs directory, creating it if needed.

    Args:
        base: Parent directory. Defaults to a temporary directory that lives
              for the rest of the process.

    Returns:
        Path to ``<base>/graphs``
    """
    parent = Path(base) if base is not None else _session_dir()
    target = parent / CONFIG["graphs_dir_name"]
    if not target.is_dir():
        target.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created graphs directory {target}")
    return target


def copy_to_graphs(
    path: Union[str, os.PathLike],
    base: Optional[Union[str, os.PathLike]] = None,
) -> Path:
    """Copy an image into the graphs directory, replacing any previous copy."""
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"Image file not found: {path}")
    destination = graphs_dir(base) / path.name
    if destination.exists() and destination.samefile(path):
        logger.debug(f"{path} is already in {destination.parent}, not copying")
        return destination
    shutil.copyfile(path, destination)
    logger.debug(f"Copied {path} to {destination}")
    return destination


def relative_src(path: Union[str, os.PathLike]) -> str:
    """
    Relative src used in popups for a copied image.

    Example:
        >>> relative_src("/data/photos/cat.jpg")
        '../graphs/cat.jpg'
    """
    return f"../{CONFIG['graphs_dir_name']}/{Path(path).name}"
