"""Popups for images stored on the local file system."""

__all__ = ["popup_local_image"]

import os
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from leafpop.errors import ImageNotFoundError
from leafpop.html.tags import embedded_image_tag, linked_image_tag
from leafpop.html.template import render_popup
from leafpop.image.dimensions import display_size
from leafpop.image.encode import data_uri
from leafpop.image.graphs import copy_to_graphs, relative_src
from leafpop.image.size import image_size


def popup_local_image(
    img: Union[str, os.PathLike],
    width: Optional[float] = None,
    height: Optional[float] = None,
    embed: bool = False,
    graphs_dir: Optional[Union[str, os.PathLike]] = None,
    template: Optional[Union[str, os.PathLike]] = None,
) -> str:
    """
    Build the popup HTML for a local image file.

    Missing dimensions are derived from the image's aspect ratio; with
    neither given the width defaults to 300.

    Args:
        img: Path to the image file
        width: Display width
        height: Display height
        embed: Inline the image as base64 instead of copying it to graphs/
        graphs_dir: Parent of the graphs/ folder used when embed is False
        template: Custom popup template path

    Returns:
        Popup HTML string

    Raises:
        ImageNotFoundError: If img does not exist
        ImageMetadataError: If the image size cannot be read
    """
    path = Path(img)
    if not path.is_file():
        raise ImageNotFoundError(f"Image file not found: {path}")

    width, height = display_size(image_size(path), width=width, height=height)

    if embed:
        pop = embedded_image_tag(data_uri(path), width, height)
    else:
        copy_to_graphs(path, base=graphs_dir)
        pop = linked_image_tag(relative_src(path), width, height)

    logger.debug(f"Local popup for {path.name} (embed={embed})")
    return render_popup(pop, template=template)
