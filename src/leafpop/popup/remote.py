"""Popups for images referenced by URL."""

__all__ = ["popup_remote_image"]

import os
from typing import Optional, Union

from leafpop.config import CONFIG
from leafpop.html.tags import remote_image_tag
from leafpop.html.template import render_popup
from leafpop.image.dimensions import Dimension


def popup_remote_image(
    img: str,
    width: Dimension = CONFIG["remote_default_width"],
    height: Dimension = CONFIG["remote_default_height"],
    template: Optional[Union[str, os.PathLike]] = None,
) -> str:
    """
    Build the popup HTML for a remote image.

    The URL is not fetched or validated; the popup container is capped at
    CONFIG["remote_max_height"] pixels.
    """
    pop = remote_image_tag(str(img), width, height)
    return render_popup(pop, maxheight=CONFIG["remote_max_height"], template=template)
