"""
Popup dispatcher.

Resolves every image reference as local (an existing file) or remote
(anything else) and renders each one with the matching builder.
"""

__all__ = [
    "LOCAL",
    "REMOTE",
    "resolve_source",
    "popup_image",
]

import os
from typing import List, Optional, Sequence, Union

from loguru import logger

from leafpop.popup.local import popup_local_image
from leafpop.popup.remote import popup_remote_image

LOCAL = "local"
REMOTE = "remote"

ImageRef = Union[str, os.PathLike]


def resolve_source(img: ImageRef) -> str:
    """
    Decide whether an image reference is local or remote.

    Example:
        >>> resolve_source("https://example.com/logo.png")
        'remote'
    """
    return LOCAL if os.path.isfile(img) else REMOTE


def _as_list(img: Union[ImageRef, Sequence[ImageRef]]) -> List[ImageRef]:
    if isinstance(img, (str, os.PathLike)):
        return [img]
    return list(img)


def popup_image(
    img: Union[ImageRef, Sequence[ImageRef]],
    src: Optional[str] = None,
    embed: bool = False,
    width: Optional[float] = None,
    height: Optional[float] = None,
    graphs_dir: Optional[ImageRef] = None,
    template: Optional[ImageRef] = None,
) -> List[str]:
    """
    Create popup HTML strings for one or more images.

    Args:
        img: File path(s) and/or URL(s)
        src: Force "local" or "remote" for every image; None to decide per image
        embed: Embed local images as base64 (recommended when sharing a map)
        width: Display width
        height: Display height
        graphs_dir: Parent of the graphs/ folder for non-embedded local images
        template: Custom popup template path

    Returns:
        One popup HTML string per image, in input order

    Raises:
        ValueError: If src is not "local", "remote" or None
        ImageNotFoundError: If src="local" and a file is missing

    Example:
        >>> pops = popup_image(["photo.jpg", "https://example.com/logo.png"])
        >>> len(pops)
        2
    """
    if src not in (None, LOCAL, REMOTE):
        raise ValueError(f"src must be '{LOCAL}' or '{REMOTE}', got {src!r}")

    refs = _as_list(img)
    sources = [src or resolve_source(ref) for ref in refs]
    logger.debug(f"Building {len(refs)} popup(s): {sources}")

    popups = []
    for ref, source in zip(refs, sources):
        if source == LOCAL:
            popups.append(
                popup_local_image(
                    ref,
                    width=width,
                    height=height,
                    embed=embed,
                    graphs_dir=graphs_dir,
                    template=template,
                )
            )
        else:
            remote_size = {}
            if width is not None:
                remote_size["width"] = width
            if height is not None:
                remote_size["height"] = height
            popups.append(
                popup_remote_image(os.fspath(ref), template=template, **remote_size)
            )
    return popups
