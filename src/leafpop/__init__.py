"""
leafpop - HTML image popups for leaflet-style map markers.

This package is organized into focused subpackages:

- popup/    Popup builders
            - dispatch: popup_image, resolve_source
            - local: popup_local_image
            - remote: popup_remote_image

- image/    Image utilities (requires Pillow)
            - size: image_size, ImageSize
            - dimensions: display_size, format_dimension
            - encode: mime_type, encode_base64, data_uri
            - graphs: graphs_dir, copy_to_graphs, relative_src

- html/     HTML generation (requires jinja2)
            - tags: embedded_image_tag, linked_image_tag, remote_image_tag
            - template: render_popup

- ui/       Notebook display (requires marimo)
            - marimo: wrap_popup

Usage:
    from leafpop import popup_image
    popups = popup_image(["photo.jpg", "https://example.com/logo.png"], embed=True)

Logging goes through loguru and is disabled by default; call
``logger.enable("leafpop")`` to see it.
"""

__version__ = "0.0.1"

from loguru import logger

from leafpop.errors import (
    PopupError,
    ImageNotFoundError,
    ImageMetadataError,
    PopupTemplateError,
)

from leafpop.popup import (
    popup_image,
    popup_local_image,
    popup_remote_image,
    resolve_source,
)

from leafpop.image import (
    ImageSize,
    image_size,
    display_size,
)

logger.disable("leafpop")

__all__ = [
    "__version__",
    # errors
    "PopupError",
    "ImageNotFoundError",
    "ImageMetadataError",
    "PopupTemplateError",
    # popup
    "popup_image",
    "popup_local_image",
    "popup_remote_image",
    "resolve_source",
    # image
    "ImageSize",
    "image_size",
    "display_size",
]
