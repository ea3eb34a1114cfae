"""
Image utilities subpackage - requires Pillow.

Reading image sizes, aspect-ratio arithmetic, base64 encoding and the
scratch graphs directory.
"""

from leafpop.image.size import (
    ImageSize,
    image_size,
)

from leafpop.image.dimensions import (
    display_size,
    format_dimension,
)

from leafpop.image.encode import (
    mime_type,
    encode_base64,
    data_uri,
)

from leafpop.image.graphs import (
    graphs_dir,
    copy_to_graphs,
    relative_src,
)

__all__ = [
    # size
    "ImageSize",
    "image_size",
    # dimensions
    "display_size",
    "format_dimension",
    # encode
    "mime_type",
    "encode_base64",
    "data_uri",
    # graphs
    "graphs_dir",
    "copy_to_graphs",
    "relative_src",
]
