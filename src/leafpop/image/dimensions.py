"""
Display size arithmetic - no external dependencies.

Functions that derive popup width/height from an image's aspect ratio.
"""

__all__ = [
    "Dimension",
    "display_size",
    "format_dimension",
]

from typing import Optional, Tuple, Union

from leafpop.config import CONFIG
from leafpop.image.size import ImageSize

Dimension = Union[int, float, str]


def display_size(
    size: ImageSize,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> Tuple[float, float]:
    """
    Compute display width and height, keeping the image's aspect ratio.

    Args:
        size: Pixel size of the image
        width: Requested width, None to derive it
        height: Requested height, None to derive it

    Returns:
        Tuple of (width, height). If both are given they are returned as-is.

    Example:
        >>> display_size(ImageSize(640, 480))
        (300, 225.0)
        >>> display_size(ImageSize(400, 200), height=100)
        (200.0, 100)
    """
    if width is None and height is None:
        width = CONFIG["local_default_width"]
        height = size.yx_ratio * width
    elif height is None:
        height = size.yx_ratio * width
    elif width is None:
        width = size.xy_ratio * height
    return width, height


def format_dimension(value: Dimension) -> str:
    """
    Format a width/height for an HTML attribute.

    Numbers keep at most CONFIG["significant_digits"] significant digits and
    drop a trailing ".0"; strings such as "100%" pass through. Values of 1e7
    or more come out in exponent form ("1e+07"), far beyond any popup size.

    Example:
        >>> format_dimension(225.0)
        '225'
        >>> format_dimension(200.15625)
        '200.1562'
        >>> format_dimension("100%")
        '100%'
    """
    if isinstance(value, str):
        return value
    return format(value, f".{CONFIG['significant_digits']}g")
