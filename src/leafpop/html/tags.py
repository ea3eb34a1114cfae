"""
Pure HTML generation utilities - no external dependencies.

Functions that generate the image tags placed inside popups.
"""

__all__ = [
    "embedded_image_tag",
    "linked_image_tag",
    "remote_image_tag",
]

from leafpop.image.dimensions import Dimension, format_dimension


def embedded_image_tag(
    uri: str,
    width: Dimension,
    height: Dimension,
) -> str:
    """
    Generate an <img> tag carrying the image inline as a data URI.

    Args:
        uri: data URI (data:<mime>;base64,...)
        width: Display width
        height: Display height

    Returns:
        HTML img tag string

    Example:
        >>> embedded_image_tag("data:image/png;base64,AAAA", 300, 225.0)
        "<img width=300 height=225 src='data:image/png;base64,AAAA' />"
    """
    return (
        f"<img width={format_dimension(width)} height={format_dimension(height)}"
        f" src='{uri}' />"
    )


def linked_image_tag(
    src: str,
    width: Dimension,
    height: Dimension,
) -> str:
    """
    Generate an <image> tag pointing at a copied local file.

    Example:
        >>> linked_image_tag("../graphs/cat.png", 300, 150.0)
        "<image src='../graphs/cat.png' width=300 height=150>"
    """
    return (
        f"<image src='{src}' width={format_dimension(width)}"
        f" height={format_dimension(height)}>"
    )


def remote_image_tag(
    url: str,
    width: Dimension,
    height: Dimension,
) -> str:
    """
    Generate an <image> tag for a remote URL. The URL is used verbatim.

    Example:
        >>> remote_image_tag("https://example.com/logo.png", 300, "100%")
        "<image src='https://example.com/logo.png' width=300 height=100%>"
    """
    return linked_image_tag(url, width, height)
