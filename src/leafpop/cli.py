"""
Command line interface.

    leafpop image photo.jpg https://example.com/logo.png --embed
    leafpop size photo.jpg
"""

__all__ = ["main"]

import sys
from typing import Optional

import fire
from loguru import logger

from leafpop.image.size import image_size
from leafpop.popup.dispatch import popup_image


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("leafpop")


class Commands:
    """Create HTML popups for map markers from images."""

    def image(
        self,
        *img: str,
        src: Optional[str] = None,
        embed: bool = False,
        width: Optional[float] = None,
        height: Optional[float] = None,
        graphs_dir: Optional[str] = None,
        template: Optional[str] = None,
        verbose: bool = False,
    ) -> str:
        """Print one popup HTML string per line, per image path or URL."""
        _configure_logging(verbose)
        popups = popup_image(
            list(img),
            src=src,
            embed=embed,
            width=width,
            height=height,
            graphs_dir=graphs_dir,
            template=template,
        )
        logger.info(f"Built {len(popups)} popup(s)")
        return "\n".join(popups)

    def size(self, path: str, verbose: bool = False) -> str:
        """Print the pixel size of a local image as WIDTHxHEIGHT."""
        _configure_logging(verbose)
        size = image_size(path)
        return f"{size.width}x{size.height}"


def main() -> None:
    fire.Fire(Commands)


if __name__ == "__main__":
    main()
