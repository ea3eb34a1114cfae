"""
Popup template rendering - requires jinja2.

The image tag is wrapped in a small HTML fragment and flattened to a single
line so it can be handed to a mapping library as one popup string.
"""

__all__ = [
    "render_popup",
]

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import jinja2
from loguru import logger

from leafpop.config import CONFIG, PACKAGE_NAME, TEMPLATE_DIR
from leafpop.errors import PopupTemplateError


@lru_cache(maxsize=1)
def _package_environment() -> jinja2.Environment:
    # pop is already HTML, autoescape stays off
    return jinja2.Environment(
        loader=jinja2.PackageLoader(PACKAGE_NAME, TEMPLATE_DIR),
        autoescape=False,
    )


def _load_template(template: Optional[Union[str, os.PathLike]]) -> jinja2.Template:
    try:
        if template is None:
            return _package_environment().get_template(CONFIG["template_name"])
        template_file = Path(template)
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_file.parent),
            autoescape=False,
        )
        return env.get_template(template_file.name)
    except jinja2.exceptions.TemplateNotFound as e:
        raise PopupTemplateError(f"Popup template not found: {e.name}") from e
    except jinja2.exceptions.TemplateError as e:
        raise PopupTemplateError(f"Error loading popup template: {e}") from e


def render_popup(
    pop: str,
    maxheight: Optional[int] = None,
    template: Optional[Union[str, os.PathLike]] = None,
) -> str:
    """
    Render an image tag through the popup template.

    Args:
        pop: Image tag HTML
        maxheight: Optional max height in px for the popup container
        template: Path to a custom template, None for the packaged one

    Returns:
        Rendered popup with all lines joined by single spaces

    Raises:
        PopupTemplateError: If the template is missing or fails to render
    """
    tpl = _load_template(template)
    try:
        rendered = tpl.render(pop=pop, maxheight=maxheight)
    except jinja2.exceptions.TemplateError as e:
        raise PopupTemplateError(f"Error rendering popup template: {e}") from e

    logger.debug(f"Rendered popup with template {tpl.name}")
    return " ".join(rendered.splitlines())
