"""
HTML utilities subpackage.

Pure functions for image tags, plus jinja2 rendering of the popup template.
"""

from leafpop.html.tags import (
    embedded_image_tag,
    linked_image_tag,
    remote_image_tag,
)

from leafpop.html.template import (
    render_popup,
)

__all__ = [
    # tags
    "embedded_image_tag",
    "linked_image_tag",
    "remote_image_tag",
    # template
    "render_popup",
]
