"""
Popup subpackage.

Builders for local and remote image popups and the dispatcher that picks
between them.
"""

from leafpop.popup.dispatch import (
    LOCAL,
    REMOTE,
    resolve_source,
    popup_image,
)

from leafpop.popup.local import popup_local_image

from leafpop.popup.remote import popup_remote_image

__all__ = [
    # dispatch
    "LOCAL",
    "REMOTE",
    "resolve_source",
    "popup_image",
    # builders
    "popup_local_image",
    "popup_remote_image",
]
