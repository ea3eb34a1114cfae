"""Wrap popup HTML in mo.Html for display in marimo notebooks."""

__all__ = ["wrap_popup"]

from typing import Sequence, Union

import marimo as mo


def wrap_popup(popups: Union[str, Sequence[str]]) -> mo.Html:
    """Wrap one popup, or several stacked vertically, in mo.Html."""
    if isinstance(popups, str):
        return mo.Html(popups) if popups else mo.Html("")
    return mo.Html("".join(f"<div>{p}</div>" for p in popups if p))
