"""
Library configuration and defaults.

All magic numbers used when sizing and rendering popups are centralized here
for easy maintenance and tuning.
"""

__all__ = [
    "CONFIG",
    "PACKAGE_NAME",
    "TEMPLATE_DIR",
]

from typing import Any, Dict

PACKAGE_NAME = "leafpop"
TEMPLATE_DIR = "templates"

# ====================================================================
# POPUP CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Local images
    "local_default_width": 300,  # Width used when neither width nor height is given
    "graphs_dir_name": "graphs",  # Scratch folder for copied (non-embedded) images
    "fallback_mime_type": "image/png",  # Used when the extension gives no hint
    # Remote images
    "remote_default_width": 300,
    "remote_default_height": "100%",
    "remote_max_height": 2000,  # px, passed to the template as maxheight
    # Rendering
    "template_name": "popup-graph.html.j2",
    "significant_digits": 7,  # Digits kept when printing computed dimensions
}
