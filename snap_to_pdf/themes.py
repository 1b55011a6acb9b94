# themes.py - named CSS bundles applied before printing
#
#   standard   formal document typography (default)
#   clean      minimalist sans-serif, generous whitespace
#   corporate  serif body, blue headings and table headers
#   minimal    monospace, high contrast
#   none       no styling at all

from __future__ import annotations

from typing import Dict, Optional

from .errors import InvalidConfigurationError
from .templating import render_css

THEME_TEMPLATES: Dict[str, Optional[str]] = {
    "standard": "themes/standard.css",
    "clean": "themes/clean.css.j2",
    "corporate": "themes/corporate.css.j2",
    "minimal": "themes/minimal.css.j2",
    "none": None,
}

THEME_NAMES = tuple(THEME_TEMPLATES)


def is_known_theme(name: str) -> bool:
    return name in THEME_TEMPLATES


def get_theme(name: str) -> str:
    """CSS text of theme `name` ("" for 'none')."""
    if not is_known_theme(name):
        raise InvalidConfigurationError(
            f"Invalid Configuration: unknown theme {name!r}. Choose one of: {', '.join(THEME_NAMES)}"
        )
    template = THEME_TEMPLATES[name]
    if template is None:
        return ""
    return render_css(template)
