# validation.py - reject contradictory options, warn about suspicious ones

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import InvalidConfigurationError
from .options import SnapOptions
from .themes import THEME_NAMES, is_known_theme

logger = logging.getLogger(__name__)

# Chromium's accepted page.pdf() scale range
MIN_SCALE = 0.1
MAX_SCALE = 2.0


def _invalid(message: str) -> InvalidConfigurationError:
    return InvalidConfigurationError(f"Invalid Configuration: {message}")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_options(options: SnapOptions, source: Optional[str] = None) -> List[str]:
    """
    Raise InvalidConfigurationError for combinations that cannot work.
    Returns the advisory warnings (also logged) for combinations that will
    render, but probably not as intended.
    """
    if options.url and options.html is not None:
        raise _invalid('Both "url" and "html" options were provided. Please specify only one source.')

    if source is not None and (options.url or options.html is not None):
        raise _invalid(
            'An input was passed together with the "url" or "html" option. Please specify only one source.'
        )

    if options.theme is not None and not is_known_theme(options.theme):
        raise _invalid(f"unknown theme {options.theme!r}. Choose one of: {', '.join(THEME_NAMES)}")

    wm = options.watermark
    if wm is not None and wm.opacity is not None:
        if not _is_number(wm.opacity):
            raise _invalid(f"watermark opacity must be a number, got {wm.opacity!r}")
        if not 0 <= wm.opacity <= 1:
            raise _invalid(f"watermark opacity must be between 0 and 1, got {wm.opacity}")

    for font in options.fonts or []:
        if not font.family or not font.path:
            raise _invalid(f"every font needs a family and a path, got {font!r}")

    if options.scale is not None:
        if not _is_number(options.scale):
            raise _invalid(f"scale must be a number, got {options.scale!r}")
        if not MIN_SCALE <= options.scale <= MAX_SCALE:
            raise _invalid(f"scale must be between {MIN_SCALE} and {MAX_SCALE}, got {options.scale}")

    warnings: List[str] = []

    if options.header_template and not options.margin:
        warnings.append("Warning: header_template is provided but no margins are set. The header might be hidden.")

    if options.footer_template and not options.margin:
        warnings.append("Warning: footer_template is provided but no margins are set. The footer might be hidden.")

    if options.theme and not options.inject_default_styles:
        warnings.append(
            "Warning: A theme is selected but inject_default_styles is False. "
            "Theme styles might not be applied correctly."
        )

    if wm is not None and not wm.text:
        warnings.append("Warning: A watermark was configured without text. It will be ignored.")

    for message in warnings:
        logger.warning(message)
    return warnings
