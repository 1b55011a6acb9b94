# styles.py - CSS fragments injected into the page, in injection order:
#   1) fonts      generated @font-face rules
#   2) theme      selected theme (default: standard)
#   3) watermark  .snap-watermark overlay rule
#   4) debug      element outlines + page-break markers

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .options import SnapOptions, Watermark
from .templating import render_css
from .themes import get_theme

WATERMARK_CLASS = "snap-watermark"


class StyleFragment(NamedTuple):
    name: str
    css: str


def active_watermark(options: SnapOptions) -> Optional[Watermark]:
    wm = options.watermark
    if wm is not None and wm.text:
        return wm
    return None


def theme_css(options: SnapOptions) -> str:
    if not options.inject_default_styles:
        return ""
    return get_theme(options.theme_name)


def watermark_css(watermark: Watermark) -> str:
    opacity = 0.1 if watermark.opacity is None else watermark.opacity
    return render_css(
        "watermark.css.j2",
        css_class=WATERMARK_CLASS,
        color=watermark.color or "#000",
        opacity=opacity,
    )


def debug_css() -> str:
    return render_css("debug.css")


def compose_styles(options: SnapOptions, font_css: str = "") -> List[StyleFragment]:
    fragments: List[StyleFragment] = []

    if font_css:
        fragments.append(StyleFragment("fonts", font_css))

    css = theme_css(options)
    if css:
        fragments.append(StyleFragment("theme", css))

    wm = active_watermark(options)
    if wm is not None:
        fragments.append(StyleFragment("watermark", watermark_css(wm)))

    if options.debug:
        fragments.append(StyleFragment("debug", debug_css()))

    return fragments
