# fonts.py - @font-face rules for custom fonts
#
# Local font files are inlined as base64 data URIs so they load the same way
# whether the page came from set_content(), file:// or http(s)://.

from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Iterable, Optional

from .input_normalizer import is_url
from .options import FontSpec
from .templating import render_css

logger = logging.getLogger(__name__)

FONT_MIME_TYPES = {
    ".ttf": "font/ttf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".otf": "font/otf",
}
DEFAULT_FONT_MIME = "application/octet-stream"


def font_mime_type(path: Path | str) -> str:
    return FONT_MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_FONT_MIME)


def embed_file_as_data_uri(path: Path, mime: str) -> Optional[str]:
    try:
        b = path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to load font: %s (%s)", path, exc)
        return None
    b64 = base64.b64encode(b).decode("ascii")
    return f"data:{mime};base64,{b64}"


def font_source(font: FontSpec) -> Optional[str]:
    """URL for the src: descriptor, or None if the font file is unreadable."""
    if is_url(font.path):
        return font.path
    font_path = Path(font.path).resolve()
    return embed_file_as_data_uri(font_path, font_mime_type(font_path))


def font_face_rule(font: FontSpec, src: str) -> str:
    return render_css(
        "font_face.css.j2",
        family=font.family,
        src=src,
        weight=font.weight or "normal",
        style=font.style or "normal",
    )


def generate_font_css(fonts: Optional[Iterable[FontSpec]]) -> str:
    """@font-face rules for `fonts`; unreadable local files are skipped."""
    if not fonts:
        return ""
    rules = []
    for font in fonts:
        src = font_source(font)
        if src is None:
            continue
        rules.append(font_face_rule(font, src))
    return "\n".join(rules)
