# input_normalizer.py - decide whether an input is markup, a file or a URL

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import NamedTuple, Optional

from .errors import InputFileNotFoundError, InputReadError, InvalidConfigurationError
from .options import SnapOptions

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://", re.I)
HTML_FILE_PATTERN = re.compile(r"\.html?\Z", re.I)
TAG_PATTERN = re.compile(r"<[a-z][\s\S]*>", re.I)

INPUT_HTML = "html"
INPUT_FILE = "file"
INPUT_URL = "url"


class NormalizedInput(NamedTuple):
    content: str
    type: str
    url: Optional[str] = None


def is_url(value: str) -> bool:
    return bool(URL_PATTERN.match(value))


def looks_like_file_path(value: str) -> bool:
    """An .html/.htm name with nothing tag-like in it."""
    return bool(HTML_FILE_PATTERN.search(value)) and not TAG_PATTERN.search(value)


def normalize_input(source: str) -> NormalizedInput:
    """
    Classify `source`:
      - http(s) URL        -> ("", "url", source)
      - path to .html/.htm -> (file text, "file", file:// URI)
      - anything else      -> (source, "html", None)
    Raises InputFileNotFoundError when a path-shaped input does not exist,
    InputReadError when it exists but cannot be read.
    """
    if is_url(source):
        return NormalizedInput("", INPUT_URL, source)

    if looks_like_file_path(source):
        file_path = Path(source).resolve()
        if not file_path.is_file():
            raise InputFileNotFoundError(f"File not found: {source}")
        try:
            # Undecodable bytes become U+FFFD instead of failing the render
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise InputReadError(f"Could not read {source}: {exc}") from exc
        logger.debug("Read %d characters from %s", len(content), file_path)
        return NormalizedInput(content, INPUT_FILE, file_path.as_uri())

    return NormalizedInput(source, INPUT_HTML)


def resolve_source(source: Optional[str], options: SnapOptions) -> NormalizedInput:
    """Pick the input among the positional source and options.url / options.html."""
    if options.url:
        return NormalizedInput("", INPUT_URL, options.url)
    if options.html is not None:
        # Explicit markup is never reinterpreted as a path or URL
        return NormalizedInput(options.html, INPUT_HTML)
    if source is None:
        raise InvalidConfigurationError(
            "Invalid Configuration: no input given. Pass HTML, a file path or a URL, "
            'or set the "url" or "html" option.'
        )
    return normalize_input(source)
