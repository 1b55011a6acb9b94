"""Render HTML markup, files or URLs to PDF with headless Chromium."""

from .config import BrowserConfig
from .engine import render_pdf, snap_to_pdf, snap_to_pdf_async
from .errors import InputFileNotFoundError, InputReadError, InvalidConfigurationError, RenderError, SnapError
from .options import FontSpec, SnapOptions, Watermark
from .themes import THEME_NAMES

__version__ = "0.1.0"

__all__ = [
    "BrowserConfig",
    "FontSpec",
    "InputFileNotFoundError",
    "InputReadError",
    "InvalidConfigurationError",
    "RenderError",
    "SnapError",
    "SnapOptions",
    "THEME_NAMES",
    "Watermark",
    "render_pdf",
    "snap_to_pdf",
    "snap_to_pdf_async",
]
