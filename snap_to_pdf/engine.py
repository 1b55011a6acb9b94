# engine.py - Playwright/Chromium HTML -> PDF bytes
#
# Flow per call:
#   validate options -> resolve input -> launch Chromium -> load page
#   -> inject styles (fonts, theme, watermark, debug) -> optional layout report
#   -> page.pdf() -> close browser

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .config import BrowserConfig
from .errors import RenderError
from .fonts import generate_font_css
from .input_normalizer import INPUT_HTML, NormalizedInput, resolve_source
from .options import SnapOptions
from .styles import WATERMARK_CLASS, StyleFragment, active_watermark, compose_styles
from .validation import validate_options

logger = logging.getLogger(__name__)

HEADER_FOOTER_MARGIN = {"top": "20mm", "bottom": "20mm"}
EMPTY_TEMPLATE = "<div></div>"

# Best-effort waits after load; a slow image must not fail the whole render
IMAGES_TIMEOUT_MS = 2000
FONTS_TIMEOUT_MS = 1500

INSERT_WATERMARK_JS = """
([text, className]) => {
  const div = document.createElement('div');
  div.className = className;
  div.textContent = text;
  document.body.appendChild(div);
}
"""

EXPLAIN_JS = """
() => {
  const issues = [];
  document.querySelectorAll('*').forEach((el) => {
    if (el.scrollWidth > el.clientWidth) {
      issues.push(`Overflow detected in element: ${el.tagName} (class: ${el.className})`);
    }
  });
  document.querySelectorAll('.page-break-before, .page-break-after').forEach((el) => {
    if (window.getComputedStyle(el).display === 'none') {
      issues.push(`Page break element hidden: ${el.tagName} (class: ${el.className})`);
    }
  });
  return issues;
}
"""

Source = Union[str, SnapOptions, Mapping[str, Any], None]


# ----------------------------
# page.pdf() arguments
# ----------------------------

def build_pdf_kwargs(options: SnapOptions) -> Dict[str, Any]:
    """Package defaults, then every option the caller set explicitly."""
    kwargs: Dict[str, Any] = {"format": "A4", "print_background": True}

    has_template = bool(options.header_template or options.footer_template)
    if has_template:
        kwargs["display_header_footer"] = True
        # Chromium prints its own date/title header when one side is missing
        kwargs["header_template"] = options.header_template or EMPTY_TEMPLATE
        kwargs["footer_template"] = options.footer_template or EMPTY_TEMPLATE
        if not options.margin:
            kwargs["margin"] = dict(HEADER_FOOTER_MARGIN)

    overrides = options.pdf_overrides()
    if has_template:
        overrides.pop("header_template", None)
        overrides.pop("footer_template", None)
    kwargs.update(overrides)
    return kwargs


# ----------------------------
# Page helpers
# ----------------------------

def load_page(page, normalized: NormalizedInput, timeout_ms: int) -> None:
    page.set_default_timeout(timeout_ms)
    if normalized.type != INPUT_HTML and normalized.url:
        # Load the actual file/URL so relative assets resolve
        page.goto(normalized.url, wait_until="networkidle")
    else:
        page.set_content(normalized.content, wait_until="networkidle")


def insert_watermark(page, text: str) -> None:
    page.evaluate(INSERT_WATERMARK_JS, [text, WATERMARK_CLASS])


def inject_styles(page, fragments: List[StyleFragment], options: SnapOptions) -> None:
    for fragment in fragments:
        logger.debug("Injecting %s styles (%d chars)", fragment.name, len(fragment.css))
        page.add_style_tag(content=fragment.css)
        if fragment.name == "watermark":
            insert_watermark(page, active_watermark(options).text)


def wait_for_assets(page) -> None:
    try:
        page.wait_for_function("Array.from(document.images).every(i => i.complete)", timeout=IMAGES_TIMEOUT_MS)
    except PlaywrightTimeoutError:
        logger.debug("Images still loading after %d ms; printing anyway", IMAGES_TIMEOUT_MS)
    try:
        page.wait_for_function("document.fonts && document.fonts.status === 'loaded'", timeout=FONTS_TIMEOUT_MS)
    except PlaywrightTimeoutError:
        logger.debug("Web fonts still loading after %d ms; printing anyway", FONTS_TIMEOUT_MS)


def explain_layout(page) -> List[str]:
    """Overflowing elements and hidden page-break markers on the loaded page."""
    return list(page.evaluate(EXPLAIN_JS) or [])


def report_layout_issues(issues: List[str]) -> None:
    if not issues:
        logger.info("No obvious layout issues detected.")
        return
    logger.warning("--- PDF Layout Issues Detected ---")
    for issue in issues:
        logger.warning("- %s", issue)
    logger.warning("----------------------------------")


# ----------------------------
# Public API
# ----------------------------

def render_pdf(
    source: Optional[str] = None,
    options: Optional[SnapOptions] = None,
    config: Optional[BrowserConfig] = None,
) -> bytes:
    """
    Render `source` (HTML markup, path to an .html file, or http(s) URL) to PDF.
    The source may instead be given as options.url / options.html.
    Returns the PDF bytes.
    """
    options = options or SnapOptions()
    config = config or BrowserConfig.from_env()

    validate_options(options, source)
    normalized = resolve_source(source, options)
    font_css = generate_font_css(options.fonts)
    fragments = compose_styles(options, font_css)
    pdf_kwargs = build_pdf_kwargs(options)

    logger.info("Rendering %s input to PDF", normalized.type)
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(**config.launch_kwargs())
            try:
                page = browser.new_page()
                load_page(page, normalized, config.timeout_ms)
                inject_styles(page, fragments, options)
                page.emulate_media(media="print")
                wait_for_assets(page)

                if options.explain:
                    report_layout_issues(explain_layout(page))

                pdf_bytes = page.pdf(**pdf_kwargs)
            finally:
                browser.close()
    except PlaywrightError as exc:
        raise RenderError(f"PDF generation failed: {exc}") from exc

    logger.info("PDF rendered: %d bytes", len(pdf_bytes))
    return pdf_bytes


def snap_to_pdf(
    source: Source = None,
    options: Union[SnapOptions, Mapping[str, Any], None] = None,
    **overrides,
) -> bytes:
    """
    Convert HTML content to PDF bytes.

        snap_to_pdf("<h1>Hello</h1>", format="Letter")
        snap_to_pdf("report.html", SnapOptions(theme="corporate"))
        snap_to_pdf({"url": "https://example.com"})
    """
    if isinstance(source, (SnapOptions, Mapping)):
        if options is not None:
            raise TypeError("options given twice: as the first argument and as `options`")
        source, options = None, source

    if options is None:
        options = SnapOptions()
    elif isinstance(options, Mapping):
        options = SnapOptions.from_dict(options)

    return render_pdf(source, options.merged(**overrides))


async def snap_to_pdf_async(
    source: Source = None,
    options: Union[SnapOptions, Mapping[str, Any], None] = None,
    **overrides,
) -> bytes:
    """snap_to_pdf() in a worker thread; the sync Playwright API cannot run on the event loop."""
    loop = asyncio.get_running_loop()
    call = functools.partial(snap_to_pdf, source, options, **overrides)
    return await loop.run_in_executor(None, call)
