# cli.py - snap-to-pdf command line
#
# Usage examples:
#   snap-to-pdf "<h1>Hello</h1>" -o hello.pdf
#   snap-to-pdf report.html --theme corporate --format Letter --margin 0.5in
#   snap-to-pdf https://example.com --watermark DRAFT --watermark-opacity 0.3
#   snap-to-pdf page.html --font "Inter=fonts/Inter.woff2" --debug --explain

import argparse
import logging
from pathlib import Path

from . import __version__
from .engine import snap_to_pdf
from .errors import SnapError
from .options import FontSpec, SnapOptions, Watermark
from .themes import THEME_NAMES


def parse_font(value: str) -> FontSpec:
    family, sep, path = value.partition("=")
    if not sep or not family.strip() or not path.strip():
        raise argparse.ArgumentTypeError(f"expected FAMILY=PATH, got {value!r}")
    return FontSpec(family=family.strip(), path=path.strip())


def build_parser():
    p = argparse.ArgumentParser(prog="snap-to-pdf", description="Convert HTML to PDF via Playwright/Chromium.")
    p.add_argument("input", help="Input HTML file, URL, or HTML string.")
    p.add_argument("-o", "--output", default="output.pdf", help="Output PDF file path (default: output.pdf).")
    p.add_argument("--format", default="A4", help="PDF page format (e.g., A4, Letter).")
    p.add_argument("--landscape", action="store_true", help="Landscape orientation.")
    p.add_argument("--margin", default=None, help="Uniform margins (e.g., 0.5in, 10mm).")
    p.add_argument("--no-bg", action="store_true", help="Disable printing backgrounds.")
    p.add_argument("--theme", choices=THEME_NAMES, default=None, help="Apply a theme (default: standard).")
    p.add_argument("--debug", action="store_true", help="Outline elements and mark page breaks.")
    p.add_argument("--explain", action="store_true", help="Report likely layout problems before printing.")
    p.add_argument("--watermark", default=None, help="Watermark text drawn on every page.")
    p.add_argument("--watermark-opacity", type=float, default=0.1, help="Watermark opacity, 0-1 (default: 0.1).")
    p.add_argument("--watermark-color", default="#000", help="Watermark CSS color (default: #000).")
    p.add_argument("--font", dest="fonts", action="append", type=parse_font, default=[],
                   metavar="FAMILY=PATH", help="Embed a font file or URL (repeatable).")
    p.add_argument("--header-template", default=None, help="HTML for the print header.")
    p.add_argument("--footer-template", default=None, help="HTML for the print footer.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log rendering details.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def options_from_args(args) -> SnapOptions:
    margin = None
    if args.margin:
        margin = {"top": args.margin, "right": args.margin, "bottom": args.margin, "left": args.margin}

    watermark = None
    if args.watermark:
        watermark = Watermark(text=args.watermark, opacity=args.watermark_opacity, color=args.watermark_color)

    return SnapOptions(
        format=args.format,
        landscape=args.landscape,
        print_background=not args.no_bg,
        margin=margin,
        theme=args.theme,
        debug=args.debug,
        explain=args.explain,
        watermark=watermark,
        fonts=list(args.fonts),
        header_template=args.header_template,
        footer_template=args.footer_template,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.explain:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    print(f"Rendering PDF from {args.input}...")
    try:
        pdf_bytes = snap_to_pdf(args.input, options_from_args(args))
    except SnapError as exc:
        print(f"[ERROR] {exc}")
        raise SystemExit(1)

    pdf_path = Path(args.output).resolve()
    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    pdf_path.write_bytes(pdf_bytes)
    print(f"[OK] PDF written: {pdf_path}")
    return pdf_path


if __name__ == "__main__":
    main()
