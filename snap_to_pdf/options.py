# options.py - per-call rendering options
#
# SnapOptions mirrors the keyword arguments of Playwright's page.pdf() and adds
# the styling extras of this package (theme, watermark, fonts, debug, explain).

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields, replace
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .errors import InvalidConfigurationError

DEFAULT_THEME = "standard"

# Fields forwarded to page.pdf() when set (None means "not set").
PDF_FIELDS = (
    "format",
    "landscape",
    "print_background",
    "scale",
    "margin",
    "page_ranges",
    "width",
    "height",
    "prefer_css_page_size",
    "display_header_footer",
    "header_template",
    "footer_template",
    "outline",
    "tagged",
)


@dataclass
class Watermark:
    text: Optional[str] = None
    opacity: float = 0.1
    color: str = "#000"


@dataclass
class FontSpec:
    """A font to embed. `path` is a local file or an http(s) URL."""
    family: str
    path: str
    weight: str | int = "normal"
    style: str = "normal"


@dataclass
class SnapOptions:
    # page.pdf()
    format: Optional[str] = None
    landscape: Optional[bool] = None
    print_background: Optional[bool] = None
    scale: Optional[float] = None
    margin: Optional[Dict[str, str]] = None
    page_ranges: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    prefer_css_page_size: Optional[bool] = None
    display_header_footer: Optional[bool] = None
    header_template: Optional[str] = None
    footer_template: Optional[str] = None
    outline: Optional[bool] = None
    tagged: Optional[bool] = None

    # Explicit sources (alternatives to the positional input)
    url: Optional[str] = None
    html: Optional[str] = None

    # Styling
    theme: Optional[str] = None
    inject_default_styles: bool = True
    watermark: Optional[Watermark] = None
    fonts: List[FontSpec] = field(default_factory=list)
    debug: bool = False
    explain: bool = False

    @property
    def theme_name(self) -> str:
        return self.theme or DEFAULT_THEME

    def pdf_overrides(self) -> Dict[str, Any]:
        """page.pdf() kwargs the caller set explicitly."""
        return {name: getattr(self, name) for name in PDF_FIELDS if getattr(self, name) is not None}

    def merged(self, **overrides) -> "SnapOptions":
        """Copy with `overrides` applied; nested dicts are converted."""
        if not overrides:
            return self
        _check_keys(overrides)
        return replace(self, **_coerce_nested(overrides))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SnapOptions":
        _check_keys(data)
        return cls(**_coerce_nested(dict(data)))


def _check_keys(data: Mapping[str, Any], record=None, label: str = "option") -> None:
    record = record or SnapOptions
    known = {f.name for f in fields(record)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidConfigurationError(
            f"Invalid Configuration: unknown {label}(s): {', '.join(unknown)}"
        )
    required = [f.name for f in fields(record) if f.default is MISSING and f.default_factory is MISSING]
    missing = [name for name in required if name not in data]
    if missing:
        raise InvalidConfigurationError(
            f"Invalid Configuration: missing {label} key(s): {', '.join(missing)}"
        )


def _build(record, data: Mapping[str, Any], label: str):
    _check_keys(data, record, label)
    return record(**data)


def _coerce_nested(data: Dict[str, Any]) -> Dict[str, Any]:
    wm = data.get("watermark")
    if isinstance(wm, Mapping):
        data["watermark"] = _build(Watermark, wm, "watermark option")
    elif isinstance(wm, str):
        data["watermark"] = Watermark(text=wm)

    fonts = data.get("fonts")
    if fonts is not None:
        data["fonts"] = [_build(FontSpec, f, "font option") if isinstance(f, Mapping) else f for f in fonts]
    return data
