# templating.py - Jinja2 environment over the CSS templates shipped with the package

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def posix(p: Path | str) -> str:
    return Path(p).as_posix()


@lru_cache(maxsize=None)
def template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(posix(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
    )


def render_css(template_name: str, **context) -> str:
    return template_env().get_template(template_name).render(**context).strip()
