import pytest

from snap_to_pdf.errors import InvalidConfigurationError
from snap_to_pdf.themes import THEME_NAMES, get_theme


def test_required_themes_exist():
    for name in ("standard", "clean", "corporate", "minimal", "none"):
        assert name in THEME_NAMES


@pytest.mark.parametrize("name", ["standard", "clean", "corporate", "minimal"])
def test_themes_are_css(name):
    css = get_theme(name)
    assert "body {" in css
    assert "{%" not in css


@pytest.mark.parametrize("name", ["clean", "corporate", "minimal"])
def test_themes_share_page_break_helpers(name):
    css = get_theme(name)
    assert ".page-break-before { page-break-before: always; break-before: page; }" in css
    assert "orphans: 3;" in css


def test_standard_sets_page_size():
    css = get_theme("standard")
    assert "size: A4;" in css
    assert "font-family: 'Georgia', 'Times New Roman', serif;" in css


def test_corporate_accent():
    assert "#003366" in get_theme("corporate")


def test_none_is_empty():
    assert get_theme("none") == ""


def test_unknown_theme():
    with pytest.raises(InvalidConfigurationError):
        get_theme("comic-sans")
