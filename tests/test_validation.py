"""
Option validation tests.

Errors:   both url and html (even empty html), source + url/html, unknown theme,
          bad or non-numeric opacity,
          incomplete font, scale out of range or not a number
Warnings: header/footer template without margins, theme with default styles
          disabled, watermark without text
"""

import logging

import pytest

from snap_to_pdf.errors import InvalidConfigurationError
from snap_to_pdf.options import FontSpec, SnapOptions, Watermark
from snap_to_pdf.validation import validate_options


class TestErrors:

    def test_both_url_and_html(self):
        options = SnapOptions(url="https://example.com", html="<div></div>")
        with pytest.raises(InvalidConfigurationError, match='Both "url" and "html" options were provided'):
            validate_options(options)

    def test_source_and_url_option(self):
        with pytest.raises(InvalidConfigurationError, match="only one source"):
            validate_options(SnapOptions(url="https://example.com"), source="<p>x</p>")

    def test_source_and_html_option(self):
        with pytest.raises(InvalidConfigurationError, match="only one source"):
            validate_options(SnapOptions(html="<p>y</p>"), source="<p>x</p>")

    def test_unknown_theme(self):
        with pytest.raises(InvalidConfigurationError, match="unknown theme 'fancy'"):
            validate_options(SnapOptions(theme="fancy"))

    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_watermark_opacity_out_of_range(self, opacity):
        with pytest.raises(InvalidConfigurationError, match="opacity"):
            validate_options(SnapOptions(watermark=Watermark(text="DRAFT", opacity=opacity)))

    def test_font_without_path(self):
        with pytest.raises(InvalidConfigurationError, match="family and a path"):
            validate_options(SnapOptions(fonts=[FontSpec(family="Inter", path="")]))

    @pytest.mark.parametrize("scale", [0.05, 2.5])
    def test_scale_out_of_range(self, scale):
        with pytest.raises(InvalidConfigurationError, match="scale"):
            validate_options(SnapOptions(scale=scale))

    def test_url_with_empty_html(self):
        with pytest.raises(InvalidConfigurationError, match='Both "url" and "html"'):
            validate_options(SnapOptions(url="https://example.com", html=""))

    def test_non_numeric_opacity(self):
        with pytest.raises(InvalidConfigurationError, match="opacity must be a number"):
            validate_options(SnapOptions(watermark=Watermark(text="DRAFT", opacity="0.3")))

    @pytest.mark.parametrize("scale", ["1", True])
    def test_non_numeric_scale(self, scale):
        with pytest.raises(InvalidConfigurationError, match="scale must be a number"):
            validate_options(SnapOptions(scale=scale))

    def test_is_also_a_value_error(self):
        with pytest.raises(ValueError):
            validate_options(SnapOptions(url="https://a", html="<p></p>"))


class TestWarnings:

    def test_header_without_margin(self, caplog):
        warnings = validate_options(SnapOptions(header_template="<div>Header</div>"))

        assert len(warnings) == 1
        assert "header_template is provided but no margins are set" in warnings[0]
        assert "header_template is provided but no margins are set" in caplog.text

    def test_footer_without_margin(self, caplog):
        warnings = validate_options(SnapOptions(footer_template="<div>Footer</div>"))

        assert len(warnings) == 1
        assert "footer_template is provided but no margins are set" in caplog.text

    def test_theme_with_default_styles_disabled(self, caplog):
        validate_options(SnapOptions(theme="clean", inject_default_styles=False))
        assert "Theme styles might not be applied correctly" in caplog.text

    def test_watermark_without_text(self):
        warnings = validate_options(SnapOptions(watermark=Watermark(text=None)))
        assert warnings == ["Warning: A watermark was configured without text. It will be ignored."]

    def test_warnings_are_logged_at_warning_level(self, caplog):
        validate_options(SnapOptions(header_template="<div></div>", footer_template="<div></div>"))
        records = [r for r in caplog.records if r.name == "snap_to_pdf.validation"]
        assert len(records) == 2
        assert all(r.levelno == logging.WARNING for r in records)

    def test_valid_configuration_is_quiet(self, caplog):
        options = SnapOptions(
            header_template="<div>Header</div>",
            margin={"top": "20px"},
            theme="clean",
            inject_default_styles=True,
            watermark=Watermark(text="DRAFT", opacity=0.3),
            fonts=[FontSpec(family="Inter", path="https://example.com/inter.woff2")],
        )

        assert validate_options(options) == []
        assert caplog.records == []
