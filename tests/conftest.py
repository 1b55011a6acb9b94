"""
Shared fixtures.

Unit tests never start a browser: `fake_playwright` swaps the sync_playwright
entry point used by the engine for MagicMocks, and tests assert on the calls
made against the fake page.
"""

from unittest.mock import MagicMock

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile("ci", database=None, suppress_health_check=[HealthCheck.too_slow])
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")

FAKE_PDF = b"%PDF-1.4\n% fake\n"


class FakePlaywright:
    """sync_playwright() stand-in exposing the browser and page it hands out."""

    def __init__(self):
        self.page = MagicMock(name="page")
        self.page.pdf.return_value = FAKE_PDF
        self.page.evaluate.return_value = []

        self.browser = MagicMock(name="browser")
        self.browser.new_page.return_value = self.page

        self.playwright = MagicMock(name="playwright")
        self.playwright.chromium.launch.return_value = self.browser

        self.entry = MagicMock(name="sync_playwright")
        self.entry.return_value.__enter__.return_value = self.playwright
        self.entry.return_value.__exit__.return_value = False

    @property
    def launch(self):
        return self.playwright.chromium.launch

    def style_tags(self):
        return [c.kwargs["content"] for c in self.page.add_style_tag.call_args_list]

    def page_call_names(self):
        return [name for name, _args, _kwargs in self.page.method_calls]


@pytest.fixture
def fake_playwright(monkeypatch):
    fake = FakePlaywright()
    monkeypatch.setattr("snap_to_pdf.engine.sync_playwright", fake.entry)
    return fake


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep SNAP_TO_PDF_* variables from the developer's shell out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("SNAP_TO_PDF_"):
            monkeypatch.delenv(name, raising=False)
