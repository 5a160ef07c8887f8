"""Fake Playwright page/locator objects; no real browser is launched in tests."""
from __future__ import annotations

from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError

from easy_apply.pacing import Pacing
from easy_apply.catalog import load_catalog


class FakeLocator:
    def __init__(self, page: "FakePage", key: str) -> None:
        self.page = page
        self.key = key

    @property
    def first(self) -> "FakeLocator":
        return self

    def is_visible(self) -> bool:
        return self.key in self.page.visible

    def click(self, timeout: int | None = None) -> None:
        if self.key in self.page.broken:
            raise PlaywrightError(f"click on {self.key} timed out")
        self.page.clicks.append(self.key)
        for key in self.page.on_click.get(self.key, ()):
            self.page.visible.add(key)

    def fill(self, value: str) -> None:
        if self.key not in self.page.visible:
            raise PlaywrightError(f"{self.key} not found")
        self.page.filled[self.key] = value


class FakePage:
    """
    ``visible`` holds visible selector strings (text matchers as ``text:<t>``).
    ``broken`` elements raise on click; ``on_click`` reveals more keys.
    """

    def __init__(self, visible=(), broken=(), on_click=None) -> None:
        self.visible: set[str] = set(visible)
        self.broken: set[str] = set(broken)
        self.on_click: dict[str, tuple[str, ...]] = dict(on_click or {})
        self.clicks: list[str] = []
        self.filled: dict[str, str] = {}
        self.visited: list[str] = []
        self.closed = False

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def get_by_text(self, text: str, exact: bool = False) -> FakeLocator:
        return FakeLocator(self, f"text:{text}")

    def goto(self, url: str, **kwargs) -> None:
        self.visited.append(url)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def no_sleep():
    slept: list[float] = []
    return Pacing(sleep=slept.append), slept


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "INDEED_EMAIL", "INDEED_PASSWORD", "KEYWORDS", "LOCATION", "MAX_APPS",
        "N8N_WEBHOOK_URL", "WEBHOOK_URL", "PHONE", "RUN_HEADLESS", "CHROME_PATH",
        "SELECTORS_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def selectors_file(tmp_path: Path):
    def write(text: str) -> Path:
        path = tmp_path / "selectors.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return write
