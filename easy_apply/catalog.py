"""
Selector catalog: ordered candidate locators per page action.

The site's markup shifts between postings and over time, so every action
(sign in, apply, submit, ...) is described by several candidates that are
tried in priority order. "Nothing matched" is a normal result, not an error.
The candidate lists live in selectors.yaml so they can change without
touching the apply flow.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from playwright.sync_api import Error as PlaywrightError

from easy_apply.config import DEFAULT_SELECTORS_PATH, ConfigError
from easy_apply.log import get_logger

log = get_logger(__name__)

CLICK_TIMEOUT_MS = 4000

# Joined into one CSS selector list, so text matchers cannot be used here.
CSS_ONLY_ACTIONS = frozenset({"email_input", "password_input", "job_link"})


@dataclass(frozen=True)
class Locator:
    """A selector string or a visible-text matcher."""
    selector: str | None = None
    text: str | None = None

    def resolve(self, page):
        if self.text is not None:
            return page.get_by_text(self.text, exact=False).first
        return page.locator(self.selector).first

    def __str__(self) -> str:
        return f"text={self.text!r}" if self.text is not None else str(self.selector)


@dataclass(frozen=True)
class SelectorCatalog:
    sign_in: tuple[Locator, ...]
    email_input: tuple[Locator, ...]
    password_input: tuple[Locator, ...]
    job_link: tuple[Locator, ...]
    apply: tuple[Locator, ...]
    contact_field: tuple[Locator, ...]
    progress: tuple[Locator, ...]
    confirmation: tuple[Locator, ...]

    @classmethod
    def from_mapping(cls, data: Any) -> SelectorCatalog:
        if not isinstance(data, dict):
            raise ConfigError("Selector catalog must be a mapping of action -> list")
        names = [f.name for f in fields(cls)]
        unknown = sorted(set(data) - set(names))
        if unknown:
            raise ConfigError(f"Unknown selector actions: {', '.join(unknown)}")
        missing = [n for n in names if not data.get(n)]
        if missing:
            raise ConfigError(f"Selector catalog has no candidates for: {', '.join(missing)}")
        parsed = {n: tuple(_parse_entry(n, e) for e in data[n]) for n in names}
        for name in sorted(CSS_ONLY_ACTIONS):
            if any(loc.text is not None for loc in parsed[name]):
                raise ConfigError(f"Action {name!r} only accepts selector strings, not text matchers")
        return cls(**parsed)


def _parse_entry(action: str, entry: Any) -> Locator:
    if isinstance(entry, str) and entry.strip():
        return Locator(selector=entry.strip())
    if isinstance(entry, dict) and set(entry) == {"text"} and str(entry["text"]).strip():
        return Locator(text=str(entry["text"]).strip())
    raise ConfigError(f"Bad selector entry for {action!r}: {entry!r}")


def load_catalog(path: Path | None = None) -> SelectorCatalog:
    path = path or DEFAULT_SELECTORS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read selector catalog {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in selector catalog {path}: {exc}") from exc
    catalog = SelectorCatalog.from_mapping(data)
    log.debug("Loaded selector catalog from %s", path)
    return catalog


def css_union(candidates: tuple[Locator, ...]) -> str:
    """Join selector candidates into one CSS selector list (for CSS-only actions)."""
    return ", ".join(c.selector for c in candidates if c.selector)


def first_visible_match(page, candidates: tuple[Locator, ...]):
    """Return the handle of the first visible candidate, or None."""
    for cand in candidates:
        try:
            loc = cand.resolve(page)
            if loc.is_visible():
                return loc
        except PlaywrightError:
            continue
    return None


def any_visible(page, candidates: tuple[Locator, ...]) -> bool:
    return first_visible_match(page, candidates) is not None


def try_click(page, candidate: Locator, *, timeout: int = CLICK_TIMEOUT_MS) -> bool:
    """Click the candidate if visible. A failed or no-op click is just False."""
    try:
        loc = candidate.resolve(page)
        if loc.is_visible():
            loc.click(timeout=timeout)
            return True
    except PlaywrightError as exc:
        log.debug("Click on %s failed: %s", candidate, str(exc).split("\n")[0])
    return False


def click_first_match(page, candidates: tuple[Locator, ...], *, timeout: int = CLICK_TIMEOUT_MS) -> bool:
    for cand in candidates:
        if try_click(page, cand, timeout=timeout):
            return True
    return False
