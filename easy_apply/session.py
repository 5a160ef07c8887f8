"""
Browser session handling on top of Playwright's sync API.
Owns the browser/context lifetime, per-job pages, the login step and a
launch smoke test.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from easy_apply.config import Settings
from easy_apply.log import get_logger
from easy_apply.catalog import SelectorCatalog, click_first_match, css_union

log = get_logger(__name__)

LOGIN_URL = "https://secure.indeed.com/auth"
SMOKE_URL = "https://example.com"
DEFAULT_TIMEOUT_MS = 20_000
LOGIN_IDLE_TIMEOUT_MS = 15_000
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


def _launch(p, settings: Settings):
    kwargs: dict = {"headless": settings.headless}
    if settings.chrome_path:
        kwargs["executable_path"] = settings.chrome_path
    return p.chromium.launch(**kwargs)


@contextmanager
def browser_session(settings: Settings) -> Iterator:
    """Yield a browser context; context and browser are closed on every exit path."""
    with sync_playwright() as p:
        browser = _launch(p, settings)
        try:
            context = browser.new_context(
                viewport={"width": 1280, "height": 900},
                user_agent=USER_AGENT,
            )
            try:
                context.set_default_timeout(DEFAULT_TIMEOUT_MS)
                yield context
            finally:
                context.close()
        finally:
            browser.close()


@contextmanager
def job_page(context) -> Iterator:
    """Fresh page for one unit of work, always closed afterwards."""
    page = context.new_page()
    try:
        yield page
    finally:
        try:
            page.close()
        except PlaywrightError as exc:
            log.warning("Failed to close page: %s", str(exc).split("\n")[0])


def login(page, email: str, password: str, catalog: SelectorCatalog) -> None:
    """Fill the sign-in form. Missing inputs raise; a slow post-login load does not."""
    log.info("Logging in as %s", email)
    page.goto(LOGIN_URL, wait_until="domcontentloaded")
    page.locator(css_union(catalog.email_input)).first.fill(email)
    page.locator(css_union(catalog.password_input)).first.fill(password)
    if not click_first_match(page, catalog.sign_in):
        log.warning("No sign-in button found; continuing")
    try:
        page.wait_for_load_state("networkidle", timeout=LOGIN_IDLE_TIMEOUT_MS)
    except PlaywrightTimeoutError:
        log.debug("Network did not go idle after login")


def check_browser(settings: Settings) -> str:
    """Launch the configured browser, open a known page and return its title."""
    with sync_playwright() as p:
        browser = _launch(p, settings)
        try:
            page = browser.new_page()
            page.goto(SMOKE_URL)
            return page.title()
        finally:
            browser.close()
