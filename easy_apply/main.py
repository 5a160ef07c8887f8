"""
Top-level run: log in, search, attempt applications, print and forward the summary.

Exit codes: 0 on completion, 1 on missing/invalid configuration or when the
run itself fails.
"""
from __future__ import annotations

import json
import sys

from easy_apply.attempt import ApplyAttempt
from easy_apply.config import ConfigError, Settings, get_env, load_settings
from easy_apply.log import get_logger
from easy_apply.models import AttemptOutcome, JobCandidate, RunSummary
from easy_apply.pacing import Pacing
from easy_apply.runner import execute_run
from easy_apply.search import run_search
from easy_apply.catalog import SelectorCatalog, load_catalog
from easy_apply.session import browser_session, check_browser, job_page, login
from easy_apply.webhook import WebhookResult, post_summary

log = get_logger(__name__)


def run(settings: Settings, catalog: SelectorCatalog, *, pacing: Pacing | None = None) -> RunSummary:
    pacing = pacing or Pacing()
    with browser_session(settings) as context:
        with job_page(context) as page:
            login(page, settings.email, settings.password, catalog)
            candidates = run_search(page, settings.keywords, settings.location, catalog)

        def attempt(job: JobCandidate) -> AttemptOutcome:
            with job_page(context) as jp:
                return ApplyAttempt(jp, job, catalog, pacing=pacing, phone=settings.phone).run()

        return execute_run(
            candidates,
            settings.max_applications,
            attempt,
            keywords=settings.keywords,
            location=settings.location,
            pacing=pacing,
        )


def report(summary: RunSummary, webhook_url: str = "") -> WebhookResult | None:
    """Print the summary as JSON; forward it when a webhook is configured."""
    print(json.dumps(summary.to_dict(), indent=2))
    if not webhook_url:
        return None
    return post_summary(webhook_url, summary)


def _check_browser() -> int:
    settings = Settings(
        email="",
        password="",
        headless=get_env("RUN_HEADLESS", "true").lower() in ("1", "true", "yes"),
        chrome_path=get_env("CHROME_PATH"),
    )
    try:
        title = check_browser(settings)
    except Exception:
        log.exception("Browser check failed")
        return 1
    print(title)
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if "--check-browser" in argv:
        return _check_browser()

    try:
        settings = load_settings()
        catalog = load_catalog(settings.selectors_path)
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    try:
        summary = run(settings, catalog)
    except Exception:
        log.exception("Run failed")
        return 1

    report(summary, settings.webhook_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
