"""Build the job search URL and collect candidates from the result page."""
from __future__ import annotations

from urllib.parse import quote, urlencode, urljoin

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from easy_apply.log import get_logger
from easy_apply.models import JobCandidate
from easy_apply.catalog import SelectorCatalog, css_union

log = get_logger(__name__)

BASE_URL = "https://www.indeed.com"
RESULTS_TIMEOUT_MS = 15_000

# Runs in the page; returns raw anchor data for parse_job_links.
_EXTRACT_LINKS_JS = """
anchors => anchors.map(a => ({
  href: a.getAttribute('href') || '',
  label: a.getAttribute('aria-label') || '',
  text: (a.textContent || '').trim(),
}))
"""


def search_url(keywords: str, location: str, *, from_age: int = 1, sort: str = "date") -> str:
    """Search URL restricted to recent postings, newest first."""
    params = {"q": keywords, "l": location, "fromage": from_age, "sort": sort}
    return f"{BASE_URL}/jobs?{urlencode(params, quote_via=quote)}"


def parse_job_links(raw: list[dict]) -> list[JobCandidate]:
    jobs: list[JobCandidate] = []
    for item in raw:
        href = (item.get("href") or "").strip()
        if not href:
            continue
        url = href if href.startswith("http") else urljoin(BASE_URL, href)
        title = (item.get("label") or "").strip() or (item.get("text") or "").strip() or "Job"
        jobs.append(JobCandidate(title=title, url=url))
    return jobs


def run_search(page, keywords: str, location: str, catalog: SelectorCatalog) -> list[JobCandidate]:
    url = search_url(keywords, location)
    log.info("Searching %r in %r", keywords, location)
    page.goto(url, wait_until="domcontentloaded")

    link_selector = css_union(catalog.job_link)
    try:
        page.wait_for_selector(link_selector, timeout=RESULTS_TIMEOUT_MS)
    except PlaywrightTimeoutError:
        log.warning("No job results appeared for %s", url)
        return []

    jobs = parse_job_links(page.eval_on_selector_all(link_selector, _EXTRACT_LINKS_JS))
    log.info("Found %d job link(s)", len(jobs))
    return jobs
