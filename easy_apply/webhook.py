"""Best-effort delivery of the run summary to a webhook (e.g. an n8n flow)."""
from __future__ import annotations

from dataclasses import dataclass

import requests

from easy_apply.log import get_logger
from easy_apply.models import RunSummary

log = get_logger(__name__)

TIMEOUT_SECONDS = 15


@dataclass(frozen=True)
class WebhookResult:
    ok: bool
    status_code: int | None = None
    error: str | None = None


def post_summary(url: str, summary: RunSummary) -> WebhookResult:
    """POST the summary once. Failures are logged and returned, never raised."""
    try:
        r = requests.post(url, json=summary.to_dict(), timeout=TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        log.error("Failed to post to webhook: %s", exc)
        return WebhookResult(ok=False, error=str(exc)[:150])

    if not r.ok:
        log.warning("Webhook responded %d", r.status_code)
        return WebhookResult(ok=False, status_code=r.status_code, error=r.reason)

    log.info("Posted run summary to webhook (%d)", r.status_code)
    return WebhookResult(ok=True, status_code=r.status_code)
