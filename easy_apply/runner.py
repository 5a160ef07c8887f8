"""Run loop: attempt candidates in order until the application cap is reached."""
from __future__ import annotations

from typing import Callable, Iterable

from easy_apply.log import get_logger
from easy_apply.models import (
    AttemptOutcome,
    JobCandidate,
    RunState,
    RunSummary,
    Skipped,
    error_reason,
)
from easy_apply.pacing import Pacing

log = get_logger(__name__)

AttemptFn = Callable[[JobCandidate], AttemptOutcome]


def execute_run(
    candidates: Iterable[JobCandidate],
    max_applications: int,
    attempt: AttemptFn,
    *,
    keywords: str,
    location: str,
    pacing: Pacing | None = None,
) -> RunSummary:
    """
    Try each candidate once, in discovery order.

    The cap is checked before a candidate is touched, so the loop stops as soon
    as ``max_applications`` jobs were applied to (and never starts when it is 0).
    Skipped jobs do not count against the cap. Any exception from one attempt
    becomes a Skipped outcome for that job.
    """
    pacing = pacing or Pacing()
    state = RunState()

    for job in candidates:
        if len(state.applied) >= max_applications:
            log.info("Reached max applications (%d); stopping", max_applications)
            break
        log.info("Trying: %s", job.title)
        try:
            outcome = attempt(job)
        except Exception as e:
            log.error("  ✗ %s: %s", job.title, e)
            outcome = Skipped(title=job.title, url=job.url, reason=error_reason(e))
        finally:
            pacing.between_attempts()
        state.record(outcome)

    log.info(
        "Run complete — tried=%d, applied=%d, skipped=%d",
        state.tried, len(state.applied), len(state.skipped),
    )
    return RunSummary.from_state(keywords, location, state)
