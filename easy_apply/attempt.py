"""
Apply attempt for a single job posting.

Discovered -> Evaluating -> NotApplicable | NotClickable | ApplyOpened -> FormFilled
-> Submitted | SubmitFailed. Every terminal state maps to exactly one
Applied or Skipped outcome.
"""
from __future__ import annotations

from enum import Enum

from easy_apply.config import DEFAULT_PHONE
from easy_apply.log import get_logger
from easy_apply.models import (
    REASON_NO_EASY_APPLY,
    REASON_NOT_CLICKABLE,
    REASON_NOT_SUBMITTED,
    Applied,
    AttemptOutcome,
    JobCandidate,
    Skipped,
)
from easy_apply.pacing import Pacing
from easy_apply.catalog import (
    SelectorCatalog,
    any_visible,
    click_first_match,
    first_visible_match,
    try_click,
)

log = get_logger(__name__)

# A second pass covers flows with a review/confirm step after the first submit.
PROGRESS_PASSES = 2


class AttemptState(str, Enum):
    DISCOVERED = "discovered"
    EVALUATING = "evaluating"
    NOT_APPLICABLE = "not_applicable"
    NOT_CLICKABLE = "not_clickable"
    APPLY_OPENED = "apply_opened"
    FORM_FILLED = "form_filled"
    SUBMITTED = "submitted"
    SUBMIT_FAILED = "submit_failed"


class ApplyAttempt:
    def __init__(
        self,
        page,
        job: JobCandidate,
        catalog: SelectorCatalog,
        *,
        pacing: Pacing | None = None,
        phone: str = DEFAULT_PHONE,
    ) -> None:
        self.page = page
        self.job = job
        self.catalog = catalog
        self.pacing = pacing or Pacing()
        self.phone = phone
        self.state = AttemptState.DISCOVERED
        self.progress_clicks = 0

    def _move(self, state: AttemptState) -> None:
        log.debug("[%s] %s -> %s", self.job.title, self.state.value, state.value)
        self.state = state

    def run(self) -> AttemptOutcome:
        """Drive the posting to a terminal state. Page errors propagate to the caller."""
        self._move(AttemptState.EVALUATING)
        self.page.goto(self.job.url, wait_until="domcontentloaded")
        self.pacing.after_job_load()

        if not any_visible(self.page, self.catalog.apply):
            self._move(AttemptState.NOT_APPLICABLE)
            return self._skip(REASON_NO_EASY_APPLY)

        if not click_first_match(self.page, self.catalog.apply):
            self._move(AttemptState.NOT_CLICKABLE)
            return self._skip(REASON_NOT_CLICKABLE)
        self._move(AttemptState.APPLY_OPENED)
        self.pacing.after_apply_open()

        self._fill_form()
        self._move(AttemptState.FORM_FILLED)

        self._progress()
        confirmed = any_visible(self.page, self.catalog.confirmation)
        if confirmed or self.progress_clicks:
            self._move(AttemptState.SUBMITTED)
            log.info("  ✓ Applied: %s", self.job.title)
            return Applied(title=self.job.title, url=self.job.url)

        self._move(AttemptState.SUBMIT_FAILED)
        return self._skip(REASON_NOT_SUBMITTED)

    def _fill_form(self) -> None:
        field = first_visible_match(self.page, self.catalog.contact_field)
        if field is not None:
            field.fill(self.phone)

    def _progress(self) -> None:
        for _ in range(PROGRESS_PASSES):
            for cand in self.catalog.progress:
                if try_click(self.page, cand):
                    self.progress_clicks += 1
                    self.pacing.after_step()

    def _skip(self, reason: str) -> Skipped:
        log.warning("  ✗ %s: %s", self.job.title, reason)
        return Skipped(title=self.job.title, url=self.job.url, reason=reason)
