"""Data models for job candidates, attempt outcomes and run summaries."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

REASON_NO_EASY_APPLY = "No Easy Apply"
REASON_NOT_CLICKABLE = "Apply button not clickable"
REASON_NOT_SUBMITTED = "Could not submit"


def error_reason(exc: BaseException) -> str:
    """Skip reason for an exception raised while handling one job."""
    msg = str(exc)[:150].split("\n")[0].strip() or exc.__class__.__name__
    return f"Error: {msg}"


@dataclass(frozen=True)
class JobCandidate:
    title: str
    url: str


@dataclass(frozen=True)
class Applied:
    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"job": self.title, "url": self.url, "status": "applied"}


@dataclass(frozen=True)
class Skipped:
    title: str
    url: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"job": self.title, "url": self.url, "reason": self.reason}


AttemptOutcome = Union[Applied, Skipped]


@dataclass
class RunState:
    """Outcomes collected so far; threaded through the run loop."""
    applied: list[Applied] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)

    def record(self, outcome: AttemptOutcome) -> None:
        if isinstance(outcome, Applied):
            self.applied.append(outcome)
        elif isinstance(outcome, Skipped):
            self.skipped.append(outcome)
        else:
            raise TypeError(f"Unknown attempt outcome: {outcome!r}")

    @property
    def tried(self) -> int:
        return len(self.applied) + len(self.skipped)


@dataclass(frozen=True)
class RunSummary:
    keywords: str
    location: str
    applied: tuple[Applied, ...] = ()
    skipped: tuple[Skipped, ...] = ()

    @classmethod
    def from_state(cls, keywords: str, location: str, state: RunState) -> RunSummary:
        return cls(
            keywords=keywords,
            location=location,
            applied=tuple(state.applied),
            skipped=tuple(state.skipped),
        )

    @property
    def total_tried(self) -> int:
        return len(self.applied) + len(self.skipped)

    def to_dict(self) -> dict[str, Any]:
        return {
            "keywords": self.keywords,
            "location": self.location,
            "applied": [a.to_dict() for a in self.applied],
            "skipped": [s.to_dict() for s in self.skipped],
            "totalTried": self.total_tried,
        }
