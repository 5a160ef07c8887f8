"""Fixed settle delays and randomized pacing between jobs."""
from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Pacing:
    job_settle: float = 1.5
    form_settle: float = 2.0
    step_settle: float = 2.0
    between_jobs: float = 1.5
    between_jobs_jitter: float = 1.0
    sleep: Callable[[float], None] = time.sleep

    def after_job_load(self) -> None:
        self.sleep(self.job_settle)

    def after_apply_open(self) -> None:
        self.sleep(self.form_settle)

    def after_step(self) -> None:
        self.sleep(self.step_settle)

    def between_attempts(self) -> None:
        self.sleep(self.between_jobs + random.random() * self.between_jobs_jitter)
