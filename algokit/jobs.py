"""Job sequencing with deadlines, greedy by profit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Job:
    """A unit-time job with an identifier, a deadline and a profit."""

    id: int
    deadline: int
    profit: int


def job_sequence(jobs: Iterable[Job]) -> List[Job]:
    """Return the scheduled jobs in slot order, chosen greedily for maximum profit."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: List[Optional[Job]] = [None] * len(ordered)

    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break

    return [job for job in slots if job is not None]