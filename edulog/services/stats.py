"""Summary counters shown above the item list."""

from dataclasses import dataclass
from typing import Sequence

from edulog.models.learning_item import LearningItem, LearningStatus


@dataclass
class LearningStats:
    """Counters derived from the full item list."""
    total: int
    completed: int
    in_progress: int
    started: int
    completion_rate: float  # percent, one decimal

    @property
    def completion_rate_label(self) -> str:
        return f"{self.completion_rate:.1f}%"


def compute_stats(items: Sequence[LearningItem]) -> LearningStats:
    """Count items per status and compute the completion rate."""
    total = len(items)
    completed = sum(1 for item in items if item.status == LearningStatus.COMPLETED)
    in_progress = sum(1 for item in items if item.status == LearningStatus.IN_PROGRESS)
    started = sum(1 for item in items if item.status == LearningStatus.STARTED)
    completion_rate = round(completed / total * 100, 1) if total > 0 else 0.0
    return LearningStats(
        total=total,
        completed=completed,
        in_progress=in_progress,
        started=started,
        completion_rate=completion_rate,
    )
