"""Labels, colours and icons used by the item list."""

from datetime import datetime
from typing import Optional, Tuple

from edulog.models.learning_item import LearningStatus, LearningType


def status_badge_color(status: LearningStatus) -> str:
    """Get the badge colour for a status."""
    colors = {
        LearningStatus.STARTED: "orange",
        LearningStatus.IN_PROGRESS: "blue",
        LearningStatus.COMPLETED: "green",
    }
    return colors.get(status, "gray")


def type_icon(item_type: LearningType) -> str:
    """Get emoji for a learning type."""
    icons = {
        LearningType.COURSE: "🎓",
        LearningType.TUTORIAL: "🎬",
        LearningType.SKILL: "🏅",
        LearningType.BOOK: "📖",
    }
    return icons.get(item_type, "📖")


def format_date(value: Optional[datetime]) -> str:
    """Format a timestamp like 'Oct 19, 2026'."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def item_count_label(count: int, filtered: bool = False) -> str:
    label = f"{count} {'item' if count == 1 else 'items'}"
    return f"{label} (filtered)" if filtered else label


def empty_state(filtered: bool) -> Tuple[str, str]:
    """Title and hint shown when the grid has nothing to display."""
    if filtered:
        return "No learning items found", "Try adjusting your filters or search terms"
    return (
        "Start your learning journey",
        "Add your first learning item to begin tracking your progress",
    )
