"""Search and filter logic for the learning item list."""

from dataclasses import dataclass
from typing import List, Sequence

from edulog.models.learning_item import ALL, LearningItem


@dataclass
class ItemFilter:
    """Current search text and the status/type selections."""
    search: str = ""
    status: str = ALL
    type: str = ALL

    @property
    def is_active(self) -> bool:
        """Whether any criterion narrows the list."""
        return bool(self.search) or self.status != ALL or self.type != ALL

    def matches(self, item: LearningItem) -> bool:
        """Check one item against all three criteria."""
        term = self.search.lower()
        matches_search = (
            term in item.title.lower()
            or term in item.type.value.lower()
            or term in (item.notes or "").lower()
        )
        matches_status = self.status == ALL or item.status.value == self.status
        matches_type = self.type == ALL or item.type.value == self.type
        return matches_search and matches_status and matches_type

    def apply(self, items: Sequence[LearningItem]) -> List[LearningItem]:
        """Return the matching items, preserving their order."""
        return [item for item in items if self.matches(item)]


def filter_items(
    items: Sequence[LearningItem],
    search: str = "",
    status: str = ALL,
    item_type: str = ALL,
) -> List[LearningItem]:
    """Filter items by search text, status and type."""
    return ItemFilter(search=search, status=status, type=item_type).apply(items)
