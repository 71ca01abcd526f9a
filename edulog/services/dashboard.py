"""
Dashboard orchestration.

Owns the in-memory list of learning items and the UI state around it:
- Loading the list from the backend
- Create, edit, quick status update and confirmed delete
- Search and status/type filters
- Editor and chart visibility

Every network failure is reported once through the notifier and leaves
the list as it was. Nothing is retried.
"""

import logging
from typing import List, Optional

from edulog.models.learning_item import ALL, LearningItem, LearningItemForm, LearningStatus
from edulog.services.api_client import LearningApiClient, LearningApiError
from edulog.services.editor import ItemEditor
from edulog.services.filtering import ItemFilter
from edulog.services.notifications import LoggingNotifier, Notifier
from edulog.services.progress_chart import ProgressChart
from edulog.services.stats import LearningStats, compute_stats


logger = logging.getLogger(__name__)


class Dashboard:
    """State container and action handlers for the learning dashboard."""

    def __init__(self, client: LearningApiClient, notifier: Optional[Notifier] = None):
        self.client = client
        self.notifier = notifier or LoggingNotifier()

        self.items: List[LearningItem] = []
        self.loading: bool = True
        self.filters = ItemFilter()
        self.editor = ItemEditor()
        self.show_chart: bool = False
        self.pending_delete_id: Optional[str] = None

    # Loading

    def load(self):
        """Fetch the full item list; the dashboard is ready afterwards either way."""
        try:
            self.items = self.client.list_items()
        except LearningApiError as e:
            logger.error(f"Fetch learning items error: {e}")
            self.notifier.error("Failed to fetch learning items")
        finally:
            self.loading = False

    # Derived views

    @property
    def filtered_items(self) -> List[LearningItem]:
        return self.filters.apply(self.items)

    @property
    def has_active_filters(self) -> bool:
        return self.filters.is_active

    @property
    def stats(self) -> LearningStats:
        return compute_stats(self.items)

    @property
    def chart(self) -> ProgressChart:
        return ProgressChart(self.items)

    def get_item(self, item_id: str) -> Optional[LearningItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def _replace_item(self, updated: LearningItem):
        self.items = [updated if item.id == updated.id else item for item in self.items]

    # Filters

    def set_search(self, text: str):
        self.filters.search = text

    def set_status_filter(self, status: str):
        self.filters.status = status

    def set_type_filter(self, item_type: str):
        self.filters.type = item_type

    def clear_filters(self):
        """Reset search text and both filters in one step."""
        self.filters = ItemFilter(search="", status=ALL, type=ALL)

    def toggle_chart(self):
        self.show_chart = not self.show_chart

    # Create / edit

    def open_create(self):
        self.editor.open()

    def open_edit(self, item: LearningItem):
        self.editor.open(item)

    def close_editor(self):
        self.editor.close()

    def submit_editor(self) -> bool:
        """
        Submit the editor's working copy.

        Returns:
            True when the item was saved and the editor closed
        """
        form = self.editor.submit()
        if form is None:
            return False
        return self.save_item(form)

    def save_item(self, form: LearningItemForm) -> bool:
        """Create or update depending on the editor's mode."""
        editing = self.editor.item
        try:
            if editing is not None:
                saved = self.client.update_item(editing.id, form.to_payload())
                self._replace_item(saved)
                self.notifier.success("Learning item updated successfully")
            else:
                saved = self.client.create_item(form.to_payload())
                self.items = [saved] + self.items
                self.notifier.success("Learning item created successfully")
        except LearningApiError as e:
            logger.error(f"Save learning item error: {e}")
            self.notifier.error("Failed to save learning item")
            return False

        self.editor.close()
        return True

    # Quick status update

    def update_status(self, item_id: str, status: LearningStatus) -> bool:
        """Change only the status of one item, bypassing the editor."""
        status = LearningStatus(status)
        try:
            updated = self.client.update_item(item_id, {"status": status.value})
        except LearningApiError as e:
            logger.error(f"Update status error: {e}")
            self.notifier.error("Failed to update status")
            return False

        self._replace_item(updated)
        self.notifier.success(f"Status updated to {status.value}")
        return True

    # Delete

    def request_delete(self, item_id: str):
        """Ask for confirmation before deleting."""
        self.pending_delete_id = item_id

    def cancel_delete(self):
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        """Delete the item awaiting confirmation, if any."""
        item_id = self.pending_delete_id
        self.pending_delete_id = None
        if item_id is None:
            return False
        return self.delete_item(item_id)

    def delete_item(self, item_id: str) -> bool:
        try:
            self.client.delete_item(item_id)
        except LearningApiError as e:
            logger.error(f"Delete learning item error: {e}")
            self.notifier.error("Failed to delete learning item")
            return False

        self.items = [item for item in self.items if item.id != item_id]
        self.notifier.success("Learning item deleted successfully")
        return True
