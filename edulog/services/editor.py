"""Modal editor state for creating and editing a single learning item."""

from typing import Any, Optional

from edulog.models.learning_item import LearningItem, LearningItemForm


class ItemEditor:
    """
    Working copy of one learning item's fields.

    The editor never talks to the backend and never closes itself on
    submit; the dashboard closes it once the save went through.
    """

    def __init__(self):
        self.is_open: bool = False
        self.item: Optional[LearningItem] = None
        self.form = LearningItemForm()

    @property
    def is_edit_mode(self) -> bool:
        return self.item is not None

    @property
    def heading(self) -> str:
        return "Edit Learning Item" if self.is_edit_mode else "Add New Learning Item"

    @property
    def submit_label(self) -> str:
        return "Update Item" if self.is_edit_mode else "Create Item"

    def open(self, item: Optional[LearningItem] = None):
        """
        Open in create mode (no item) or edit mode.

        The working copy is rebuilt from the target on every open.
        """
        self.item = item
        self.form = LearningItemForm.from_item(item) if item else LearningItemForm()
        self.is_open = True

    def update_field(self, name: str, value: Any):
        """Set one form field; type and status go through their enums."""
        if name not in LearningItemForm.model_fields:
            raise KeyError(name)
        setattr(self.form, name, value)

    def submit(self) -> Optional[LearningItemForm]:
        """
        Return the working copy for saving.

        Returns:
            The form, or None when the title is blank (the editor stays open)
        """
        if not self.form.title.strip():
            return None
        return self.form.model_copy()

    def close(self):
        self.is_open = False
        self.item = None
        self.form = LearningItemForm()

    # Cancelling discards edits exactly like closing
    cancel = close
