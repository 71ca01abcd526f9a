"""Learning item models."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class LearningType(str, Enum):
    """Categories of learning material."""
    COURSE = "Course"
    TUTORIAL = "Tutorial"
    SKILL = "Skill"
    BOOK = "Book"
    OTHER = "Other"


class LearningStatus(str, Enum):
    """Lifecycle stage of a learning item."""
    STARTED = "Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# Sentinel used by the status and type filters
ALL = "All"


class LearningItem(BaseModel):
    """A tracked piece of study material as returned by the backend."""
    id: str = Field(alias="_id")
    title: str
    type: LearningType = LearningType.COURSE
    status: LearningStatus = LearningStatus.STARTED
    link: Optional[str] = None
    notes: Optional[str] = None
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True


class LearningItemForm(BaseModel):
    """Working copy of the fields edited in the item editor."""
    title: str = ""
    type: LearningType = LearningType.COURSE
    link: str = ""
    status: LearningStatus = LearningStatus.STARTED
    notes: str = ""

    class Config:
        validate_assignment = True

    @classmethod
    def from_item(cls, item: LearningItem) -> "LearningItemForm":
        """Build a form pre-filled from an existing item."""
        return cls(
            title=item.title,
            type=item.type,
            link=item.link or "",
            status=item.status,
            notes=item.notes or "",
        )

    def to_payload(self) -> dict:
        """JSON body for create and update requests."""
        return self.model_dump(mode="json")
