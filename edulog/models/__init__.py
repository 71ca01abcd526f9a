from .learning_item import ALL, LearningItem, LearningItemForm, LearningStatus, LearningType

__all__ = ["ALL", "LearningItem", "LearningItemForm", "LearningStatus", "LearningType"]
