from .api_client import LearningApiClient, LearningApiError, get_api_url, get_api_token
from .filtering import ItemFilter, filter_items
from .stats import LearningStats, compute_stats
from .progress_chart import ProgressChart, StatusSlice, TypeBreakdown, STATUS_COLORS
from .editor import ItemEditor
from .notifications import Notifier, LoggingNotifier
from .dashboard import Dashboard

__all__ = [
    "LearningApiClient",
    "LearningApiError",
    "get_api_url",
    "get_api_token",
    "ItemFilter",
    "filter_items",
    "LearningStats",
    "compute_stats",
    "ProgressChart",
    "StatusSlice",
    "TypeBreakdown",
    "STATUS_COLORS",
    "ItemEditor",
    "Notifier",
    "LoggingNotifier",
    "Dashboard",
]
