"""
Sample data loader for trying out EduLog.

Creates sample learning items of every type and status through the REST API,
so the dashboard has something to show.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edulog.models.learning_item import LearningItemForm, LearningType, LearningStatus
from edulog.services.api_client import LearningApiClient, LearningApiError


SAMPLE_ITEMS = [
    LearningItemForm(
        title="React - The Complete Guide",
        type=LearningType.COURSE,
        link="https://www.udemy.com/course/react-the-complete-guide-incl-redux/",
        status=LearningStatus.COMPLETED,
        notes="Hooks, context and Redux Toolkit. Rebuild the shop project without Redux next."
    ),
    LearningItemForm(
        title="Go Basics",
        type=LearningType.TUTORIAL,
        link="https://go.dev/tour/",
        status=LearningStatus.STARTED,
        notes="Finished the basics section, goroutines next."
    ),
    LearningItemForm(
        title="Designing Data-Intensive Applications",
        type=LearningType.BOOK,
        status=LearningStatus.IN_PROGRESS,
        notes="Chapter 5 on replication. Take notes on leaderless replication."
    ),
    LearningItemForm(
        title="Touch typing",
        type=LearningType.SKILL,
        link="https://www.keybr.com/",
        status=LearningStatus.IN_PROGRESS,
        notes="Around 55 wpm, aiming for 70."
    ),
    LearningItemForm(
        title="Docker in 100 Seconds",
        type=LearningType.TUTORIAL,
        link="https://www.youtube.com/watch?v=Gjnup-PuquQ",
        status=LearningStatus.COMPLETED,
    ),
    LearningItemForm(
        title="Linear Algebra lecture notes",
        type=LearningType.OTHER,
        status=LearningStatus.STARTED,
        notes="MIT 18.06 notes, eigenvalues section."
    ),
]


def load_sample_data():
    """Create the sample items on the configured backend."""
    with LearningApiClient() as client:
        print(f"Loading {len(SAMPLE_ITEMS)} sample items into {client.base_url}...")

        try:
            existing = {item.title for item in client.list_items()}
        except LearningApiError as e:
            print(f"Backend not reachable: {e}")
            return

        for form in SAMPLE_ITEMS:
            if form.title in existing:
                print(f"  Skipping (exists): {form.title[:50]}")
                continue
            try:
                item = client.create_item(form.to_payload())
                print(f"  Added: {item.title[:50]}")
            except LearningApiError as e:
                print(f"  Failed: {form.title[:50]}: {e}")

    print("\nSample data loaded successfully!")


if __name__ == "__main__":
    load_sample_data()
