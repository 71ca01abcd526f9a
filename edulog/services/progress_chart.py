"""
Progress chart data and figures.

Derives two aggregate views from the item list:
- Status distribution (count and share of each status present)
- Type breakdown (per type, how many items sit in each status)

Both are pure functions of the list handed in; nothing is cached.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

import pandas as pd
import plotly.graph_objects as go

from edulog.models.learning_item import LearningItem, LearningStatus, LearningType
from edulog.services.stats import LearningStats, compute_stats


STATUS_COLORS: Dict[LearningStatus, str] = {
    LearningStatus.STARTED: "#FCD34D",
    LearningStatus.IN_PROGRESS: "#60A5FA",
    LearningStatus.COMPLETED: "#34D399",
}

NO_DATA_MESSAGE = "No data to display. Add some learning items to see your progress!"


@dataclass
class StatusSlice:
    """One slice of the status distribution."""
    status: LearningStatus
    count: int
    percentage: float  # of all items, one decimal


@dataclass
class TypeBreakdown:
    """Status counts for one learning type."""
    type: LearningType
    count: int
    started: int
    in_progress: int
    completed: int


class ProgressChart:
    """
    Chart data for the learning progress overview.

    Distinct statuses and types are reported in order of first
    appearance in the item list.
    """

    def __init__(self, items: Sequence[LearningItem]):
        self.items = list(items)

    @property
    def has_data(self) -> bool:
        return len(self.items) > 0

    def status_distribution(self) -> List[StatusSlice]:
        """Count and percentage for every status present."""
        counts: Dict[LearningStatus, int] = {}
        for item in self.items:
            counts[item.status] = counts.get(item.status, 0) + 1

        total = len(self.items)
        return [
            StatusSlice(status=status, count=count, percentage=round(count / total * 100, 1))
            for status, count in counts.items()
        ]

    def type_breakdown(self) -> List[TypeBreakdown]:
        """Per-type counts split by status; absent statuses count as zero."""
        by_type: Dict[LearningType, Dict[LearningStatus, int]] = {}
        for item in self.items:
            row = by_type.setdefault(item.type, {status: 0 for status in LearningStatus})
            row[item.status] += 1

        return [
            TypeBreakdown(
                type=item_type,
                count=sum(row.values()),
                started=row[LearningStatus.STARTED],
                in_progress=row[LearningStatus.IN_PROGRESS],
                completed=row[LearningStatus.COMPLETED],
            )
            for item_type, row in by_type.items()
        ]

    def breakdown_frame(self) -> pd.DataFrame:
        """Type breakdown as a table indexed by type."""
        rows = [
            {
                "Type": b.type.value,
                LearningStatus.STARTED.value: b.started,
                LearningStatus.IN_PROGRESS.value: b.in_progress,
                LearningStatus.COMPLETED.value: b.completed,
                "Total": b.count,
            }
            for b in self.type_breakdown()
        ]
        columns = ["Type"] + [s.value for s in LearningStatus] + ["Total"]
        return pd.DataFrame(rows, columns=columns).set_index("Type")

    def summary(self) -> LearningStats:
        """Totals displayed under the charts."""
        return compute_stats(self.items)

    def pie_figure(self) -> go.Figure:
        """Donut chart of the status distribution."""
        slices = self.status_distribution()
        fig = go.Figure(go.Pie(
            labels=[s.status.value for s in slices],
            values=[s.count for s in slices],
            marker=dict(colors=[STATUS_COLORS[s.status] for s in slices]),
            text=[f"{s.percentage}%" for s in slices],
            textinfo="label+text",
            hovertemplate="%{label}: %{value}<extra></extra>",
            hole=0.35,
            sort=False,
        ))
        fig.update_layout(
            title="Status Distribution",
            showlegend=True,
            height=320,
            margin=dict(t=50, b=20, l=20, r=20),
        )
        return fig

    def bar_figure(self) -> go.Figure:
        """Stacked bars of status per learning type."""
        breakdown = self.type_breakdown()
        types = [b.type.value for b in breakdown]
        series = [
            (LearningStatus.STARTED, [b.started for b in breakdown]),
            (LearningStatus.IN_PROGRESS, [b.in_progress for b in breakdown]),
            (LearningStatus.COMPLETED, [b.completed for b in breakdown]),
        ]

        fig = go.Figure()
        for status, values in series:
            fig.add_trace(go.Bar(
                x=types,
                y=values,
                name=status.value,
                marker_color=STATUS_COLORS[status],
            ))

        fig.update_layout(
            title="Learning Types",
            barmode="stack",
            xaxis=dict(tickangle=-45),
            yaxis=dict(dtick=1),
            height=320,
            margin=dict(t=50, b=20, l=20, r=20),
        )
        return fig
