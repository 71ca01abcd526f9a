"""
EduLog - Streamlit Frontend

A dashboard for tracking courses, tutorials, skills and books you are studying.
Features:
- Summary cards with completion rate
- Progress charts by status and learning type
- Search and status/type filters
- Add/edit form, quick status updates and confirmed deletes
"""

import streamlit as st
import sys
import os
from typing import List

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edulog.models.learning_item import ALL, LearningItem, LearningStatus, LearningType
from edulog.services.api_client import LearningApiClient
from edulog.services.dashboard import Dashboard
from edulog.services.notifications import Notifier
from edulog.services.progress_chart import NO_DATA_MESSAGE
from edulog.services.display import (
    status_badge_color, type_icon, format_date, item_count_label, empty_state
)


# Page configuration
st.set_page_config(
    page_title="EduLog",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="collapsed"
)

STATUS_OPTIONS = [ALL] + [s.value for s in LearningStatus]
TYPE_OPTIONS = [ALL] + [t.value for t in LearningType]


def get_user_name() -> str:
    """Display name provided by the auth layer."""
    return os.getenv("EDULOG_USER_NAME", "Learner")


class StreamlitNotifier(Notifier):
    """Queues toasts so they survive the rerun that follows an action."""

    def _push(self, message: str, icon: str):
        st.session_state.setdefault("toasts", []).append((message, icon))

    def success(self, message: str):
        self._push(message, "✅")

    def error(self, message: str):
        self._push(message, "⚠️")


def flush_toasts():
    for message, icon in st.session_state.pop("toasts", []):
        st.toast(message, icon=icon)


def get_dashboard() -> Dashboard:
    """Create the per-session dashboard and load items once."""
    if "dashboard" not in st.session_state:
        dashboard = Dashboard(LearningApiClient(), notifier=StreamlitNotifier())
        with st.spinner("Loading your learning journey..."):
            dashboard.load()
        st.session_state.dashboard = dashboard
        st.session_state.editor_nonce = 0
    return st.session_state.dashboard


def render_header():
    col1, col2 = st.columns([0.8, 0.2])
    with col1:
        st.title("🎓 EduLog")
        st.caption("Learning Tracker")
    with col2:
        st.markdown(f"Welcome, **{get_user_name()}**")


def render_stats_cards(dashboard: Dashboard):
    """Render the four summary cards."""
    stats = dashboard.stats

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("📚 Total Learning Items", stats.total)
    with col2:
        st.metric("🏆 Completed", stats.completed)
    with col3:
        st.metric("📈 In Progress", stats.in_progress)
    with col4:
        st.metric("🎯 Completion Rate", stats.completion_rate_label)
        if stats.total > 0:
            st.progress(stats.completion_rate / 100)


def render_progress_chart(dashboard: Dashboard):
    """Render the status and type charts, or a placeholder when empty."""
    chart = dashboard.chart
    if not chart.has_data:
        st.info(NO_DATA_MESSAGE)
        return

    st.subheader("Learning Progress Overview")
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(chart.pie_figure(), use_container_width=True)
    with col2:
        st.plotly_chart(chart.bar_figure(), use_container_width=True)

    summary = chart.summary()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Items", summary.total)
    col2.metric("Started", summary.started)
    col3.metric("In Progress", summary.in_progress)
    col4.metric("Completed", summary.completed)

    with st.expander("Breakdown by type"):
        st.dataframe(chart.breakdown_frame(), use_container_width=True)


def _open_create():
    st.session_state.dashboard.open_create()
    st.session_state.editor_nonce += 1


def _open_edit(item: LearningItem):
    st.session_state.dashboard.open_edit(item)
    st.session_state.editor_nonce += 1


def _clear_filters():
    st.session_state.dashboard.clear_filters()
    st.session_state.search = ""
    st.session_state.status_filter = ALL
    st.session_state.type_filter = ALL


def _on_status_change(item_id: str):
    new_status = st.session_state[f"status_{item_id}"]
    dashboard = st.session_state.dashboard
    if not dashboard.update_status(item_id, LearningStatus(new_status)):
        # Put the selector back on the status the list still holds
        item = dashboard.get_item(item_id)
        if item:
            st.session_state[f"status_{item_id}"] = item.status.value


def sync_filters(dashboard: Dashboard):
    """Copy the filter widgets' current values onto the dashboard."""
    dashboard.set_search(st.session_state.get("search", ""))
    dashboard.set_status_filter(st.session_state.get("status_filter", ALL))
    dashboard.set_type_filter(st.session_state.get("type_filter", ALL))


def render_controls(dashboard: Dashboard, filtered: List[LearningItem]):
    """Render title row, chart toggle, add button and the filter bar."""
    col1, col2, col3 = st.columns([0.6, 0.2, 0.2])
    with col1:
        st.subheader("My Learning Journey")
        st.caption(item_count_label(len(filtered), dashboard.has_active_filters))
    with col2:
        label = "📊 Hide Chart" if dashboard.show_chart else "📊 Show Chart"
        st.button(label, on_click=dashboard.toggle_chart, use_container_width=True)
    with col3:
        st.button("➕ Add Learning Item", on_click=_open_create, type="primary",
                  use_container_width=True)

    if dashboard.show_chart:
        render_progress_chart(dashboard)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.text_input("Search", placeholder="🔍 Search learning items...",
                      key="search", label_visibility="collapsed")
    with col2:
        st.selectbox(
            "Status", STATUS_OPTIONS, key="status_filter",
            format_func=lambda s: "All Status" if s == ALL else s,
            label_visibility="collapsed"
        )
    with col3:
        st.selectbox(
            "Type", TYPE_OPTIONS, key="type_filter",
            format_func=lambda t: "All Types" if t == ALL else t,
            label_visibility="collapsed"
        )
    with col4:
        st.button("Clear Filters", on_click=_clear_filters, use_container_width=True)


def render_item_card(dashboard: Dashboard, item: LearningItem):
    """Render a single learning item card."""
    with st.container(border=True):
        title = f"[{item.title}]({item.link})" if item.link else item.title
        st.markdown(f"#### {type_icon(item.type)} {title}")

        color = status_badge_color(item.status)
        st.markdown(f":{color}[**{item.status.value}**] · `{item.type.value}`")

        if item.notes:
            st.markdown(item.notes[:300] + "..." if len(item.notes) > 300 else item.notes)

        col1, col2 = st.columns([0.5, 0.5])
        with col1:
            st.caption(format_date(item.updated_at))
        with col2:
            key = f"status_{item.id}"
            if key not in st.session_state or st.session_state[key] != item.status.value:
                st.session_state[key] = item.status.value
            st.selectbox(
                "Status", [s.value for s in LearningStatus], key=key,
                on_change=_on_status_change, args=(item.id,),
                label_visibility="collapsed"
            )

        if dashboard.pending_delete_id == item.id:
            st.warning("Are you sure you want to delete this learning item?")
            col1, col2 = st.columns(2)
            with col1:
                st.button("Delete", key=f"confirm_{item.id}", type="primary",
                          on_click=dashboard.confirm_delete, use_container_width=True)
            with col2:
                st.button("Cancel", key=f"cancel_{item.id}",
                          on_click=dashboard.cancel_delete, use_container_width=True)
        else:
            col1, col2 = st.columns(2)
            with col1:
                st.button("✏️ Edit", key=f"edit_{item.id}", on_click=_open_edit,
                          args=(item,), use_container_width=True)
            with col2:
                st.button("🗑️ Delete", key=f"delete_{item.id}",
                          on_click=dashboard.request_delete, args=(item.id,),
                          use_container_width=True)


def render_item_grid(dashboard: Dashboard, filtered: List[LearningItem]):
    """Render the filtered items three to a row, or the empty state."""
    if not filtered:
        heading, hint = empty_state(dashboard.has_active_filters)
        st.markdown(f"### {heading}")
        st.caption(hint)
        if not dashboard.has_active_filters:
            st.button("➕ Add Learning Item", key="add_empty", on_click=_open_create)
        return

    for start in range(0, len(filtered), 3):
        columns = st.columns(3)
        for column, item in zip(columns, filtered[start:start + 3]):
            with column:
                render_item_card(dashboard, item)


def render_editor(dashboard: Dashboard):
    """Render the add/edit form while the editor is open."""
    editor = dashboard.editor
    form = editor.form
    nonce = st.session_state.editor_nonce
    type_values = [t.value for t in LearningType]
    status_values = [s.value for s in LearningStatus]

    with st.form(f"editor_{nonce}"):
        st.subheader(editor.heading)
        title = st.text_input("Title *", value=form.title,
                              placeholder="e.g., React Hooks Complete Guide")
        col1, col2 = st.columns(2)
        with col1:
            item_type = st.selectbox("Type", type_values, index=type_values.index(form.type.value))
        with col2:
            status = st.selectbox("Status", status_values, index=status_values.index(form.status.value))
        link = st.text_input("🔗 Resource Link (Optional)", value=form.link,
                             placeholder="https://youtube.com/watch?v=... or course URL",
                             help="Add YouTube links, course URLs, or any learning resource")
        notes = st.text_area("📝 Personal Notes (Optional)", value=form.notes, height=120,
                             placeholder="Add your thoughts, key takeaways, or progress notes...")

        col1, col2 = st.columns(2)
        with col1:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)
        with col2:
            submitted = st.form_submit_button(f"💾 {editor.submit_label}", type="primary",
                                              use_container_width=True)

    if cancelled:
        editor.cancel()
        st.rerun()

    if submitted:
        editor.update_field("title", title)
        editor.update_field("type", item_type)
        editor.update_field("status", status)
        editor.update_field("link", link)
        editor.update_field("notes", notes)
        if dashboard.submit_editor():
            st.rerun()
        flush_toasts()


def main():
    """Main application."""
    dashboard = get_dashboard()
    flush_toasts()

    render_header()
    st.divider()

    render_stats_cards(dashboard)
    st.divider()

    if dashboard.editor.is_open:
        render_editor(dashboard)
        st.divider()

    sync_filters(dashboard)
    filtered = dashboard.filtered_items
    render_controls(dashboard, filtered)

    st.divider()
    render_item_grid(dashboard, filtered)


if __name__ == "__main__":
    main()
