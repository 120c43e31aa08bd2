"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import AuthenticatedUser, IdentityPort
from src.application.results import ActionResult
from src.application.use_cases.get_net_worth_trend import NetWorthTrend
from src.adapters.interface.streamlit.identity import StreamlitIdentityProvider
from src.domain.constants import (
    ASSET_CATEGORY_HINT,
    LIABILITY_CATEGORY_HINT,
)
from src.domain.models import (
    AssetCategoryBreakdown,
    BalanceSheetEntry,
    EntryKind,
    NetWorthOverview,
    NetWorthSnapshot,
    TimeRange,
    TrendPoint,
)
from src.domain.services.formatting import (
    format_currency,
    format_delta_with_percent,
    format_percent,
    format_summary,
)
from src.infrastructure.container import (
    build_database_adapter,
    build_entry_actions,
    build_net_worth_summary_use_case,
    build_net_worth_trend_use_case,
    build_take_snapshot_use_case,
)
from src.infrastructure.identity import LocalIdentityProvider
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema
from src.infrastructure.settings import AppSettings
from src.utils.decimal_utils import to_number


FLASH_KEY = "flash_message"
PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair charts need.

    Returns:
        Tuple with an ok flag and an error message when not ok.
    """
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


@st.cache_resource(show_spinner=False)
def _load_settings() -> AppSettings:
    """Cached settings for the Streamlit process."""
    return AppSettings.from_env()


@st.cache_resource(show_spinner=False)
def _load_database_adapter() -> DatabaseEnginePort:
    """Cached database adapter with the schema in place."""
    adapter = build_database_adapter(_load_settings())
    ensure_schema(adapter)
    return adapter


def _build_identity(settings: AppSettings) -> IdentityPort:
    """Return the identity adapter for the configured auth mode."""
    if settings.auth_mode == "local":
        return LocalIdentityProvider(settings.local_user_id)
    return StreamlitIdentityProvider()


def _fetch_overview(user_id: str) -> NetWorthOverview:
    """Fetch the user's entries and totals."""
    use_case = build_net_worth_summary_use_case(
        _load_database_adapter(),
        _load_settings(),
    )
    return use_case.execute(user_id)


def _fetch_trend(user_id: str, time_range: TimeRange) -> NetWorthTrend:
    """Fetch the user's snapshots for a range."""
    use_case = build_net_worth_trend_use_case(_load_database_adapter())
    return use_case.execute(user_id, time_range)


def _take_snapshot(user_id: str) -> ActionResult:
    """Append a snapshot of the user's current totals."""
    use_case = build_take_snapshot_use_case(
        _load_database_adapter(),
        _load_settings(),
    )
    return use_case.execute(user_id)


def _flash(message: str) -> None:
    st.session_state[FLASH_KEY] = message


def _render_flash() -> None:
    message = st.session_state.pop(FLASH_KEY, None)
    if message:
        st.success(message)


def _handle_result(result: ActionResult, success_message: str) -> None:
    """Report an action result, rerunning the page on success."""
    if result.success:
        _flash(success_message)
        st.rerun()
        return
    if result.field_errors:
        for field_name, message in result.field_errors.items():
            st.error(f"{field_name.capitalize()}: {message}")
    else:
        st.error(result.error or "Something went wrong")


def _render_sign_in(identity: IdentityPort) -> None:
    """Show the sign-in entry point instead of any data."""
    st.info("Sign in to track your net worth.")
    st.button("Sign in", on_click=identity.login, type="primary")


def _render_summary(
    overview: NetWorthOverview,
    latest_snapshot: NetWorthSnapshot | None,
) -> None:
    """Render asset, liability and net worth metrics.

    Deltas compare against the most recent snapshot when there is one.
    """
    summary = overview.summary
    formatted = format_summary(summary)
    deltas: list[str | None] = [None, None, None]
    if latest_snapshot is not None:
        deltas = [
            format_delta_with_percent(
                summary.asset_total - latest_snapshot.assets,
                latest_snapshot.assets,
            ),
            format_delta_with_percent(
                summary.liability_total - latest_snapshot.liabilities,
                latest_snapshot.liabilities,
            ),
            format_delta_with_percent(
                summary.net_worth - latest_snapshot.networth,
                latest_snapshot.networth,
            ),
        ]

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Total Assets",
        formatted["assets"],
        deltas[0],
    )
    liabilities_col.metric(
        "Total Liabilities",
        formatted["liabilities"],
        deltas[1],
        delta_color="inverse",
    )
    net_worth_col.metric(
        "Net Worth",
        formatted["net_worth"],
        deltas[2],
    )
    if latest_snapshot is not None:
        st.caption(
            "Changes since the snapshot of "
            f"{latest_snapshot.created_at:%b %d, %Y}"
        )


def _prepare_donut_chart_data(
    breakdown: AssetCategoryBreakdown,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Asset totals and allocation shares by category.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Altair-ready chart data.
    """
    items = sorted(
        breakdown.categories,
        key=lambda item: item.amount,
        reverse=True,
    )
    rows = [(item.category, item.amount, item.share) for item in items]
    top_rows = rows[:max_categories]
    other_rows = rows[max_categories:]
    if other_rows:
        other_amount = sum((row[1] for row in other_rows), Decimal("0"))
        other_share = sum((row[2] for row in other_rows), Decimal("0"))
        if other_amount != 0:
            top_rows.append(("Other", other_amount, other_share))

    return [
        {
            "category": category,
            "amount": to_number(amount),
            "amount_label": format_currency(amount, breakdown.currency_code),
            "share_label": format_percent(share),
        }
        for category, amount, share in top_rows
    ]


def _render_allocation_chart(
    breakdown: AssetCategoryBreakdown,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of asset allocation by category."""
    st.subheader("Asset Allocation")
    if not breakdown.categories or all(
        item.amount == 0 for item in breakdown.categories
    ):
        st.info("Add assets to see how they are allocated.")
        return

    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return

    data = _prepare_donut_chart_data(breakdown)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount_label:N", title="Value"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, use_container_width=True)


def _prepare_trend_chart_data(
    points: Sequence[TrendPoint],
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Convert trend points into Altair rows, oldest first."""
    return [
        {
            "date": point.date_label,
            "timestamp": point.created_at.isoformat(),
            "value": to_number(point.value),
            "value_label": format_currency(point.value, currency_code),
        }
        for point in points
    ]


def _render_trend_chart(trend: NetWorthTrend, currency_code: str) -> None:
    """Render the net worth line chart."""
    if not trend.points:
        st.info("No snapshots in this range yet. Take one from the dashboard.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_trend_chart_data(trend.points, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color="#2e7d32",
    ).encode(
        x=alt.X("timestamp:T", title=None, axis=alt.Axis(format="%b %Y")),
        y=alt.Y("value:Q", title=f"Net worth ({currency_code})"),
        tooltip=[
            alt.Tooltip("date:N", title="Date"),
            alt.Tooltip("value_label:N", title="Net worth"),
        ],
    ).properties(height=400)
    st.altair_chart(chart, use_container_width=True)


def _entry_form(
    key: str,
    kind: EntryKind,
    submit_label: str,
    initial: BalanceSheetEntry | None = None,
) -> dict[str, str] | None:
    """Render an entry form and return the raw fields once submitted."""
    hint = (
        ASSET_CATEGORY_HINT if kind is EntryKind.ASSET
        else LIABILITY_CATEGORY_HINT
    )
    with st.form(key, clear_on_submit=initial is None):
        name = st.text_input(
            f"{kind.label} name",
            value=initial.name if initial else "",
            max_chars=100,
        )
        category = st.text_input(
            "Category",
            value=initial.category if initial else "",
            placeholder=hint,
            max_chars=50,
        )
        value = st.text_input(
            "Value",
            value=f"{initial.value:.2f}" if initial else "",
            placeholder="0.00",
        )
        description = st.text_area(
            "Description (optional)",
            value=(initial.description or "") if initial else "",
            max_chars=500,
        )
        submitted = st.form_submit_button(submit_label)
    if not submitted:
        return None
    return {
        "name": name,
        "category": category,
        "value": value,
        "description": description,
    }


def _render_entries(
    kind: EntryKind,
    entries: Sequence[BalanceSheetEntry],
    user: AuthenticatedUser,
    currency_code: str,
) -> None:
    """Render the entry list with add, edit and delete flows."""
    create, update, delete = build_entry_actions(_load_database_adapter(), kind)

    with st.expander(f"Add {kind.label.lower()}", expanded=not entries):
        form = _entry_form(f"create-{kind.value}", kind, f"Add {kind.label}")
        if form is not None:
            _handle_result(
                create.execute(user.id, form),
                f"{kind.label} added",
            )

    if not entries:
        st.caption(f"No {kind.plural_label.lower()} recorded yet.")
        return

    for entry in entries:
        title = (
            f"{entry.name} · {entry.category} · "
            f"{format_currency(entry.value, currency_code)}"
        )
        with st.expander(title):
            if entry.description:
                st.write(entry.description)
            st.caption(f"Updated {entry.updated_at:%b %d, %Y}")
            form = _entry_form(
                f"update-{kind.value}-{entry.id}",
                kind,
                "Save changes",
                initial=entry,
            )
            if form is not None:
                _handle_result(
                    update.execute(user.id, entry.id, form),
                    f"{kind.label} updated",
                )
            if st.button("Delete", key=f"delete-{kind.value}-{entry.id}"):
                _handle_result(
                    delete.execute(user.id, entry.id),
                    f"{kind.label} deleted",
                )


def _render_dashboard(user: AuthenticatedUser, settings: AppSettings) -> None:
    overview = _fetch_overview(user.id)
    trend = _fetch_trend(user.id, TimeRange.ALL)
    _render_summary(overview, trend.latest)

    if st.button("Take snapshot", type="primary"):
        _handle_result(_take_snapshot(user.id), "Snapshot saved")

    chart_col, list_col = st.columns(2)
    with chart_col:
        _render_allocation_chart(overview.breakdown)
    with list_col:
        st.subheader("Allocation by category")
        st.dataframe(
            [
                {
                    "Category": item.category,
                    "Value": format_currency(item.amount, settings.currency_code),
                    "Share": format_percent(item.share),
                }
                for item in overview.breakdown.categories
            ],
            hide_index=True,
        )


def _render_trends(user: AuthenticatedUser, settings: AppSettings) -> None:
    st.subheader("Net Worth Over Time")
    selected = st.radio(
        "Range",
        options=[time_range.value for time_range in TimeRange],
        index=len(TimeRange) - 1,
        horizontal=True,
    )
    trend = _fetch_trend(user.id, TimeRange(selected))
    _render_trend_chart(trend, settings.currency_code)
    st.caption(f"{len(trend.snapshots)} snapshots shown")


PAGES: dict[str, Callable[[AuthenticatedUser, AppSettings], None]] = {
    "Dashboard": _render_dashboard,
    "Trends": _render_trends,
}


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Tracker", layout="wide")
    st.title("Net Worth Tracker")

    settings = _load_settings()
    identity = _build_identity(settings)
    user = identity.current_user()
    if user is None:
        _render_sign_in(identity)
        return

    st.sidebar.write(f"Signed in as {user.name or user.email or user.id}")
    if settings.auth_mode != "local":
        st.sidebar.button("Sign out", on_click=identity.logout)
    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Assets", "Liabilities", "Trends"],
    )
    _render_flash()

    try:
        if page in PAGES:
            PAGES[page](user, settings)
        else:
            kind = EntryKind.ASSET if page == "Assets" else EntryKind.LIABILITY
            overview = _fetch_overview(user.id)
            entries = (
                overview.assets if kind is EntryKind.ASSET
                else overview.liabilities
            )
            st.subheader(kind.plural_label)
            _render_entries(kind, entries, user, settings.currency_code)
    except RuntimeError as exc:
        get_app_logger().error(f"Dashboard page {page} failed: {exc}")
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
