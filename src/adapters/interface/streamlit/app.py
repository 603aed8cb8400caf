"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, datetime

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_category_donut,
    build_responsible_bars,
    prepare_category_chart_data,
    prepare_responsible_chart_data,
)
from src.adapters.interface.streamlit.formatting import (
    format_currency,
    format_datetime,
    kind_label,
)
from src.application.ports.record_store import RecordStoreError
from src.application.use_cases.export_records import (
    ExportRecordsUseCase,
    export_filename,
)
from src.application.use_cases.get_dashboard import (
    DashboardView,
    GetDashboardUseCase,
)
from src.application.use_cases.list_records import (
    ListRecordsUseCase,
    RecordsListView,
)
from src.application.use_cases.manage_records import ManageRecordsUseCase
from src.domain.constants import (
    ALL_FILTER,
    SUGGESTED_RESPONSIBLES,
    suggested_categories,
)
from src.domain.errors import RecordValidationError
from src.domain.models import (
    FinanceRecord,
    Period,
    RecordChanges,
    RecordFilters,
    RecordForm,
    RecordKind,
)
from src.domain.models.forms import FORM_DATETIME_FORMAT
from src.domain.services import PERIOD_LABELS, build_record_draft
from src.infrastructure.container import build_manage_records_use_case
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import FinanceSettings

RECORDS_KEY = "records"
LOADED_KEY = "records_loaded"
PERIOD_KEY = "period"
FORM_MODE_KEY = "form_mode"
EDITING_KEY = "editing_record_id"
FORM_ERRORS_KEY = "form_errors"

PAGES = ("Dashboard", "Records")


@st.cache_resource(show_spinner=False)
def _get_manage_use_case() -> ManageRecordsUseCase:
    """Build the record management use case once per server process."""
    return build_manage_records_use_case()


def _current_records() -> tuple[FinanceRecord, ...]:
    return st.session_state.get(RECORDS_KEY, ())


def _load_records(use_case: ManageRecordsUseCase, force: bool = False) -> None:
    """Fill the session cache from the store, once unless ``force``."""
    if st.session_state.get(LOADED_KEY) and not force:
        return
    result = use_case.load(_current_records())
    st.session_state[RECORDS_KEY] = result.records
    st.session_state[LOADED_KEY] = True
    if result.error:
        st.error(result.error)


def _save_record(
    use_case: ManageRecordsUseCase,
    form: RecordForm,
    editing_id: int | None,
) -> bool:
    """Validate the form and create or update the record.

    Returns:
        bool: True when the store accepted the record.
    """
    try:
        draft = build_record_draft(form)
    except RecordValidationError as exc:
        st.session_state[FORM_ERRORS_KEY] = exc.errors
        return False
    st.session_state[FORM_ERRORS_KEY] = {}

    records = _current_records()
    try:
        if editing_id is None:
            mutation = use_case.add(records, draft)
            st.toast("Record created.")
        else:
            mutation = use_case.update(
                records,
                editing_id,
                RecordChanges.from_draft(draft),
            )
            st.toast("Record updated.")
    except RecordStoreError:
        st.error("Could not save the record. Please try again.")
        return False

    st.session_state[RECORDS_KEY] = mutation.records
    get_usage_logger().info(
        f"{'Created' if editing_id is None else 'Updated'} record "
        f"{mutation.record.id}"
    )
    return True


def _delete_record(use_case: ManageRecordsUseCase, record_id: int) -> bool:
    """Delete a record and drop it from the session cache."""
    try:
        remaining = use_case.delete(_current_records(), record_id)
    except RecordStoreError:
        st.error("Could not delete the record. Please try again.")
        return False
    st.session_state[RECORDS_KEY] = remaining
    st.toast("Record deleted.")
    get_usage_logger().info(f"Deleted record {record_id}")
    return True


def _close_form() -> None:
    st.session_state[FORM_MODE_KEY] = None
    st.session_state[EDITING_KEY] = None
    st.session_state[FORM_ERRORS_KEY] = {}


def _pick_label(typed: str, suggestion: str) -> str:
    """Return the typed label, or the picked suggestion when none typed."""
    return typed.strip() or suggestion


def _form_initial_datetime(form: RecordForm) -> datetime:
    try:
        return datetime.strptime(form.occurred_at, FORM_DATETIME_FORMAT)
    except ValueError:
        return datetime.now().replace(second=0, microsecond=0)


def _render_record_form(
    use_case: ManageRecordsUseCase,
    editing: FinanceRecord | None,
) -> None:
    """Render the new/edit record form."""
    initial = (
        RecordForm.from_record(editing) if editing else RecordForm.blank()
    )
    st.subheader("Edit record" if editing else "New record")
    errors: dict[str, str] = st.session_state.get(FORM_ERRORS_KEY) or {}

    kinds = [kind.value for kind in RecordKind]
    kind = st.radio(
        "Kind *",
        options=kinds,
        index=kinds.index(initial.kind),
        format_func=kind_label,
        horizontal=True,
    )
    with st.form("record_form", clear_on_submit=False):
        initial_dt = _form_initial_datetime(initial)
        date_col, time_col = st.columns(2)
        occurred_date = date_col.date_input("Date *", value=initial_dt.date())
        occurred_time = time_col.time_input("Time *", value=initial_dt.time())
        if "occurred_at" in errors:
            st.error(errors["occurred_at"])

        responsible_col, category_col = st.columns(2)
        responsible = responsible_col.text_input(
            "Responsible *",
            value=initial.responsible,
            placeholder="Type a name",
        )
        responsible_pick = responsible_col.selectbox(
            "or pick one",
            options=[""] + list(SUGGESTED_RESPONSIBLES),
            key="responsible_pick",
        )
        if "responsible" in errors:
            responsible_col.error(errors["responsible"])
        category = category_col.text_input(
            "Category *",
            value=initial.category,
            placeholder="Type a category",
        )
        category_pick = category_col.selectbox(
            "or pick one",
            options=[""] + list(suggested_categories(kind)),
            key="category_pick",
        )
        if "category" in errors:
            category_col.error(errors["category"])

        amount = st.text_input(
            "Amount (R$) *",
            value=initial.amount,
            placeholder="0,00",
        )
        if "amount" in errors:
            st.error(errors["amount"])
        description = st.text_area(
            "Description",
            value=initial.description,
            placeholder="Details about the record (optional)",
        )

        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button(
            "Update" if editing else "Save"
        )
        cancelled = cancel_col.form_submit_button("Cancel")

    if cancelled:
        _close_form()
        st.rerun()
    if submitted:
        form = RecordForm(
            occurred_at=datetime.combine(
                occurred_date,
                occurred_time,
            ).strftime(FORM_DATETIME_FORMAT),
            responsible=_pick_label(responsible, responsible_pick),
            category=_pick_label(category, category_pick),
            kind=kind,
            amount=amount,
            description=description,
        )
        if _save_record(use_case, form, editing.id if editing else None):
            _close_form()
        st.rerun()


def _render_summary(view: DashboardView) -> None:
    summary = view.summary
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric("Total income", format_currency(summary.income))
    expense_col.metric("Total expenses", format_currency(summary.expense))
    balance_col.metric("Balance", format_currency(summary.balance))


def _render_dashboard(
    records: Sequence[FinanceRecord],
    default_period: Period,
) -> None:
    """Render the dashboard page for the selected period."""
    st.subheader("Financial dashboard")
    periods = list(Period)
    selected = st.session_state.get(PERIOD_KEY, default_period)
    period = st.radio(
        "Period",
        options=periods,
        index=periods.index(selected),
        format_func=lambda item: PERIOD_LABELS[item],
        horizontal=True,
    )
    st.session_state[PERIOD_KEY] = period

    view = GetDashboardUseCase().execute(records, period)
    _render_summary(view)

    chart_left, chart_right = st.columns(2)
    with chart_left:
        st.subheader("Expenses by category")
        data, _ = prepare_category_chart_data(view.expense_categories)
        if data:
            st.altair_chart(build_category_donut(data), width="stretch")
        else:
            st.info("No data available.")
    with chart_right:
        st.subheader("Income vs expenses by responsible")
        bars = prepare_responsible_chart_data(view.responsibles)
        if bars:
            st.altair_chart(build_responsible_bars(bars), width="stretch")
        else:
            st.info("No data available.")

    st.subheader("Summary by category")
    if not view.categories:
        st.info("No data available.")
        return
    st.dataframe(
        [
            {
                "Category": group.category,
                "Kind": kind_label(group.kind),
                "Amount": format_currency(group.amount),
            }
            for group in view.categories
        ],
        width="stretch",
        hide_index=True,
    )


def _render_filters(records: Sequence[FinanceRecord]) -> RecordFilters:
    """Render the filter widgets and return the selected criteria."""
    options = ListRecordsUseCase().execute(records, RecordFilters())
    query = st.text_input(
        "Search",
        placeholder="Search by description, responsible...",
    )
    kind_col, responsible_col, category_col = st.columns(3)
    kind = kind_col.selectbox(
        "Kind",
        options=[ALL_FILTER] + [kind.value for kind in RecordKind],
        format_func=lambda value: (
            "All kinds" if value == ALL_FILTER else kind_label(value)
        ),
    )
    responsible = responsible_col.selectbox(
        "Responsible",
        options=[ALL_FILTER] + options.responsibles,
        format_func=lambda value: "All" if value == ALL_FILTER else value,
    )
    category = category_col.selectbox(
        "Category",
        options=[ALL_FILTER] + options.categories,
        format_func=lambda value: "All" if value == ALL_FILTER else value,
    )
    from_col, to_col = st.columns(2)
    start_date = from_col.date_input("From", value=None)
    end_date = to_col.date_input("To", value=None)
    return RecordFilters(
        query=query,
        kind=kind,
        responsible=responsible,
        category=category,
        start_date=start_date,
        end_date=end_date,
    )


def _records_table(view: RecordsListView) -> list[dict[str, str | int]]:
    return [
        {
            "ID": record.id,
            "Date": format_datetime(record.occurred_at),
            "Responsible": record.responsible,
            "Category": record.category,
            "Kind": kind_label(record.kind),
            "Amount": format_currency(record.amount),
            "Description": record.description or "-",
        }
        for record in view.records
    ]


def _render_records(
    use_case: ManageRecordsUseCase,
    records: Sequence[FinanceRecord],
) -> None:
    """Render the records page with filters, table and row actions."""
    st.subheader("Financial records")
    filters = _render_filters(records)
    view = ListRecordsUseCase().execute(records, filters)
    st.caption(f"{view.shown_count} of {view.total_count} records")

    st.download_button(
        "Export CSV",
        data=ExportRecordsUseCase().execute(view.records),
        file_name=export_filename(date.today()),
        mime="text/csv",
    )

    if not view.records:
        st.info("No records match the filters.")
        return
    st.dataframe(_records_table(view), width="stretch", hide_index=True)

    by_id = {record.id: record for record in view.records}
    selected_id = st.selectbox(
        "Select a record",
        options=list(by_id),
        format_func=lambda record_id: (
            f"#{record_id} · {format_datetime(by_id[record_id].occurred_at)}"
            f" · {by_id[record_id].category} · "
            f"{format_currency(by_id[record_id].amount)}"
        ),
    )
    edit_col, delete_col, confirm_col = st.columns(3)
    if edit_col.button("Edit"):
        st.session_state[FORM_MODE_KEY] = "edit"
        st.session_state[EDITING_KEY] = selected_id
        st.rerun()
    confirmed = confirm_col.checkbox("Confirm deletion")
    if delete_col.button("Delete", disabled=not confirmed):
        if _delete_record(use_case, selected_id):
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Family Finance", layout="wide")
    st.title("Family Finance")

    settings = FinanceSettings.from_env()
    use_case = _get_manage_use_case()
    _load_records(use_case)

    if st.sidebar.button("New record"):
        st.session_state[FORM_MODE_KEY] = "create"
        st.session_state[EDITING_KEY] = None
    if st.sidebar.button("Reload"):
        _load_records(use_case, force=True)
    page = st.sidebar.radio("Page", PAGES)

    records = _current_records()
    if not records:
        st.info(
            "No records found. Start by adding your first record with "
            "the \"New record\" button."
        )
    else:
        st.caption(f"Showing {len(records)} record(s) from the store.")

    mode = st.session_state.get(FORM_MODE_KEY)
    if mode:
        editing_id = st.session_state.get(EDITING_KEY)
        editing = next(
            (record for record in records if record.id == editing_id),
            None,
        )
        _render_record_form(use_case, editing if mode == "edit" else None)
        return

    if page == "Dashboard":
        _render_dashboard(records, settings.default_period)
    else:
        _render_records(use_case, records)


if __name__ == "__main__":  # pragma: no cover
    main()
