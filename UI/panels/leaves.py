# UI/panels/leaves.py
import streamlit as st

from UI import widgets
from UI.panels.base import ResourcePanel
from UI.schemas import Employee, LeaveCreate, LeaveRequest

# anything that is not approved/rejected (missing status included) looks pending
STATUS_COLORS = {"approved": "green", "rejected": "red"}
PENDING_COLOR = "orange"


def status_badge(status):
    """Return (label, colour) for a leave status."""
    return status or "pending", STATUS_COLORS.get(status, PENDING_COLOR)


class LeavesPanel(ResourcePanel):
    name = "leaves"
    title = "Leave Requests"
    subtitle = "Submit and track time off"
    empty_message = "No leave requests yet."
    path = "/api/leaves"
    model = LeaveRequest
    references = {"employees": ("/api/employees", Employee)}
    fields = {"employee_id": "", "start_date": None, "end_date": None, "reason": ""}
    required = ("employee_id", "start_date", "end_date")

    def display_name(self, reference, record):
        return record.full_name

    def payload(self):
        f = self.form
        body = LeaveCreate(
            employee_id=f["employee_id"],
            start_date=f["start_date"],
            end_date=f["end_date"],
            reason=f["reason"] or None,
        )
        # mode="json" turns the dates into YYYY-MM-DD strings
        return body.model_dump(mode="json", exclude_none=True)

    def employee_options(self):
        return {e.id: e.full_name for e in self.refs["employees"]}

    def rows(self):
        rows = []
        for leave in self.items:
            label, _ = status_badge(leave.status)
            rows.append({
                "id": leave.id,
                "employee": self.resolve("employees", leave.employee_id),
                "start_date": leave.start_date,
                "end_date": leave.end_date,
                "reason": leave.reason,
                "status": label,
            })
        return rows


def _render_item(row):
    label, color = status_badge(row["status"])
    st.markdown(f"**{row['employee']}**")
    st.caption(f"{row['start_date']} → {row['end_date']}")
    if row["reason"]:
        st.caption(row["reason"])
    st.markdown(f":{color}-background[{label}]")


def render(panel: LeavesPanel):
    widgets.section_header(panel.title, panel.subtitle)
    form_col, list_col = st.columns(2)
    with form_col:
        with st.container(border=True):
            widgets.select(panel, "employee_id", "Employee", panel.employee_options(), "Select employee")
            c1, c2 = st.columns(2)
            with c1:
                widgets.date_input(panel, "start_date", "Start date")
            with c2:
                widgets.date_input(panel, "end_date", "End date")
            widgets.text_area(panel, "reason", "Reason", height=100)
            widgets.submit_button(panel, "Submit Leave")
    with list_col:
        widgets.item_list(panel, "All Requests", _render_item)
