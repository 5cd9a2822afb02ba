# UI/panels/employees.py
import streamlit as st

from UI import widgets
from UI.panels.base import ResourcePanel
from UI.schemas import Department, Employee, EmployeeCreate


class EmployeesPanel(ResourcePanel):
    name = "employees"
    title = "Employees"
    subtitle = "Add team members and view roster"
    empty_message = "No employees yet."
    path = "/api/employees"
    model = Employee
    references = {"departments": ("/api/departments", Department)}
    fields = {
        "first_name": "",
        "last_name": "",
        "email": "",
        "phone": "",
        "role": "",
        "department_id": "",
    }
    required = ("first_name", "last_name", "email")

    def payload(self):
        f = self.form
        body = EmployeeCreate(
            first_name=f["first_name"],
            last_name=f["last_name"],
            email=f["email"],
            # blank optionals are left out of the request, not sent as ""
            phone=f["phone"] or None,
            department_id=f["department_id"] or None,
            role=f["role"] or None,
        )
        return body.model_dump(exclude_none=True)

    def department_options(self):
        return {d.id: d.name for d in self.refs["departments"]}

    def rows(self):
        return [
            {
                "id": e.id,
                "name": e.full_name,
                "role": e.role,
                "email": e.email,
                "phone": e.phone,
                "department": self.resolve("departments", e.department_id) if e.department_id else None,
            }
            for e in self.items
        ]


def _render_item(row):
    role = f" · {row['role']}" if row["role"] else ""
    st.markdown(f"**{row['name']}**{role}")
    st.caption(f"{row['email']} · {row['phone']}" if row["phone"] else row["email"])
    if row["department"]:
        st.caption(f"Dept: {row['department']}")


def render(panel: EmployeesPanel):
    widgets.section_header(panel.title, panel.subtitle)
    form_col, list_col = st.columns(2)
    with form_col:
        with st.container(border=True):
            c1, c2 = st.columns(2)
            with c1:
                widgets.text_input(panel, "first_name", "First name")
            with c2:
                widgets.text_input(panel, "last_name", "Last name")
            widgets.text_input(panel, "email", "Email")
            c3, c4 = st.columns(2)
            with c3:
                widgets.text_input(panel, "phone", "Phone")
            with c4:
                widgets.text_input(panel, "role", "Role")
            widgets.select(panel, "department_id", "Department", panel.department_options(), "Unassigned")
            widgets.submit_button(panel, "Add Employee")
    with list_col:
        widgets.item_list(panel, "Roster", _render_item)
