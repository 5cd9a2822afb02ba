# UI/panels/departments.py
import streamlit as st

from UI import widgets
from UI.panels.base import ResourcePanel
from UI.schemas import Department, DepartmentCreate


class DepartmentsPanel(ResourcePanel):
    name = "departments"
    title = "Departments"
    subtitle = "Create and manage departments"
    empty_message = "No departments yet."
    path = "/api/departments"
    model = Department
    fields = {"name": "", "description": ""}
    required = ("name",)

    def payload(self):
        # description goes out verbatim, "" included
        return DepartmentCreate(name=self.form["name"], description=self.form["description"]).model_dump()

    def rows(self):
        return [{"id": d.id, "name": d.name, "description": d.description} for d in self.items]


def _render_item(row):
    st.markdown(f"**{row['name']}**")
    if row["description"]:
        st.caption(row["description"])


def render(panel: DepartmentsPanel):
    widgets.section_header(panel.title, panel.subtitle)
    form_col, list_col = st.columns(2)
    with form_col:
        with st.container(border=True):
            widgets.text_input(panel, "name", "Name", placeholder="e.g. Engineering")
            widgets.text_area(panel, "description", "Description", placeholder="Optional", height=100)
            widgets.submit_button(panel, "Add Department")
    with list_col:
        widgets.item_list(panel, "All Departments", _render_item)
