# UI/shell.py
import logging

from UI.panels import departments, employees, leaves

logger = logging.getLogger("hrms")

# tab name -> (button label, panel class, render function)
TABS = {
    "employees": ("Employees", employees.EmployeesPanel, employees.render),
    "departments": ("Departments", departments.DepartmentsPanel, departments.render),
    "leaves": ("Leaves", leaves.LeavesPanel, leaves.render),
}
DEFAULT_TAB = "employees"


class Shell:
    """Holds the active tab; switching tabs throws the old panel away and mounts a fresh one."""

    def __init__(self, client, active: str = DEFAULT_TAB):
        self.client = client
        self.active = None
        self.panel = None
        self.select(active)

    def select(self, tab: str):
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        if tab == self.active and self.panel is not None:
            return self.panel
        if self.panel is not None:
            self.panel.unmount()
        logger.debug("Switching to %s", tab)
        self.active = tab
        self.panel = TABS[tab][1](self.client)
        self.panel.mount()
        return self.panel

    def render(self):
        TABS[self.active][2](self.panel)
