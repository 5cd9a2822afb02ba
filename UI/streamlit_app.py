# UI/streamlit_app.py
import streamlit as st

from UI.api_client import backend_status, get_client
from UI.logging_config import setup_logging
from UI.shell import TABS, Shell
from UI.widgets import with_spinner

st.set_page_config(page_title="HRMS", page_icon="🏢", layout="wide")
setup_logging()


# ----------------------------
# Session state defaults
# ----------------------------
def _init_state():
    if "client" not in st.session_state:
        st.session_state["client"] = get_client()
    if "shell" not in st.session_state:
        st.session_state["shell"] = with_spinner(Shell, st.session_state["client"])


def check_backend(client):
    reachable, message = backend_status(client)
    if reachable:
        st.toast(f"✅ {message}", icon="✅")
    else:
        st.toast(f"⚠️ {message}", icon="⚠️")


_init_state()
client = st.session_state["client"]
shell = st.session_state["shell"]

# ----------------------------
# Header
# ----------------------------
title_col, nav_col = st.columns([1, 2])
with title_col:
    st.title("HRMS")
    st.caption(f"Backend: {client.base_url}")
with nav_col:
    buttons = st.columns(len(TABS) + 1)
    for col, (tab, (label, _, _)) in zip(buttons, TABS.items()):
        col.button(
            label,
            type="primary" if tab == shell.active else "secondary",
            on_click=with_spinner,
            args=(shell.select, tab),
        )
    buttons[-1].button("Check Backend", on_click=check_backend, args=(client,))

st.markdown("---")
shell.render()
st.markdown("---")
st.caption("Simple HR Management • Demo")
