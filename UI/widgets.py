# UI/widgets.py
# Form primitives bound to a panel's form state via st.session_state widget keys.
from typing import Any, Callable, Dict, Mapping

import pandas as pd
import streamlit as st


def _bind(panel, field: str) -> str:
    key = panel.widget_key(field)
    if key not in st.session_state:
        st.session_state[key] = panel.form[field]
    return key


def section_header(title: str, subtitle: str = ""):
    st.subheader(title)
    if subtitle:
        st.caption(subtitle)


def text_input(panel, field: str, label: str, **kwargs):
    return st.text_input(label, key=_bind(panel, field), **kwargs)


def text_area(panel, field: str, label: str, **kwargs):
    return st.text_area(label, key=_bind(panel, field), **kwargs)


def date_input(panel, field: str, label: str, **kwargs):
    return st.date_input(label, key=_bind(panel, field), format="YYYY-MM-DD", **kwargs)


def select(panel, field: str, label: str, options: Mapping[Any, str], placeholder: str):
    """Selectbox over record ids; the empty choice ("") shows the placeholder."""
    choices = [""] + list(options)
    key = _bind(panel, field)
    if st.session_state[key] not in choices:
        st.session_state[key] = ""
    return st.selectbox(
        label,
        choices,
        key=key,
        format_func=lambda v: placeholder if v == "" else options.get(v, str(v)),
    )


def with_spinner(fn, *args):
    """Run a load-triggering call (mount, tab switch, submit) under a "Loading..." spinner."""
    with st.spinner("Loading..."):
        return fn(*args)


def _submit(panel):
    for field in panel.form:
        panel.form[field] = st.session_state.get(panel.widget_key(field), panel.form[field])
    if with_spinner(panel.create):
        for field, value in panel.form.items():
            st.session_state[panel.widget_key(field)] = value


def submit_button(panel, label: str):
    return st.button(label, type="primary", on_click=_submit, args=(panel,), key=panel.widget_key("submit"))


def item_list(panel, heading: str, render_item: Callable[[Dict[str, Any]], None]):
    """Read-only list with error/empty states and a table view of the same rows."""
    st.markdown(f"**{heading}**")
    if panel.error:
        st.error(panel.error)

    rows = panel.rows()
    for row in rows:
        with st.container(border=True):
            render_item(row)
    if not rows:
        st.caption(panel.empty_message)

    if rows:
        with st.expander("Table view", expanded=False):
            st.dataframe(pd.DataFrame(rows), hide_index=True)
