from contextlib import contextmanager

import pytest

from UI import widgets
from UI.panels.departments import DepartmentsPanel


@pytest.fixture
def spinner(monkeypatch):
    messages = []

    @contextmanager
    def fake_spinner(text):
        messages.append(text)
        yield

    monkeypatch.setattr(widgets.st, "spinner", fake_spinner)
    return messages


@pytest.fixture
def session_state(monkeypatch, spinner):
    state = {}
    monkeypatch.setattr(widgets.st, "session_state", state)
    return state


def test_submit_copies_widgets_and_clears_on_success(client, session_state):
    panel = DepartmentsPanel(client)
    session_state[panel.widget_key("name")] = "Engineering"
    session_state[panel.widget_key("description")] = "Builds things"

    widgets._submit(panel)

    assert client.posts() == [("POST", "/api/departments", {"name": "Engineering", "description": "Builds things"})]
    assert session_state[panel.widget_key("name")] == ""
    assert session_state[panel.widget_key("description")] == ""


def test_submit_leaves_widgets_alone_when_blank(client, session_state):
    panel = DepartmentsPanel(client)
    session_state[panel.widget_key("name")] = " "
    session_state[panel.widget_key("description")] = "kept"

    widgets._submit(panel)

    assert client.posts() == []
    assert session_state[panel.widget_key("description")] == "kept"


def test_submit_reloads_under_spinner(client, session_state, spinner):
    panel = DepartmentsPanel(client)
    during = []
    client.on_get = lambda path: during.append(list(spinner))
    session_state[panel.widget_key("name")] = "Engineering"

    widgets._submit(panel)

    assert during == [["Loading..."]]


def test_with_spinner_returns_result(spinner):
    assert widgets.with_spinner(lambda a, b: a + b, 1, 2) == 3
    assert spinner == ["Loading..."]


def test_bind_seeds_from_form(client, session_state):
    panel = DepartmentsPanel(client)
    panel.form["name"] = "Ops"

    key = widgets._bind(panel, "name")

    assert session_state[key] == "Ops"
