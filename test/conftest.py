"""Pytest fixtures: an in-memory stand-in for the HR backend."""

import itertools
import threading

import pytest

from UI.errors import NetworkError, RequestError


class FakeClient:
    """Records every call; GETs return the stored collection, POSTs append to it."""

    base_url = "http://fake-backend"

    def __init__(self, data=None):
        self.data = {path: list(items) for path, items in (data or {}).items()}
        self.calls = []
        self.fail = {}
        self.on_get = None
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _record(self, method, path, body=None):
        with self._lock:
            self.calls.append((method, path, body))

    def get(self, path):
        self._record("GET", path)
        if self.on_get:
            self.on_get(path)
        if ("GET", path) in self.fail:
            raise self.fail[("GET", path)]
        return [dict(item) for item in self.data.get(path, [])]

    def check(self):
        self._record("GET", "/")
        return {"status": "ok"}

    def post(self, path, body):
        self._record("POST", path, body)
        if ("POST", path) in self.fail:
            raise self.fail[("POST", path)]
        created = {"id": f"n{next(self._ids)}", **body}
        self.data.setdefault(path, []).append(created)
        return created

    def gets(self, path=None):
        return [c for c in self.calls if c[0] == "GET" and (path is None or c[1] == path)]

    def posts(self, path=None):
        return [c for c in self.calls if c[0] == "POST" and (path is None or c[1] == path)]


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def hr_client():
    return FakeClient({
        "/api/departments": [{"id": "d1", "name": "Engineering", "description": "Builds things"}],
        "/api/employees": [
            {"id": "e1", "first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com",
             "department_id": "d1", "role": "Engineer"},
        ],
        "/api/leaves": [
            {"id": "l1", "employee_id": "e1", "start_date": "2025-09-10", "end_date": "2025-09-12",
             "reason": "Vacation", "status": "approved"},
        ],
    })


@pytest.fixture
def request_error():
    return RequestError("boom", status_code=500, body="boom")


@pytest.fixture
def network_error():
    return NetworkError("Backend not reachable: connection refused")
