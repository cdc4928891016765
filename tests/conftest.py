import json
import pytest
from bizdesk.db.memory import WORKSPACES
from bizdesk.stores.workspace import Workspace

UPSTREAM = "http://upstream.test/api"


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            self.text = ""
        elif isinstance(body, str):
            self.text = body
        else:
            self.text = json.dumps(body)


class FakeSession:
    """Stands in for requests.Session: records every call and replays canned answers per (method, path)."""

    def __init__(self):
        self.calls = []
        self.routes = {}

    def add(self, method, path, body=None, status=200):
        self.routes.setdefault((method, path), []).append(FakeResponse(status, body))

    def request(self, method, url, params=None, json=None, data=None, files=None, headers=None, timeout=None):
        path = url[len(UPSTREAM):]
        self.calls.append({
            "method": method,
            "path": path,
            "params": params,
            "json": json,
            "data": data,
            "files": files,
            "headers": headers or {},
        })
        queue = self.routes.get((method, path))
        if not queue:
            return FakeResponse(404, {"message": f"No fake route for {method} {path}"})
        # the last queued answer keeps replaying
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def calls_to(self, method, path):
        return [c for c in self.calls if c["method"] == method and c["path"] == path]


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def clear_workspaces():
    WORKSPACES.clear()
    yield
    WORKSPACES.clear()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def workspace(session, clock):
    ws = Workspace("tenant-1", session=session, clock=clock, base_url=UPSTREAM)
    WORKSPACES["tenant-1"] = ws
    return ws


def customer(id, first_name="Ana", branch_id=1, **extra):
    return dict({"id": id, "first_name": first_name, "last_name": "Cruz", "branch_id": branch_id,
                 "email": f"{first_name.lower()}@example.com", "phone_number": "+639171234567"}, **extra)


def branch_context(id, name=None):
    return {"id": id, "name": name or f"Branch {id}"}
