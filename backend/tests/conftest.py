"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import os
import sys
from types import SimpleNamespace

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from oxedro.controllers.login_controller import LoginController
from oxedro.services.auth_gateway import AuthGateway


class FakeQuery:
    """Mimics the PostgREST builder: select(...).eq(...).eq(...).execute()."""

    def __init__(self, backend, table):
        self._backend = backend
        self._table = table
        self._filters = []

    def select(self, columns="*"):
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    async def execute(self):
        self._backend.queries.append((self._table, list(self._filters)))
        if self._backend.query_error is not None:
            raise self._backend.query_error
        rows = [
            dict(row)
            for row in self._backend.tables.get(self._table, [])
            if all(row.get(column) == value for column, value in self._filters)
        ]
        return SimpleNamespace(data=rows)


class FakeAuth:
    """Mimics the GoTrue client: password sign-in, session, sign-out, change events."""

    def __init__(self):
        self.accounts = {}  # email -> (password, user_id)
        self.session = None
        self.sign_in_calls = []
        self.sign_out_calls = 0
        self.session_error = None
        self.sign_out_error = None
        self._listeners = []

    def on_auth_state_change(self, callback):
        self._listeners.append(callback)
        return SimpleNamespace(unsubscribe=lambda: self._listeners.remove(callback))

    def _notify(self, event):
        for callback in list(self._listeners):
            callback(event, self.session)

    async def sign_in_with_password(self, credentials):
        self.sign_in_calls.append(dict(credentials))
        account = self.accounts.get(credentials["email"])
        if account is None or account[0] != credentials["password"]:
            raise Exception("Invalid login credentials")
        self.session = SimpleNamespace(
            access_token="access-token",
            user=SimpleNamespace(id=account[1], email=credentials["email"]),
        )
        self._notify("SIGNED_IN")
        return SimpleNamespace(user=self.session.user, session=self.session)

    async def get_session(self):
        if self.session_error is not None:
            raise self.session_error
        return self.session

    async def sign_out(self):
        self.sign_out_calls += 1
        if self.sign_out_error is not None:
            raise self.sign_out_error
        self.session = None
        self._notify("SIGNED_OUT")


class FakeBackendClient:
    def __init__(self):
        self.tables = {"profiles": []}
        self.queries = []
        self.query_error = None
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self, name)

    def add_member(self, row, password):
        self.tables["profiles"].append(row)
        self.auth.accounts[row["email"]] = (password, row["id"])


@pytest.fixture
def student_row():
    return {
        "id": "8f14e45f-ea0e-4d3b-9a5c-000000000001",
        "unique_id": "TIME25ST9367",
        "email": "s@school.edu",
        "phone": "+91 98765 43210",
        "first_name": "Asha",
        "last_name": "Verma",
        "role": "student",
        "sex": "female",
        "blood_group": "B+",
        "is_active": True,
        "created_at": "2025-06-01T09:00:00+00:00",
        "updated_at": "2025-06-01T09:00:00+00:00",
    }


@pytest.fixture
def backend(student_row):
    client = FakeBackendClient()
    client.add_member(student_row, "correct-pass")
    return client


@pytest.fixture
def gateway(backend):
    return AuthGateway(backend, profiles_table="profiles")


@pytest.fixture
def controller(gateway):
    return LoginController(gateway)
