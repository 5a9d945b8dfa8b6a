"""
Test configuration and fixtures for the RentEase web application.
Provides an in-memory stand-in for the hosted backend client, test data
factories and common test utilities.
"""

import pytest
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional, Set, Tuple
from fastapi.testclient import TestClient
from supabase import AuthError, PostgrestAPIError

from rentease.main import app
from rentease.models.property import Listing
from rentease.models.user import Identity
from rentease.services.session import SessionManager
from rentease.utils.dependencies import get_session_manager


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


class FakeAuthError(AuthError):
    """Auth rejection raised by the fake auth service."""

    def __init__(self, message: str):
        Exception.__init__(self, message)
        self.message = message
        self.status = 400
        self.code = None


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data


class FakeUser:
    def __init__(self, id: str, email: str):
        self.id = id
        self.email = email


class FakeSession:
    def __init__(self, user: FakeUser):
        self.user = user
        self.access_token = uuid.uuid4().hex


class FakeAuthResponse:
    def __init__(self, user: Optional[FakeUser], session: Optional[FakeSession]):
        self.user = user
        self.session = session


class FakeBackend:
    """
    Shared state behind every fake client: collections, accounts and
    injected failures.
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            "profiles": [],
            "properties": [],
            "user_roles": [],
            "contacts": [],
        }
        self.accounts: Dict[str, Dict[str, str]] = {}
        self.failures: Set[Tuple[str, Optional[str]]] = set()
        self.calls: List[Tuple[str, str]] = []
        self.require_email_confirmation = False
        self._clock = 0

    def next_timestamp(self) -> str:
        self._clock += 1
        return (BASE_TIME + timedelta(seconds=self._clock)).isoformat()

    def fail(self, table: str, action: Optional[str] = None) -> None:
        """Make calls against ``table`` (optionally only ``action``) raise."""
        self.failures.add((table, action))

    def heal(self) -> None:
        self.failures.clear()

    def should_fail(self, table: str, action: str) -> bool:
        return (table, action) in self.failures or (table, None) in self.failures

    def calls_to(self, table: str, action: Optional[str] = None) -> List[Tuple[str, str]]:
        return [call for call in self.calls if call[0] == table and (action is None or call[1] == action)]


class FakeQuery:
    """Chainable query mirroring the record store's builder."""

    def __init__(self, backend: FakeBackend, table: str):
        self.backend = backend
        self.table = table
        self.action = "select"
        self.columns = "*"
        self.payload: Any = None
        self.filters: List[Tuple[str, Any]] = []
        self.ordering: Optional[Tuple[str, bool]] = None
        self.row_limit: Optional[int] = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self.action = "select"
        self.columns = columns
        return self

    def insert(self, payload: Dict[str, Any]) -> "FakeQuery":
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload: Dict[str, Any]) -> "FakeQuery":
        self.action = "update"
        self.payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self.action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.ordering = (column, desc)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.row_limit = count
        return self

    async def execute(self) -> FakeResponse:
        self.backend.calls.append((self.table, self.action))
        if self.backend.should_fail(self.table, self.action):
            raise PostgrestAPIError({"message": f"{self.action} on {self.table} failed", "code": "500"})

        rows = self.backend.tables.setdefault(self.table, [])

        if self.action == "insert":
            row = dict(self.payload)
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("created_at", self.backend.next_timestamp())
            if self.table == "properties":
                row.setdefault("is_available", True)
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])

        if self.action == "delete":
            self.backend.tables[self.table] = [row for row in rows if not self._matches(row)]
            return FakeResponse([dict(row) for row in matched])

        if self.ordering:
            column, desc = self.ordering
            matched = sorted(matched, key=lambda row: row.get(column) or "", reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([self._project(row) for row in matched])

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        parts = []
        depth = 0
        current = ""
        for char in self.columns:
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            if char == "," and depth == 0:
                parts.append(current.strip())
                current = ""
            else:
                current += char
        parts.append(current.strip())

        projected: Dict[str, Any] = {}
        for part in parts:
            if part == "*":
                projected.update(row)
            elif ":" in part and "(" in part:
                # alias:foreign_key(col, col)
                alias, rest = part.split(":", 1)
                foreign_key, fields = rest.split("(", 1)
                fields = [field.strip() for field in fields.rstrip(")").split(",")]
                profile = next(
                    (p for p in self.backend.tables["profiles"] if p["id"] == row.get(foreign_key.strip())),
                    None
                )
                projected[alias.strip()] = (
                    {field: profile.get(field) for field in fields} if profile else None
                )
            else:
                projected[part] = row.get(part)
        return projected


class FakeSubscription:
    def __init__(self, auth: "FakeAuth", key: str):
        self._auth = auth
        self._key = key

    def unsubscribe(self) -> None:
        self._auth.listeners.pop(self._key, None)


class FakeAuth:
    """Auth service of one client; events fire synchronously like the real one."""

    def __init__(self, backend: FakeBackend):
        self.backend = backend
        self.session: Optional[FakeSession] = None
        self.listeners: Dict[str, Callable] = {}
        self.sign_out_error: Optional[Exception] = None

    def on_auth_state_change(self, callback: Callable) -> FakeSubscription:
        key = uuid.uuid4().hex
        self.listeners[key] = callback
        return FakeSubscription(self, key)

    async def get_session(self) -> Optional[FakeSession]:
        return self.session

    async def sign_in_with_password(self, credentials: Dict[str, str]) -> FakeAuthResponse:
        account = self.backend.accounts.get(credentials["email"])
        if account is None or account["password"] != credentials["password"]:
            raise FakeAuthError("Invalid login credentials")

        user = FakeUser(account["id"], credentials["email"])
        self.session = FakeSession(user)
        self.emit("SIGNED_IN")
        return FakeAuthResponse(user, self.session)

    async def sign_up(self, credentials: Dict[str, Any]) -> FakeAuthResponse:
        email = credentials["email"]
        if email in self.backend.accounts:
            raise FakeAuthError("User already registered")

        name = credentials.get("options", {}).get("data", {}).get("name", "")
        user_id = str(uuid.uuid4())
        self.backend.accounts[email] = {"id": user_id, "password": credentials["password"]}
        self.backend.tables["profiles"].append({"id": user_id, "name": name, "email": email, "phone": None})

        user = FakeUser(user_id, email)
        if self.backend.require_email_confirmation:
            return FakeAuthResponse(user, None)

        self.session = FakeSession(user)
        self.emit("SIGNED_IN")
        return FakeAuthResponse(user, self.session)

    async def sign_out(self) -> None:
        if self.sign_out_error is not None:
            raise self.sign_out_error
        self.session = None
        self.emit("SIGNED_OUT")

    def expire(self) -> None:
        """Simulate the session ending on the auth service side."""
        self.session = None
        self.emit("SIGNED_OUT")

    def emit(self, event: str) -> None:
        for callback in list(self.listeners.values()):
            callback(event, self.session)


class FakeSupabaseClient:
    def __init__(self, backend: FakeBackend):
        self.backend = backend
        self.auth = FakeAuth(backend)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.backend, name)


# Test data factories
class AccountFactory:
    """Factory for creating backend accounts with profiles and roles."""

    @staticmethod
    def create_account(
        backend: FakeBackend,
        email: Optional[str] = None,
        password: str = "testpassword123",
        name: str = "Test User",
        roles: Tuple[str, ...] = (),
        phone: Optional[str] = None
    ) -> Identity:
        email = email or f"test{uuid.uuid4().hex[:8]}@example.com"
        user_id = str(uuid.uuid4())
        backend.accounts[email] = {"id": user_id, "password": password}
        backend.tables["profiles"].append({
            "id": user_id,
            "name": name,
            "email": email,
            "phone": phone,
            "created_at": backend.next_timestamp(),
        })
        for role in roles:
            backend.tables["user_roles"].append({"user_id": user_id, "role": role})
        return Identity(id=user_id, email=email)


class PropertyFactory:
    """Factory for creating listing rows and records."""

    @staticmethod
    def create_property_data(
        title: str = "Test Property",
        location: str = "Koramangala, Bangalore",
        rent: float = 8000,
        type: str = "Room",
        description: str = "A well-kept test property",
        owner_id: Optional[str] = None,
        is_available: bool = True
    ) -> dict:
        return {
            "title": title,
            "location": location,
            "rent": rent,
            "type": type,
            "description": description,
            "owner_id": owner_id,
            "is_available": is_available,
        }

    @staticmethod
    def create_property(backend: FakeBackend, **kwargs) -> Dict[str, Any]:
        """Insert a listing row directly into the backend."""
        row = PropertyFactory.create_property_data(**kwargs)
        row["id"] = str(uuid.uuid4())
        row["created_at"] = backend.next_timestamp()
        backend.tables["properties"].append(row)
        return row

    @staticmethod
    def build_listing(**kwargs) -> Listing:
        """Build an in-memory listing record (no backend)."""
        row = PropertyFactory.create_property_data(**kwargs)
        row["id"] = str(uuid.uuid4())
        return Listing.model_validate(row)


# Backend fixtures
@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def store_client(backend: FakeBackend) -> FakeSupabaseClient:
    """A single backend client, as used by one session."""
    return FakeSupabaseClient(backend)


@pytest.fixture
def session_manager(backend: FakeBackend) -> SessionManager:
    async def client_factory():
        return FakeSupabaseClient(backend)

    return SessionManager(client_factory)


@pytest.fixture
def client(session_manager: SessionManager) -> TestClient:
    """Create a test client bound to the fake backend; one event loop for the whole test."""
    app.dependency_overrides[get_session_manager] = lambda: session_manager
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Common account fixtures
@pytest.fixture
def owner(backend: FakeBackend) -> Identity:
    return AccountFactory.create_account(backend, email="owner@test.com", name="Olivia Owner", roles=("owner",))


@pytest.fixture
def admin(backend: FakeBackend) -> Identity:
    return AccountFactory.create_account(backend, email="admin@test.com", name="Adam Admin", roles=("admin",))


@pytest.fixture
def tenant(backend: FakeBackend) -> Identity:
    return AccountFactory.create_account(backend, email="tenant@test.com", name="Tara Tenant")


# Utility functions for tests
def login(client: TestClient, email: str, password: str = "testpassword123") -> Dict[str, str]:
    """Sign in through the API and return the Authorization header."""
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def nav_paths(navigation: Dict[str, Any]) -> List[str]:
    return [link["path"] for link in navigation["links"]]


def valid_draft(**overrides) -> Dict[str, Any]:
    draft = {
        "title": "Sunny room",
        "location": "Indiranagar, Bangalore",
        "rent": "9000",
        "type": "Room",
        "description": "Bright room with attached bath.",
    }
    draft.update(overrides)
    return draft
