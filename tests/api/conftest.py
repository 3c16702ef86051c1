"""Fixtures for HTTP tests through the FastAPI application.

Every test gets a fresh in-memory record store and identity provider wired
in through dependency overrides. Principals are created through the public
registration endpoint and promoted by writing their profile role directly.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from taskhub.core.container import get_identity_provider, get_record_store
from taskhub.domain.enums import Collection, UserRole
from taskhub.infrastructure.identity import InMemoryIdentityAdapter
from taskhub.infrastructure.persistence import InMemoryRecordStore
from taskhub.main import app


@dataclass
class SignedIn:
    """A registered principal with a live access token."""

    id: str
    email: str
    access_token: str
    refresh_token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def identity():
    return InMemoryIdentityAdapter(Mock(), bcrypt_rounds=4)


@pytest.fixture
def client(store, identity):
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_identity_provider] = lambda: identity
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sign_up(client, store) -> Callable[..., SignedIn]:
    """Register, optionally promote, then sign in a principal."""

    def _sign_up(
        email: str,
        role: UserRole = UserRole.EMPLOYEE,
        *,
        full_name: str = "Test User",
        password: str = "secret123",
    ) -> SignedIn:
        registered = client.post(
            "/api/v1/auth/registrations",
            json={"email": email, "password": password, "full_name": full_name},
        )
        assert registered.status_code == 201, registered.text
        principal_id = registered.json()["id"]

        if role != UserRole.EMPLOYEE:
            asyncio.run(store.update(Collection.USERS, principal_id, {"role": role.value}))

        session = client.post(
            "/api/v1/auth/sessions", json={"email": email, "password": password}
        )
        assert session.status_code == 201, session.text
        body = session.json()
        return SignedIn(
            id=principal_id,
            email=email,
            access_token=body["access_token"],
            refresh_token=body["refresh_token"],
        )

    return _sign_up


@pytest.fixture
def admin(sign_up):
    return sign_up("admin@example.com", UserRole.ADMIN, full_name="Alice Admin")


@pytest.fixture
def manager(sign_up):
    return sign_up("manager@example.com", UserRole.MANAGER, full_name="Max Manager")


@pytest.fixture
def employee(sign_up):
    return sign_up("employee@example.com", full_name="Eve Employee")
