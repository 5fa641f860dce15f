from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_db, get_supabase
from app import models  # noqa: F401
from app.main import app
from app.models.user import User


class FakeSupabaseAuth:
    """Accepts bearer tokens of the form 'token-<supabase id>'"""

    def get_user(self, token):
        if not token.startswith("token-"):
            raise Exception("Invalid JWT")
        supabase_id = token[len("token-"):]
        return SimpleNamespace(
            user=SimpleNamespace(
                id=supabase_id,
                email=f"{supabase_id}@example.com",
                user_metadata={"full_name": f"{supabase_id.title()} Tester"},
            )
        )


class FakeSupabase:
    def __init__(self):
        self.auth = FakeSupabaseAuth()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_user(db_session):
    def _make_user(supabase_id="alice"):
        user = User(supabase_id=supabase_id, email=f"{supabase_id}@example.com")
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fake_supabase = FakeSupabase()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_supabase] = lambda: fake_supabase

    yield TestClient(app)

    app.dependency_overrides.clear()


def auth_headers(supabase_id="alice"):
    return {"Authorization": f"Bearer token-{supabase_id}"}


@pytest.fixture
def alice():
    return auth_headers("alice")


@pytest.fixture
def bob():
    return auth_headers("bob")


WEDDING_PAYLOAD = {
    "brideName": "Sarah",
    "groomName": "Michael",
    "weddingDate": "2025-06-01T00:00:00",
    "venue": "Rosewood Gardens",
    "venueAddress": "12 Garden Lane",
    "description": "Ceremony at four, dinner to follow",
}


@pytest.fixture
def create_wedding(client):
    def _create_wedding(headers, **overrides):
        response = client.post(
            "/api/weddings", json={**WEDDING_PAYLOAD, **overrides}, headers=headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create_wedding
