"""
Shared fixtures: every test gets its own app bound to a temporary SQLite file.
"""
import uuid

import pytest
from fastapi.testclient import TestClient

from social_platform.social_platform.social_service.auth import hash_password
from social_platform.social_platform.social_service.config import Settings
from social_platform.social_platform.social_service.main import create_app
from social_platform.social_platform.social_service.models import User


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET="test-secret",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(app, client):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def create_user(app, client):
    """Insert a user directly and return stable scalar values for it."""
    def _create(username=None, password="Secret123!", followers_count=0):
        username = username or f"user_{uuid.uuid4().hex[:8]}"
        db = app.state.session_factory()
        try:
            u = User(username=username, password=hash_password(password), followers_count=followers_count)
            db.add(u)
            db.commit()
            db.refresh(u)
            # return plain values to avoid DetachedInstance
            return {"id": u.id, "username": username, "password": password}
        finally:
            db.close()
    return _create


@pytest.fixture
def auth_header_for(app):
    def _header(user):
        token = app.state.token_issuer.issue(user["id"], user["username"])
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def load_user(app, client):
    """Read a user's current state from a fresh session."""
    def _load(user_id):
        db = app.state.session_factory()
        try:
            u = db.query(User).filter(User.id == user_id).first()
            return {
                "followers_count": u.followers_count,
                "following": sorted(f.id for f in u.following),
                "followers": sorted(f.id for f in u.followers),
            }
        finally:
            db.close()
    return _load
