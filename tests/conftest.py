import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import create_app
from models import Base, User, UserBranchAccess
from utils.db import get_db
from utils.security import create_access_token, hash_password


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def app(db):
    app = create_app()
    app.dependency_overrides[get_db] = lambda: db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role="admin", status="active", branches=(), email=None, password="secret123"):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@mikana.ae",
            first_name="Test",
            last_name=f"User{counter['n']}",
            password_hash=hash_password(password),
            role=role,
            status=status,
        )
        user.branches = [UserBranchAccess(branch_slug=slug) for slug in branches]
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def headers_for():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}

    return _headers
