"""Shared fixtures: an in-memory database and clients bound to the app."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from postboard import database, models
from postboard.account import CurrentUser
from postboard.client import PostsClient
from postboard.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    models.Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_app(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[database.get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(test_app):
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def posts_client(async_client):
    return PostsClient(async_client)


def make_user(user_id="u1", username="alice", email="alice@example.com"):
    return CurrentUser.model_validate({
        "_id": user_id,
        "username": username,
        "email": email,
        "createdAt": "2024-01-01T10:00:00Z",
    })


def post_json(post_id, user_id, created_at, likes=None, likes_count=None, title="A post"):
    """A post as the API puts it on the wire; None leaves a field out."""
    post = {
        "_id": post_id,
        "userId": user_id,
        "title": title,
        "caption": "caption",
        "image": f"https://img.example.com/{post_id}.png",
        "createdAt": created_at,
    }
    if likes is not None:
        post["likes"] = likes
    if likes_count is not None:
        post["likesCount"] = likes_count
    return post
