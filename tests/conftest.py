"""Pytest fixtures for API tests."""

import os
from collections.abc import AsyncGenerator, Generator

os.environ.setdefault("AUTH_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("GEMINI_API_KEY", "")

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db, get_llm_service, get_word_cache
from app.core.security import create_access_token
from app.db.base import Base
from app.db.models import OxfordWord, Topic, TopicWord, UserProgress, UserWordStrings
from app.main import create_app
from app.services.vocabulary import VocabularyService
from app.services.word_cache import WordCache
from app.utils.cache import CacheBackend, cache_backend

# Children before parents, so rows can be deleted in this order.
TABLES = [
    TopicWord.__table__,
    Topic.__table__,
    OxfordWord.__table__,
    UserProgress.__table__,
    UserWordStrings.__table__,
]


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=TABLES)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=TABLES)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=db_engine
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in TABLES:
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture(autouse=True)
def clear_cache() -> Generator[None, None, None]:
    cache_backend.clear()
    try:
        yield
    finally:
        cache_backend.clear()


@pytest.fixture()
def word_cache(db_session: Session) -> Generator[WordCache, None, None]:
    with WordCache(
        lambda: VocabularyService(db_session).list_all_words(),
        backend=CacheBackend(),
        ttl=300,
    ) as cache:
        yield cache


def _build_app(db_session: Session, word_cache: WordCache):
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_word_cache] = lambda: word_cache
    app.dependency_overrides[get_llm_service] = lambda: None
    return app


@pytest.fixture()
def app(db_session: Session, word_cache: WordCache):
    return _build_app(db_session, word_cache)


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def async_client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


def _bearer_headers(user_id: str, email: str | None = None) -> dict[str, str]:
    token = create_access_token(user_id, email=email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_auth_headers():
    return _bearer_headers


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return _bearer_headers("user-1", "learner@example.com")


@pytest.fixture()
def oxford_words(db_session: Session) -> list[OxfordWord]:
    words = [
        OxfordWord(
            term="apple",
            meaning="a round fruit with red or green skin",
            part_of_speech="noun",
            example="She ate an apple.",
        ),
        OxfordWord(
            term="dog",
            meaning="an animal kept as a pet",
            part_of_speech="noun",
            example="The dog barked.",
        ),
        OxfordWord(
            term="abandon",
            meaning="to leave somebody or something with no intention of returning",
            part_of_speech="verb",
            topic="Emotions & Personality",
        ),
        OxfordWord(
            term="journey",
            meaning="an act of travelling from one place to another",
            part_of_speech="noun",
            image_url="https://images.example.com/journey.jpg",
        ),
    ]
    db_session.add_all(words)
    db_session.commit()
    return words
