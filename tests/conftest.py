"""Test fixtures — 테스트마다 새 메모리 SQLite + FastAPI TestClient.

- get_db 의존성을 테스트 세션으로 교체 (app.dependency_overrides)
- TestClient를 with 없이 생성 → lifespan(시드 적재)이 실행되지 않아 빈 저장소에서 시작
"""

import os

# 앱 import 전에 고정 (.env 값이 테스트에 섞이지 않도록)
os.environ["ALLOWED_ORIGINS"] = "https://localhost:3000,https://localhost:3001,http://localhost:8080"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from movies_api.db import Base, get_db, make_engine
from movies_api.main import app
from movies_api.repository import MovieRepository


@pytest.fixture
def test_engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=test_engine,
    )


@pytest.fixture
def test_db(test_session_factory):
    db = test_session_factory()
    yield db
    db.close()


@pytest.fixture
def repo(test_db):
    return MovieRepository(test_db)


@pytest.fixture
def override_db(test_session_factory):
    """get_db를 테스트 세션으로 교체 (앱과 같은 async 의존성)."""
    async def override_get_db():
        db = test_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db):
    return TestClient(app)


@pytest.fixture
def movie_payload():
    return {
        "title": "The Godfather",
        "year": 1972,
        "director": "Francis Ford Coppola",
        "duration": 175,
        "poster": "https://img.fruugo.com/product/4/49/14441494_max.jpg",
        "genre": ["Crime", "Drama"],
        "rate": 9.2,
    }


@pytest.fixture
def seeded(repo):
    """id가 고정된 영화 3편을 넣어둔다."""
    repo.append({
        "id": "a1", "title": "X", "year": 2000, "director": "Someone",
        "duration": 100, "poster": "https://example.com/x.jpg",
        "genre": ["Drama"], "rate": 7.5,
    })
    repo.append({
        "id": "b2", "title": "Heat", "year": 1995, "director": "Michael Mann",
        "duration": 170, "poster": "https://example.com/heat.jpg",
        "genre": ["Action", "Crime", "Drama"], "rate": 8.3,
    })
    repo.append({
        "id": "c3", "title": "Alien", "year": 1979, "director": "Ridley Scott",
        "duration": 117, "poster": "https://example.com/alien.jpg",
        "genre": ["Horror", "Sci-Fi"], "rate": 8.5,
    })
    return ["a1", "b2", "c3"]
