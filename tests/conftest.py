import os

# Keep the module-level engine off the filesystem
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from string_analyzer.config import Settings, get_settings
from string_analyzer.crud.string_record import StringRecordStore
from string_analyzer.database import get_db, init_db
from string_analyzer.main import app
from string_analyzer.services import cat_facts

TEST_FACT = "Cats have five toes on their front paws."


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory):
    db = session_factory()
    yield StringRecordStore(db)
    db.close()


@pytest.fixture
def settings():
    return Settings({
        "USER_EMAIL": "ada@example.com",
        "USER_NAME": "Ada Lovelace",
        "USER_STACK": "Python/FastAPI",
        "CAT_FACTS_API": "https://facts.test/fact",
    })


@pytest.fixture
def client(session_factory, settings, monkeypatch):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    async def fake_fetch_cat_fact(settings, client=None):
        return TEST_FACT

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    monkeypatch.setattr(cat_facts, "fetch_cat_fact", fake_fetch_cat_fact)
    yield TestClient(app)
    app.dependency_overrides.clear()
