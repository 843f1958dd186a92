# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_browser` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recipe_browser import app as app_module
from recipe_browser import models
from recipe_browser.db import create_db_engine, get_db, init_db


@pytest.fixture
def engine():
    # Use StaticPool so the same in-memory database is shared across connections
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app_module.app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app_module.app)
    finally:
        app_module.app.dependency_overrides.clear()


@pytest.fixture
def add_recipes(session_factory):
    """Insert recipes directly into the test DB; returns their ids in order."""

    def _add(*rows):
        db = session_factory()
        try:
            recipes = [models.Recipe(**row) for row in rows]
            db.add_all(recipes)
            db.commit()
            return [r.id for r in recipes]
        finally:
            db.close()

    return _add
