"""Pytest configuration: run the app against an in-memory SQLite database."""

import os

# Must be set before student_api is imported; settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from student_api.core.database import SessionLocal, create_database_tables, drop_database_tables
from student_api.main import app


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh tables for every test."""
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()
