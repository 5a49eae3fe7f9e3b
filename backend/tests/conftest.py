import os

# Point the app at a private in-memory database before `school_api` is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlmodel import SQLModel, Session

from school_api.database import engine
from school_api.main import app
from school_api.repositories import CourseRepository


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables and no dependency overrides."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture()
def course_ids():
    """Ids of three seeded courses."""
    with Session(engine) as s:
        courses = CourseRepository(s).create_many(["Algebra", "Biology", "Chemistry"])
        return [c.id for c in courses]
