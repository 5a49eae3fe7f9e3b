"""Repository classes encapsulating database operations.

Repositories are the persistence gateway of the API: each one wraps a
single `Session` and is handed to the services through FastAPI
dependencies, so tests can swap any of them for a double. They return
SQLModel objects, commit their own writes and roll the session back
before re-raising when a write fails.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from . import models


class CourseRepository:
    """Lookups for `Course` records referenced by id."""
    def __init__(self, session: Session):
        self.session = session

    def list_by_ids(self, course_ids: Iterable[int]) -> List[models.Course]:
        """Return the courses whose id is in `course_ids`.

        Ids without a matching row are silently dropped.
        """
        ids = list(course_ids)
        if not ids:
            return []
        stmt = select(models.Course).where(models.Course.id.in_(ids)).order_by(models.Course.id)
        return self.session.exec(stmt).all()

    def create_many(self, titles: Iterable[str]) -> List[models.Course]:
        """Insert one course per title and return the managed instances."""
        courses = [models.Course(title=t) for t in titles]
        try:
            self.session.add_all(courses)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        for c in courses:
            self.session.refresh(c)
        return courses

    def count(self) -> int:
        """Return the number of course rows."""
        return self.session.exec(select(func.count()).select_from(models.Course)).one()


class LinkedRecordRepository:
    """CRUD operations for a record type linked to courses.

    Subclasses set `model` to a table class exposing a `courses`
    relationship.
    """
    model = None

    def __init__(self, session: Session):
        self.session = session

    def create(self, record, courses: Optional[List[models.Course]] = None):
        """Persist `record` together with its course links in one commit.

        If the commit fails nothing is written: neither the record nor
        any of its links.
        """
        try:
            self.session.add(record)
            if courses:
                record.courses.extend(courses)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(record)
        return record

    def count(self) -> int:
        """Return the number of rows in the record table."""
        return self.session.exec(select(func.count()).select_from(self.model)).one()

    def list_page(self, offset: int, limit: int, descending: bool = False, include_courses: bool = False):
        """Return one page of records ordered by id."""
        order = self.model.id.desc() if descending else self.model.id.asc()
        stmt = select(self.model).order_by(order).offset(offset).limit(limit)
        if include_courses:
            stmt = stmt.options(selectinload(self.model.courses))
        return self.session.exec(stmt).all()

    def get(self, record_id: int, include_courses: bool = False):
        """Fetch a record by primary key, or `None` if it does not exist."""
        if not include_courses:
            return self.session.get(self.model, record_id)
        stmt = (
            select(self.model)
            .where(self.model.id == record_id)
            .options(selectinload(self.model.courses))
        )
        return self.session.exec(stmt).first()

    def update(self, record, changes: Dict[str, object]):
        """Apply `changes` to `record`, bump `updated_at` and persist it."""
        try:
            for field, value in changes.items():
                setattr(record, field, value)
            record.updated_at = datetime.now(timezone.utc)
            self.session.add(record)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(record)
        return record

    def delete(self, record) -> None:
        """Hard-delete `record`; its link rows go with it, courses stay."""
        try:
            self.session.delete(record)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise


class TeacherRepository(LinkedRecordRepository):
    """CRUD operations for `Teacher` records."""
    model = models.Teacher


class StudentRepository(LinkedRecordRepository):
    """CRUD operations for `Student` records."""
    model = models.Student
