"""SQLModel data models.

This module defines the school tables. Teachers and students are each
linked to courses through a many-to-many link table; the link rows carry
no payload beyond the two ids.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import SQLModel, Field, Relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TeacherCourseLink(SQLModel, table=True):
    """Membership of a `Teacher` in a `Course`."""
    teacher_id: Optional[int] = Field(default=None, foreign_key='teacher.id', primary_key=True)
    course_id: Optional[int] = Field(default=None, foreign_key='course.id', primary_key=True)


class StudentCourseLink(SQLModel, table=True):
    """Enrollment of a `Student` in a `Course`."""
    student_id: Optional[int] = Field(default=None, foreign_key='student.id', primary_key=True)
    course_id: Optional[int] = Field(default=None, foreign_key='course.id', primary_key=True)


class Course(SQLModel, table=True):
    """A course that teachers and students can be attached to.

    Only the id is referenced by the HTTP handlers; `title` exists so the
    seed script and eager-loaded responses have something readable.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    created_at: datetime = Field(default_factory=_utcnow)
    teachers: List['Teacher'] = Relationship(back_populates='courses', link_model=TeacherCourseLink)
    students: List['Student'] = Relationship(back_populates='courses', link_model=StudentCourseLink)


class Teacher(SQLModel, table=True):
    """A teacher belonging to a department.

    Deleting a teacher removes its link rows but never the courses.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    department: str = Field(nullable=False)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    courses: List[Course] = Relationship(back_populates='teachers', link_model=TeacherCourseLink)


class Student(SQLModel, table=True):
    """A student identified by name and email."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    email: str = Field(nullable=False)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    courses: List[Course] = Relationship(back_populates='students', link_model=StudentCourseLink)
