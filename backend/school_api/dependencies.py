"""FastAPI dependencies wiring repositories into the services.

Each layer is its own dependency so tests can override a single
repository (for example with a failing double) through
`app.dependency_overrides`.
"""

from fastapi import Depends
from sqlmodel import Session

from .database import get_session
from .repositories import CourseRepository, StudentRepository, TeacherRepository
from .services import StudentService, TeacherService


def get_course_repository(db: Session = Depends(get_session)) -> CourseRepository:
    return CourseRepository(db)


def get_teacher_repository(db: Session = Depends(get_session)) -> TeacherRepository:
    return TeacherRepository(db)


def get_student_repository(db: Session = Depends(get_session)) -> StudentRepository:
    return StudentRepository(db)


def get_teacher_service(
    records: TeacherRepository = Depends(get_teacher_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> TeacherService:
    return TeacherService(records, courses)


def get_student_service(
    records: StudentRepository = Depends(get_student_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> StudentService:
    return StudentService(records, courses)
