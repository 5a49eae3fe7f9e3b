"""Student endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from ..config import settings
from ..dependencies import get_student_service
from ..services import StudentService
from ..utils.pagination import PageRequest

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_student(payload: Any = Body(...), service: StudentService = Depends(get_student_service)):
    """Create a student, optionally enrolling it in the courses listed in `CourseIds`."""
    return service.create(payload)


@router.get("")
def list_students(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    populate: Optional[str] = None,
    service: StudentService = Depends(get_student_service),
):
    """List students by id; see `list_teachers` for the query options."""
    page_request = PageRequest.from_query(page, limit, sort, populate, default_limit=settings.DEFAULT_PAGE_LIMIT)
    return service.list(page_request)


@router.get("/{student_id}")
def get_student(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.get(student_id)


@router.put("/{student_id}")
def update_student(student_id: int, payload: Any = Body(...), service: StudentService = Depends(get_student_service)):
    """Update `name` and/or `email`; enrollments are not changed here."""
    return service.update(student_id, payload)


@router.delete("/{student_id}")
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    return service.delete(student_id)
