"""Teacher endpoints.

Thin controllers: they read the path, query and body, delegate to
`TeacherService` and return its JSON-ready dicts.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from ..config import settings
from ..dependencies import get_teacher_service
from ..services import TeacherService
from ..utils.pagination import PageRequest

router = APIRouter(prefix="/teachers", tags=["teachers"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_teacher(payload: Any = Body(...), service: TeacherService = Depends(get_teacher_service)):
    """Create a teacher, optionally linking the courses listed in `CourseIds`."""
    return service.create(payload)


@router.get("")
def list_teachers(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    populate: Optional[str] = None,
    service: TeacherService = Depends(get_teacher_service),
):
    """List teachers by id, `asc` unless `sort=desc`.

    `populate=courses` (or `courseId`) includes each teacher's courses.
    """
    page_request = PageRequest.from_query(page, limit, sort, populate, default_limit=settings.DEFAULT_PAGE_LIMIT)
    return service.list(page_request)


@router.get("/{teacher_id}")
def get_teacher(teacher_id: int, service: TeacherService = Depends(get_teacher_service)):
    """Get a teacher with its courses."""
    return service.get(teacher_id)


@router.put("/{teacher_id}")
def update_teacher(teacher_id: int, payload: Any = Body(...), service: TeacherService = Depends(get_teacher_service)):
    """Update `name` and/or `department`; other fields are ignored."""
    return service.update(teacher_id, payload)


@router.delete("/{teacher_id}")
def delete_teacher(teacher_id: int, service: TeacherService = Depends(get_teacher_service)):
    """Delete a teacher. Its courses are kept."""
    return service.delete(teacher_id)
