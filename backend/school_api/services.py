"""Business logic services used by HTTP controllers.

Each service coordinates a record repository and the course repository
for one resource. Services validate the request body against the
resource's schemas, run the persistence calls and return plain JSON-ready
dicts. A missing record raises `RecordNotFound`; everything else
propagates to the application's error translation.
"""

import json
import logging
from typing import Any, Dict

from . import models, repositories, schemas
from .utils.pagination import PageRequest, total_pages

logger = logging.getLogger("school_api.services")


class RecordNotFound(Exception):
    """Raised when an id-scoped operation targets a missing record."""
    def __init__(self, resource: str, record_id: int):
        super().__init__(f"{resource} {record_id} not found")
        self.resource = resource
        self.record_id = record_id


class LinkedRecordService:
    """Create/list/get/update/delete for a record type linked to courses.

    Subclasses name the table model and the schemas used to parse bodies
    and render responses.
    """
    resource = "record"
    model = None
    create_schema = None
    update_schema = None
    read_schema = None
    detail_schema = None

    def __init__(self, records: repositories.LinkedRecordRepository, courses: repositories.CourseRepository):
        self.records = records
        self.courses = courses

    def _render(self, record, with_courses: bool = False) -> Dict[str, Any]:
        schema = self.detail_schema if with_courses else self.read_schema
        return schema.model_validate(record).model_dump(mode="json")

    def _get_or_raise(self, record_id: int, include_courses: bool = False):
        record = self.records.get(record_id, include_courses=include_courses)
        if record is None:
            raise RecordNotFound(self.resource, record_id)
        return record

    def create(self, payload: Any) -> Dict[str, Any]:
        """Create a record and link the courses named by `CourseIds`.

        Unknown course ids are dropped. The response holds the record
        fields only, not the linked courses.
        """
        data = self.create_schema.model_validate(payload)
        requested = data.course_ids or []
        courses = self.courses.list_by_ids(requested) if requested else []
        fields = data.model_dump(exclude={"course_ids"})
        record = self.records.create(self.model(**fields), courses)
        logger.info(
            "%s_created %s",
            self.resource,
            json.dumps({
                "id": record.id,
                "courses_linked": len(courses),
                "courses_missing": len(set(requested) - {c.id for c in courses}),
            }),
        )
        return self._render(record)

    def list(self, page_request: PageRequest) -> Dict[str, Any]:
        """Return one page of records plus pagination metadata."""
        total = self.records.count()
        records = self.records.list_page(
            page_request.offset,
            page_request.limit,
            descending=page_request.descending,
            include_courses=page_request.include_courses,
        )
        meta = schemas.PageMeta(
            total_items=total,
            page=page_request.page,
            total_pages=total_pages(total, page_request.limit),
        )
        return {
            "meta": meta.model_dump(by_alias=True),
            "data": [self._render(r, with_courses=page_request.include_courses) for r in records],
        }

    def get(self, record_id: int) -> Dict[str, Any]:
        """Return a record with its courses always included."""
        record = self._get_or_raise(record_id, include_courses=True)
        return self._render(record, with_courses=True)

    def update(self, record_id: int, payload: Any) -> Dict[str, Any]:
        """Merge the allow-listed fields of `payload` into a record.

        Course links are never touched, even if the body carries ids.
        """
        record = self._get_or_raise(record_id)
        changes = self.update_schema.model_validate(payload).model_dump(exclude_unset=True)
        record = self.records.update(record, changes)
        return self._render(record)

    def delete(self, record_id: int) -> Dict[str, str]:
        """Hard-delete a record."""
        record = self._get_or_raise(record_id)
        self.records.delete(record)
        logger.info("%s_deleted %s", self.resource, json.dumps({"id": record_id}))
        return {"message": "Deleted"}


class TeacherService(LinkedRecordService):
    """Teacher records (`name`, `department`)."""
    resource = "teacher"
    model = models.Teacher
    create_schema = schemas.TeacherCreate
    update_schema = schemas.TeacherUpdate
    read_schema = schemas.TeacherRead
    detail_schema = schemas.TeacherDetail


class StudentService(LinkedRecordService):
    """Student records (`name`, `email`)."""
    resource = "student"
    model = models.Student
    create_schema = schemas.StudentCreate
    update_schema = schemas.StudentUpdate
    read_schema = schemas.StudentRead
    detail_schema = schemas.StudentDetail
