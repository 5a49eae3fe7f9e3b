"""Pydantic request/response schemas used by the API.

Create and update schemas double as the allow-list of writable fields:
anything a client sends outside of them is ignored. Read schemas are
built from ORM objects (`from_attributes`).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CourseRead(BaseModel):
    """A course as it appears inside an eager-loaded record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class _CourseIdsMixin(BaseModel):
    """Optional `CourseIds` list accepted on create.

    A value that is not a list is treated as absent. Only the
    `CourseIds` key is read.
    """
    course_ids: Optional[List[int]] = Field(default=None, alias='CourseIds')

    @field_validator('course_ids', mode='before')
    @classmethod
    def _ignore_non_list(cls, value: Any):
        return value if isinstance(value, list) else None


class TeacherCreate(_CourseIdsMixin):
    """Request body for creating a teacher."""
    name: str
    department: str


class TeacherUpdate(BaseModel):
    """Fields a teacher update may change."""
    name: Optional[str] = None
    department: Optional[str] = None


class TeacherRead(BaseModel):
    """A teacher record without its courses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    department: str
    created_at: datetime
    updated_at: datetime


class TeacherDetail(TeacherRead):
    """A teacher record with its courses eager-loaded."""
    courses: List[CourseRead] = []


class StudentCreate(_CourseIdsMixin):
    """Request body for creating a student."""
    name: str
    email: str


class StudentUpdate(BaseModel):
    """Fields a student update may change."""
    name: Optional[str] = None
    email: Optional[str] = None


class StudentRead(BaseModel):
    """A student record without its courses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class StudentDetail(StudentRead):
    """A student record with its courses eager-loaded."""
    courses: List[CourseRead] = []


class PageMeta(BaseModel):
    """Pagination metadata of a list response."""
    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias='totalItems')
    page: int
    total_pages: int = Field(alias='totalPages')
