"""Query-string parsing shared by the list endpoints."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# populate tokens that pull in the course relationship
COURSE_POPULATE_TOKENS = frozenset({"courseId", "courses"})


def parse_int_param(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of `raw` the way `parseInt` does.

    Missing, non-numeric, zero and negative values give `default`.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(str(raw))
    if not m:
        return default
    value = int(m.group(1))
    # non-positive values are not passed on as a negative offset or limit
    return value if value > 0 else default


def wants_courses(populate: Optional[str]) -> bool:
    """Return True if the comma-separated `populate` asks for courses."""
    if not populate:
        return False
    return any(token in COURSE_POPULATE_TOKENS for token in populate.split(","))


def total_pages(total_items: int, limit: int) -> int:
    return math.ceil(total_items / limit)


@dataclass(frozen=True)
class PageRequest:
    """Parsed `page`/`limit`/`sort`/`populate` options of a list request."""

    page: int = 1
    limit: int = 10
    descending: bool = False
    include_courses: bool = False

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort: Optional[str] = None,
        populate: Optional[str] = None,
        default_limit: int = 10,
    ) -> "PageRequest":
        # anything but an explicit "desc" sorts ascending
        return cls(
            page=parse_int_param(page, 1),
            limit=parse_int_param(limit, default_limit),
            descending=sort == "desc",
            include_courses=wants_courses(populate),
        )
