"""Resource routers."""

from .students import router as students_router
from .teachers import router as teachers_router

__all__ = ["students_router", "teachers_router"]
