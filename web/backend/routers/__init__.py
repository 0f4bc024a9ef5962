"""API route handlers."""

from .recommendations import router as recommendations_router
from .applications import router as applications_router
from .profiles import router as profiles_router
from .admin import router as admin_router
