"""Business logic services."""

from .catalog_service import CatalogService, to_internship_details
from .profile_service import ProfileService
from .application_service import ApplicationService
