#!/usr/bin/env python3
"""
Admin endpoints - catalog curation, CSV import, users and overview.
"""

import logging
from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from ..config import get_config
from ..dependencies import get_db
from ..services import CatalogService, ProfileService, ApplicationService
from ..models.requests import InternshipCreate, InternshipUpdate
from ..models.responses import (
    InternshipResponse,
    InternshipsResponse,
    DeleteResponse,
    CsvImportResponse,
    ImportRowError,
    ProfilesResponse,
    ApplicationsResponse,
    OverviewResponse
)
from ..exceptions import CsvImportException
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/admin", tags=["admin"])

CSV_MAX_SIZE = 5 * 1024 * 1024


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": str(exc), "type": "RateLimitExceeded"}
    )


@router.get("/overview", response_model=OverviewResponse)
def get_overview(db: Session = Depends(get_db)):
    """
    Get catalog, user and application counters for the admin dashboard.
    """
    return OverviewResponse(success=True, stats=CatalogService(db).get_overview())


@router.get("/internships", response_model=InternshipsResponse)
def list_internships(
    active_only: bool = Query(default=False, description="Only list active internships"),
    db: Session = Depends(get_db)
):
    internships = CatalogService(db).list_internships(active_only=active_only)
    return InternshipsResponse(success=True, count=len(internships), internships=internships)


@router.post("/internships", response_model=InternshipResponse, status_code=201)
def create_internship(
    body: InternshipCreate,
    db: Session = Depends(get_db)
):
    internship = CatalogService(db).create_internship(body.model_dump())
    return InternshipResponse(success=True, internship=internship)


@router.put("/internships/{internship_id}", response_model=InternshipResponse)
def update_internship(
    internship_id: str,
    body: InternshipUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an internship. Only fields present in the body are changed.
    """
    validate_uuid(internship_id, "internship_id")
    internship = CatalogService(db).update_internship(internship_id, body.model_dump(exclude_unset=True))
    return InternshipResponse(success=True, internship=internship)


@router.delete("/internships/{internship_id}", response_model=DeleteResponse)
def delete_internship(
    internship_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(internship_id, "internship_id")
    CatalogService(db).delete_internship(internship_id)
    return DeleteResponse(success=True, id=internship_id)


@router.post("/internships/import", response_model=CsvImportResponse)
@limiter.limit("10/minute")
async def import_internships(
    request: Request,
    file: UploadFile = File(...),
    db: Session = Depends(get_db)
):
    """
    Bulk upload internships from a CSV file.

    Rows duplicating an existing (title, organization) pair are skipped;
    malformed rows are reported with their row number.
    """
    content = await file.read()
    if len(content) > CSV_MAX_SIZE:
        raise CsvImportException(f"CSV file exceeds {CSV_MAX_SIZE // (1024 * 1024)} MB")

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise CsvImportException("CSV file must be UTF-8 encoded")

    logger.info(f"Importing internships from {file.filename} ({len(content)} bytes)")
    report = CatalogService(db).import_csv(text, get_config().csv_import)

    return CsvImportResponse(
        success=True,
        inserted=report.inserted,
        skipped_duplicates=report.skipped_duplicates,
        errors=[ImportRowError(row=e.row, message=e.message) for e in report.errors]
    )


@router.get("/users", response_model=ProfilesResponse)
def list_users(db: Session = Depends(get_db)):
    profiles = ProfileService(db).list_profiles()
    return ProfilesResponse(success=True, count=len(profiles), profiles=profiles)


@router.get("/users/{user_id}/applications", response_model=ApplicationsResponse)
def get_user_applications(
    user_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(user_id, "user_id")
    applications = ApplicationService(db).list_for_user(user_id)
    return ApplicationsResponse(success=True, count=len(applications), applications=applications)


@router.delete("/users/{user_id}", response_model=DeleteResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db)
):
    """
    Delete a user's profile together with all of their applications.
    """
    validate_uuid(user_id, "user_id")
    ProfileService(db).delete_profile(user_id)
    return DeleteResponse(success=True, id=user_id)


@router.get("/applications/recent", response_model=ApplicationsResponse)
def get_recent_applications(
    limit: int = Query(default=10, ge=1, le=100, description="Maximum applications to return"),
    db: Session = Depends(get_db)
):
    applications = ApplicationService(db).list_recent(limit)
    return ApplicationsResponse(success=True, count=len(applications), applications=applications)
