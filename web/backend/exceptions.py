#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class InternshipNotFoundException(ServiceException):
    """Raised when an internship is not found."""
    pass


class ProfileNotFoundException(ServiceException):
    """Raised when a profile is not found."""
    pass


class DuplicateProfileException(ServiceException):
    """Raised when a profile email is already registered."""
    pass


class InvalidInternshipException(ServiceException):
    """Raised when an internship update would leave the row inconsistent."""
    pass


class CsvImportException(ServiceException):
    """Raised when an uploaded CSV cannot be imported."""
    pass


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    logger.error(f"Service error in {request.url.path}: {exc}")

    status_code = 500
    if isinstance(exc, (InternshipNotFoundException, ProfileNotFoundException)):
        status_code = 404
    elif isinstance(exc, DuplicateProfileException):
        status_code = 409
    elif isinstance(exc, (CsvImportException, InvalidInternshipException)):
        status_code = 400

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
