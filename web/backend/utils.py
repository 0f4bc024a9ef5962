#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from typing import Optional, Any
from datetime import date, datetime

from fastapi import HTTPException


def validate_uuid(value: str, name: str = "id") -> str:
    """Validate that a path parameter is a valid UUID."""
    try:
        uuid.UUID(value)
        return value
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert a datetime (or date) to ISO format string.
    """
    if dt is None:
        return None
    return dt.isoformat()

