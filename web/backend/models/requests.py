#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import date
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from core.preferences import PreferenceForm

__all__ = [
    'PreferenceForm',
    'InternshipCreate',
    'InternshipUpdate',
    'ApplicationCreate',
    'ProfileCreate',
    'ProfileUpdate',
]


class InternshipCreate(BaseModel):
    """Request to add an internship to the catalog."""
    title: str = Field(..., min_length=1)
    org_name: str = Field(..., min_length=1)
    sector: str = ""
    description: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pin: Optional[str] = None
    remote: bool = False
    min_education: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    stipend_min: Optional[int] = Field(None, ge=0)
    stipend_max: Optional[int] = Field(None, ge=0)
    application_url: str = ""
    deadline: Optional[date] = None
    active: bool = True

    @model_validator(mode="after")
    def check_stipend_range(self):
        if self.stipend_min is not None and self.stipend_max is not None and self.stipend_min > self.stipend_max:
            raise ValueError("stipend_min must not exceed stipend_max")
        self.required_skills = [s.strip() for s in self.required_skills if s and s.strip()]
        return self


class InternshipUpdate(BaseModel):
    """Partial update of a catalog internship. Omitted fields are unchanged."""
    title: Optional[str] = Field(None, min_length=1)
    org_name: Optional[str] = Field(None, min_length=1)
    sector: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pin: Optional[str] = None
    remote: Optional[bool] = None
    min_education: Optional[str] = None
    required_skills: Optional[List[str]] = None
    stipend_min: Optional[int] = Field(None, ge=0)
    stipend_max: Optional[int] = Field(None, ge=0)
    application_url: Optional[str] = None
    deadline: Optional[date] = None
    active: Optional[bool] = None


class ApplicationCreate(BaseModel):
    """Record that a user clicked Apply on an internship."""
    user_id: str
    internship_id: str


class ProfileCreate(BaseModel):
    """Profile row created right after sign-up with the auth provider."""
    id: Optional[str] = Field(None, description="Auth provider user id")
    full_name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    date_of_birth: Optional[date] = None
    college_name: Optional[str] = None
    degree: Optional[str] = None
    branch: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1)
    date_of_birth: Optional[date] = None
    college_name: Optional[str] = None
    degree: Optional[str] = None
    branch: Optional[str] = None
