#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class InternshipDetails(BaseModel):
    """Details of a catalog internship."""
    id: str
    title: str
    org_name: str
    sector: str
    description: Optional[str]
    city: Optional[str]
    state: Optional[str]
    pin: Optional[str] = None
    remote: bool
    min_education: Optional[str]
    required_skills: List[str]
    stipend_min: Optional[int]
    stipend_max: Optional[int]
    application_url: str
    deadline: Optional[str]
    active: bool


class Recommendation(InternshipDetails):
    """A ranked internship card."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Data Analyst Intern",
                "org_name": "FinServ",
                "sector": "IT Sector",
                "description": "Data analysis and reporting",
                "city": "Mumbai",
                "state": "Maharashtra",
                "remote": False,
                "min_education": "BCA",
                "required_skills": ["Python", "SQL"],
                "stipend_min": 12000,
                "stipend_max": 20000,
                "application_url": "https://example.com/apply",
                "deadline": "2025-11-30",
                "active": True,
                "score": 45,
                "matched_skills": ["Python"]
            }
        }
    )

    score: int = Field(ge=0)
    matched_skills: List[str]


class RecommendationsResponse(BaseModel):
    success: bool
    count: int
    fallback: bool = Field(description="True when no preference matched and a random sample is shown")
    recommendations: List[Recommendation]


class OptionsResponse(BaseModel):
    """Curated choices offered by the preference wizard."""
    skills: List[str]
    interests: List[str]
    sectors: List[str]
    cities: List[str]
    remote_option: str


class InternshipResponse(BaseModel):
    success: bool
    internship: InternshipDetails


class InternshipsResponse(BaseModel):
    success: bool
    count: int
    internships: List[InternshipDetails]


class DeleteResponse(BaseModel):
    success: bool
    id: str


class ImportRowError(BaseModel):
    row: int
    message: str


class CsvImportResponse(BaseModel):
    success: bool
    inserted: int
    skipped_duplicates: List[str]
    errors: List[ImportRowError]


class ApplicationDetails(BaseModel):
    id: str
    user_id: str
    internship_id: str
    applied_at: Optional[str]
    internship_title: Optional[str] = None
    org_name: Optional[str] = None
    user_name: Optional[str] = None
    application_url: Optional[str] = None


class ApplicationResponse(BaseModel):
    success: bool
    created: bool
    application: ApplicationDetails


class ApplicationsResponse(BaseModel):
    success: bool
    count: int
    applications: List[ApplicationDetails]


class ProfileDetails(BaseModel):
    id: str
    full_name: str
    email: str
    date_of_birth: Optional[str]
    college_name: Optional[str]
    degree: Optional[str]
    branch: Optional[str]
    role: str
    created_at: Optional[str]


class ProfileResponse(BaseModel):
    success: bool
    profile: ProfileDetails


class ProfilesResponse(BaseModel):
    success: bool
    count: int
    profiles: List[ProfileDetails]


class OverviewStats(BaseModel):
    total_internships: int = Field(ge=0)
    active_internships: int = Field(ge=0)
    total_users: int = Field(ge=0)
    student_users: int = Field(ge=0)
    total_applications: int = Field(ge=0)


class OverviewResponse(BaseModel):
    """Admin console overview counters."""
    success: bool
    stats: OverviewStats
