#!/usr/bin/env python3
"""
Scoring Models - Data structures consumed and produced by the scorer.
"""

from datetime import date
from typing import List, Optional
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Internship:
    """Read-only view of a catalog internship."""
    id: str
    title: str
    org_name: str
    sector: str = ""
    description: str = ""
    city: Optional[str] = None
    state: Optional[str] = None
    pin: Optional[str] = None
    remote: bool = False
    required_skills: List[str] = field(default_factory=list)
    min_education: Optional[str] = None
    stipend_min: Optional[int] = None
    stipend_max: Optional[int] = None
    application_url: str = ""
    active: bool = True
    deadline: Optional[date] = None


@dataclass
class Preference:
    """A student's declared preferences. Every field may be empty."""
    skills: List[str] = field(default_factory=list)
    sectors: List[str] = field(default_factory=list)
    preferred_locations: List[str] = field(default_factory=list)
    education: Optional[str] = None


@dataclass
class ScoredInternship:
    """Internship with its match score and the skills that matched."""
    internship: Internship
    score: int = 0
    matched_skills: List[str] = field(default_factory=list)
