#!/usr/bin/env python3
"""
Preference builder - turn the multi-step wizard state into a Preference.

The wizard collects curated tags plus free-typed additions; this module
merges them into the flat structure the scorer consumes.
"""

import logging
from typing import Iterable, List, Optional
from pydantic import BaseModel, Field

from core.scorer.models import Preference

logger = logging.getLogger(__name__)


SUGGESTED_SKILLS = [
    "JavaScript", "TypeScript", "Python", "Java", "C#", "C++", "React", "Node.js",
    "Distributed Systems", "Microservices", "Git", "SQL", "NoSQL", "HTML/CSS",
    "Data Analysis", "Data Science", "Machine Learning", "Statistics", "Pandas",
    "NumPy", "TensorFlow", "PyTorch", "OpenCV", "Spark", "Airflow", "Scala",
    "Kafka", "AWS", "Azure", "OCI", "Docker", "Kubernetes", "CI/CD", "Jenkins",
    "Ansible", "Linux", "UI/UX", "Figma", "Embedded C", "RTOS", "ARM", "CUDA",
    "Verilog", "SystemVerilog", "Graphics", "AutoCAD", "SolidWorks", "FEA",
    "ETABS", "Kotlin", "Android", "Firebase", "IoT", "MQTT", "ROS", "Excel",
    "PowerBI", "Financial Modeling", "Communication", "Leadership",
    "Project Management", "Research", "Content Writing", "Time Management",
]

INTERESTS = [
    "Web Development", "Machine Learning", "Data Science", "Mobile App Development",
    "Cloud Computing", "Cybersecurity", "DevOps", "AI/ML", "Blockchain",
    "Game Development", "IoT", "Robotics", "AR/VR", "Computer Vision",
]

SECTORS = [
    "IT Sector", "Healthcare", "Agriculture", "Education", "Public Administration",
    "Finance", "Manufacturing", "Tourism", "Environment", "Social Work",
    "E-commerce", "Media", "Non-Profit", "Government",
]

POPULAR_CITIES = [
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Pune", "Chennai", "Kolkata",
    "Ahmedabad", "Jaipur", "Lucknow", "Chandigarh", "Kochi", "Indore", "Bhopal",
]


class PreferenceForm(BaseModel):
    """State of the recommendation wizard as submitted by the client."""
    full_name: str = ""
    education: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    custom_interest: str = ""
    stream: str = ""
    year: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    custom_skills: str = Field(default="", description="Comma separated free-typed skills")
    sectors: List[str] = Field(default_factory=list)
    pin_code: str = ""
    preferred_locations: List[str] = Field(default_factory=list)
    custom_location: str = ""
    is_rural: bool = False


def _clean(values: Iterable[str]) -> List[str]:
    """Trim, drop blanks and de-duplicate while keeping first-seen order."""
    result: List[str] = []
    for value in values:
        value = (value or "").strip()
        if value and value not in result:
            result.append(value)
    return result


def split_custom(text: str, separator: str = ",") -> List[str]:
    """Split a free-typed list such as "Python, SQL," into clean entries."""
    if not text:
        return []
    return _clean(text.split(separator))


def build_preference(form: PreferenceForm) -> Preference:
    """
    Build the scorer Preference from wizard state.

    Auxiliary fields (name, interests, stream, year, PIN code, rural flag)
    are profile metadata and do not reach the scorer.
    """
    skills = _clean(list(form.skills) + split_custom(form.custom_skills))
    locations = _clean(list(form.preferred_locations) + [form.custom_location])
    education = (form.education or "").strip() or None

    preference = Preference(
        skills=skills,
        sectors=_clean(form.sectors),
        preferred_locations=locations,
        education=education,
    )
    logger.debug(f"Built preference: {len(skills)} skills, {len(preference.sectors)} sectors, "
                 f"{len(locations)} locations")
    return preference
