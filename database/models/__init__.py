from .base import Base
from .internship import InternshipPost
from .profile import Profile, Application

__all__ = [
    'Base',
    'InternshipPost',
    'Profile',
    'Application',
]
