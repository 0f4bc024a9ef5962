from database.repositories.base import BaseRepository
from database.repositories.internship import InternshipRepository
from database.repositories.profile import ProfileRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'InternshipRepository',
    'ProfileRepository',
    'ApplicationRepository',
]
