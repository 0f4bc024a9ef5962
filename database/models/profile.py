import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Date, Uuid, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Profile(Base):
    """
    Student or admin profile. Credentials live with the auth provider;
    `id` is the provider's user id.
    """
    __tablename__ = 'profiles'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    date_of_birth = Column(Date)
    college_name = Column(Text)
    degree = Column(Text)
    branch = Column(Text)
    role = Column(Text, nullable=False, default='student')  # student|admin

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    applications = relationship("Application", back_populates="profile", cascade="all, delete-orphan")


class Application(Base):
    """A student's recorded click-through on an internship's Apply action."""
    __tablename__ = 'applications'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    internship_id = Column(Uuid(as_uuid=True), ForeignKey('internships.id', ondelete='CASCADE'), nullable=False)
    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    profile = relationship("Profile", back_populates="applications")
    internship = relationship("InternshipPost", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('user_id', 'internship_id', name='uq_application_user_internship'),
        Index('idx_applications_user', 'user_id'),
        Index('idx_applications_applied_at', 'applied_at'),
    )
