import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Boolean, Date, JSON, Uuid, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class InternshipPost(Base):
    """
    Catalog internship. Only rows with active = true are recommended.
    """
    __tablename__ = 'internships'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Core Identity
    title = Column(Text, nullable=False)
    org_name = Column(Text, nullable=False)
    sector = Column(Text, nullable=False, default='')
    description = Column(Text)

    # Location
    city = Column(Text)
    state = Column(Text)
    pin = Column(Text)
    remote = Column(Boolean, nullable=False, default=False)

    # Requirements
    min_education = Column(Text)
    required_skills = Column(JSON, nullable=False, default=list)

    # Monthly stipend bounds
    stipend_min = Column(Integer)
    stipend_max = Column(Integer)

    application_url = Column(Text, nullable=False, default='')
    deadline = Column(Date)  # advisory only
    active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    applications = relationship("Application", back_populates="internship", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_internships_active', 'active'),
        Index('idx_internships_sector', 'sector'),
        Index('idx_internships_org_title', 'org_name', 'title'),
    )
