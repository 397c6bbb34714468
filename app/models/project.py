"""
Project model — a business idea owned by one user; parent of validations and leads.
"""
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func

from app.database import Base


class Project(Base):
    __tablename__ = 'business_projects'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    industry = Column(Text, nullable=True)
    stage = Column(Text, nullable=False, default='idea')  # idea/startup/growth/mature
    target_market = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
