"""
Lead model — a prospective contact attached to a project.

lead_score is frozen at creation; status is the only field changed afterwards.
"""
from sqlalchemy import Column, Integer, Text, DateTime, JSON, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from app.database import Base


class Lead(Base):
    __tablename__ = 'leads'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    project_id = Column(Integer, ForeignKey('business_projects.id'), nullable=False, index=True)
    name = Column(Text, nullable=False)
    company = Column(Text, nullable=True)
    role = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    industry = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    source = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(JSON, default=list)
    lead_score = Column(Integer, nullable=False)       # 0-100
    status = Column(Text, nullable=False, default='new')
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('lead_score BETWEEN 0 AND 100', name='ck_leads_score_range'),
    )
