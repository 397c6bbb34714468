"""
IdeaValidation model — one SWOT analysis of a project, scored at creation.

Immutable once written; there is no edit path.
"""
from sqlalchemy import Column, Integer, Text, DateTime, JSON, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from app.database import Base


class IdeaValidation(Base):
    __tablename__ = 'idea_validations'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    project_id = Column(Integer, ForeignKey('business_projects.id'), nullable=False, index=True)
    strengths = Column(JSON, default=list)
    weaknesses = Column(JSON, default=list)
    opportunities = Column(JSON, default=list)
    threats = Column(JSON, default=list)
    recommendations = Column(JSON, default=list)
    success_score = Column(Integer, nullable=False)   # 0-100
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint('success_score BETWEEN 0 AND 100', name='ck_idea_validations_score_range'),
    )
