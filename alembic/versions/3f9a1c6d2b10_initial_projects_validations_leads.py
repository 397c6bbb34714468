"""Initial schema: business_projects, idea_validations, leads

Revision ID: 3f9a1c6d2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c6d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'business_projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('industry', sa.Text(), nullable=True),
        sa.Column('stage', sa.Text(), nullable=False, server_default='idea'),
        sa.Column('target_market', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_business_projects_user_id', 'business_projects', ['user_id'])

    op.create_table(
        'idea_validations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('business_projects.id'), nullable=False),
        sa.Column('strengths', sa.JSON(), nullable=True),
        sa.Column('weaknesses', sa.JSON(), nullable=True),
        sa.Column('opportunities', sa.JSON(), nullable=True),
        sa.Column('threats', sa.JSON(), nullable=True),
        sa.Column('recommendations', sa.JSON(), nullable=True),
        sa.Column('success_score', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint('success_score BETWEEN 0 AND 100', name='ck_idea_validations_score_range'),
    )
    op.create_index('ix_idea_validations_user_id', 'idea_validations', ['user_id'])
    op.create_index('ix_idea_validations_project_id', 'idea_validations', ['project_id'])

    op.create_table(
        'leads',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('business_projects.id'), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('company', sa.Text(), nullable=True),
        sa.Column('role', sa.Text(), nullable=True),
        sa.Column('email', sa.Text(), nullable=True),
        sa.Column('phone', sa.Text(), nullable=True),
        sa.Column('linkedin_url', sa.Text(), nullable=True),
        sa.Column('industry', sa.Text(), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('source', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('lead_score', sa.Integer(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False, server_default='new'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint('lead_score BETWEEN 0 AND 100', name='ck_leads_score_range'),
    )
    op.create_index('ix_leads_user_id', 'leads', ['user_id'])
    op.create_index('ix_leads_project_id', 'leads', ['project_id'])


def downgrade() -> None:
    op.drop_index('ix_leads_project_id', 'leads')
    op.drop_index('ix_leads_user_id', 'leads')
    op.drop_table('leads')

    op.drop_index('ix_idea_validations_project_id', 'idea_validations')
    op.drop_index('ix_idea_validations_user_id', 'idea_validations')
    op.drop_table('idea_validations')

    op.drop_index('ix_business_projects_user_id', 'business_projects')
    op.drop_table('business_projects')
