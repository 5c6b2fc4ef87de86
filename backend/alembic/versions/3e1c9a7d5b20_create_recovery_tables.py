"""create recovery tables

Revision ID: 3e1c9a7d5b20
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3e1c9a7d5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'daily_checkins' not in tables:
        op.create_table(
            'daily_checkins',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('mood_score', sa.Integer(), nullable=True),
            sa.Column('energy_level', sa.Integer(), nullable=True),
            sa.Column('sleep_quality', sa.Integer(), nullable=True),
            sa.Column('trigger_tags', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
            sa.Column('gratitude_note', sa.String(), nullable=True),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.UniqueConstraint('user_id', 'date', name='uq_checkin_user_date'),
        )
        op.create_index('ix_daily_checkins_id', 'daily_checkins', ['id'])
        op.create_index('ix_daily_checkins_user_id', 'daily_checkins', ['user_id'])

    if 'goals' not in tables:
        op.create_table(
            'goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.String(), nullable=True),
            sa.Column('category', sa.String(length=40), nullable=False, server_default='Recovery'),
            sa.Column('target_date', sa.Date(), nullable=True),
            sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('completed_date', sa.Date(), nullable=True),
            sa.Column('priority', sa.Integer(), nullable=False, server_default='3'),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.CheckConstraint('(is_completed AND completed_date IS NOT NULL) OR (NOT is_completed AND completed_date IS NULL)', name='ck_goal_completed_date'),
        )
        op.create_index('ix_goals_id', 'goals', ['id'])
        op.create_index('ix_goals_user_id', 'goals', ['user_id'])

    if 'milestones' not in tables:
        op.create_table(
            'milestones',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('milestone_type', sa.String(length=30), nullable=False),
            sa.Column('milestone_value', sa.Integer(), nullable=False),
            sa.Column('achieved_date', sa.Date(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.UniqueConstraint('user_id', 'milestone_type', 'milestone_value', name='uq_milestone_user_type_value'),
        )
        op.create_index('ix_milestones_id', 'milestones', ['id'])
        op.create_index('ix_milestones_user_id', 'milestones', ['user_id'])

    if 'recovery_profiles' not in tables:
        op.create_table(
            'recovery_profiles',
            sa.Column('user_id', sa.String(), primary_key=True),
            sa.Column('recovery_start_date', sa.Date(), nullable=True),
            sa.Column('timezone', sa.String(length=64), nullable=False, server_default='UTC'),
            sa.Column('recovery_program', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_recovery_profiles_user_id', 'recovery_profiles', ['user_id'])


def downgrade() -> None:
    # Safe drop if exists
    for table in ('recovery_profiles', 'milestones', 'goals', 'daily_checkins'):
        op.execute(f'DROP TABLE IF EXISTS {table}')
