"""add coping strategies, emergency contacts and profile preferences

Revision ID: 7a4d2c9e1f63
Revises: 3e1c9a7d5b20
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '7a4d2c9e1f63'
down_revision: Union[str, Sequence[str], None] = '3e1c9a7d5b20'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'coping_strategies' not in tables:
        op.create_table(
            'coping_strategies',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('category', sa.String(length=40), nullable=False, server_default='Custom'),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.String(), nullable=True),
            sa.Column('is_custom', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('effectiveness_rating', sa.Integer(), nullable=True),
            sa.Column('usage_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('last_used', sa.DateTime(timezone=True), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.UniqueConstraint('user_id', 'title', name='uq_strategy_user_title'),
        )
        op.create_index('ix_coping_strategies_id', 'coping_strategies', ['id'])
        op.create_index('ix_coping_strategies_user_id', 'coping_strategies', ['user_id'])

    if 'emergency_contacts' not in tables:
        op.create_table(
            'emergency_contacts',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('phone', sa.String(length=40), nullable=False),
            sa.Column('relationship', sa.String(length=40), nullable=True),
            sa.Column('priority_level', sa.Integer(), nullable=False, server_default='1'),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_emergency_contacts_id', 'emergency_contacts', ['id'])
        op.create_index('ix_emergency_contacts_user_id', 'emergency_contacts', ['user_id'])

    profile_columns = {c['name'] for c in inspector.get_columns('recovery_profiles')}
    if 'privacy_settings' not in profile_columns:
        op.add_column('recovery_profiles', sa.Column('privacy_settings', postgresql.JSONB(astext_type=sa.Text()), nullable=True))
    if 'notification_preferences' not in profile_columns:
        op.add_column('recovery_profiles', sa.Column('notification_preferences', postgresql.JSONB(astext_type=sa.Text()), nullable=True))


def downgrade() -> None:
    op.drop_column('recovery_profiles', 'notification_preferences')
    op.drop_column('recovery_profiles', 'privacy_settings')
    for table in ('emergency_contacts', 'coping_strategies'):
        op.execute(f'DROP TABLE IF EXISTS {table}')
