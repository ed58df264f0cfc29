"""create burnout_checkins

Revision ID: d4b7e21f6a08
Revises: 8a52f0c6e913
Create Date: 2025-06-22 06:05:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'd4b7e21f6a08'
down_revision: Union[str, Sequence[str], None] = '8a52f0c6e913'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'burnout_checkins' in tables:
        return
    op.create_table(
        'burnout_checkins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('stress_level', sa.Integer(), nullable=False),
        sa.Column('sleep_hours', sa.Numeric(4, 2), nullable=False),
        sa.Column('mood_level', sa.Integer(), nullable=False),
        sa.Column('time_spent_hours', sa.Numeric(4, 2), nullable=False),
        sa.Column('burnout_score', sa.Numeric(3, 1), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.CheckConstraint('stress_level >= 1 AND stress_level <= 5', name='ck_checkins_stress'),
        sa.CheckConstraint('sleep_hours >= 0 AND sleep_hours <= 24', name='ck_checkins_sleep'),
        sa.CheckConstraint('mood_level >= 1 AND mood_level <= 5', name='ck_checkins_mood'),
        sa.CheckConstraint('time_spent_hours >= 0 AND time_spent_hours <= 24', name='ck_checkins_time'),
        sa.CheckConstraint('burnout_score >= 0 AND burnout_score <= 10', name='ck_checkins_score'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_burnout_checkins_user_date')
    )
    op.create_index('ix_burnout_checkins_id', 'burnout_checkins', ['id'])
    op.create_index('ix_burnout_checkins_user_id', 'burnout_checkins', ['user_id'])


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS burnout_checkins')
