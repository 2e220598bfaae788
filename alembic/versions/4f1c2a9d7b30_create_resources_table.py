"""create resources table

Revision ID: 4f1c2a9d7b30
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('active', 'inactive', name='resource_status', native_enum=False, create_constraint=True, length=16),
            server_default='active',
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_resources_status', 'resources', ['status'], unique=False)
    op.create_index('idx_resources_created_at', 'resources', [sa.text('created_at DESC')], unique=False)


def downgrade() -> None:
    op.drop_index('idx_resources_created_at', table_name='resources')
    op.drop_index('idx_resources_status', table_name='resources')
    op.drop_table('resources')
