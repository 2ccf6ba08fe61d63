"""Performances table

Revision ID: 001_performances
Revises:
Create Date: 2026-10-19

Creates the performances table with:
- GUID string primary key (pfm_xxx)
- Optional description, cover image and dates
- tagged_users list (JSONB on PostgreSQL)
- drive_folder_id link to the remote folder
- Index on created_at for newest-first listing
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '001_performances'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create performances table and its created_at index."""
    op.create_table(
        'performances',
        sa.Column('id', sa.String(length=40), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_image', sa.String(length=1024), nullable=True),
        sa.Column('start_date', sa.String(length=64), nullable=True),
        sa.Column('end_date', sa.String(length=64), nullable=True),
        sa.Column(
            'tagged_users',
            sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'),
            nullable=True
        ),
        sa.Column('created_by', sa.String(length=255), nullable=False),
        sa.Column('drive_folder_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_performances_created_at', 'performances', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop performances table."""
    op.drop_index('ix_performances_created_at', table_name='performances')
    op.drop_table('performances')
