"""Initial schema: users and pc_builds

Learn: username and email carry UNIQUE constraints. The register route
checks for duplicates first, but two concurrent registrations can both
pass that check; the constraint is what actually keeps them unique.
Postgres allows any number of NULL emails under a UNIQUE constraint.

Revision ID: 3f1c0a9d2b7e
Revises:
Create Date: 2026-10-18 09:12:04.118204
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=True),
        sa.Column('version_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
    )
    op.create_table(
        'pc_builds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('build_name', sa.String(length=200), nullable=False),
        sa.Column('price', sa.String(length=50), nullable=False),
        sa.Column('builder', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('pc_builds')
    op.drop_table('users')
