"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `notes` table backing the notes API.
How:   Portable column types (Integer identity, VARCHAR, TEXT, TIMESTAMP WITH
       TIME ZONE) so the same migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (destructive — all notes lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",

        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),

        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            server_default=sa.text("''"),
        ),

        # No length limit on note bodies
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            server_default=sa.text("''"),
        ),

        # Both set by the application from one clock reading on insert
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),

        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("notes")
