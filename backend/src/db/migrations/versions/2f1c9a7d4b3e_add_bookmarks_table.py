"""
Add bookmarks table.

Revision ID: 2f1c9a7d4b3e
Revises:
Create Date: 2026-10-17 09:12:41.503128
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "2f1c9a7d4b3e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute(sa.schema.CreateSequence(sa.Sequence("bookmark_id_seq")))
    op.create_table(
        "bookmarks",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('bookmark_id_seq')"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("url", sa.String(length=500), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("bookmarks")
    op.execute(sa.schema.DropSequence(sa.Sequence("bookmark_id_seq")))
