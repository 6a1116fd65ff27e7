"""Transcode job record table

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "transcode_job",
        sa.Column("job_id", sa.Text(), primary_key=True),
        sa.Column("provider_name", sa.Text(), nullable=False),
        sa.Column("provider_job_id", sa.Text(), nullable=False),
        sa.Column(
            "created_at_utc",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
    )
    op.create_index("ix_transcode_job_created_at_utc", "transcode_job", ["created_at_utc"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_transcode_job_created_at_utc", table_name="transcode_job")
    op.drop_table("transcode_job")
