"""Add virtual session tracking to attendance records.

Revision ID: 002
Revises: 001
Create Date: 2025-08-16

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.add_column("attendance_records", sa.Column("session_start_time", sa.DateTime(timezone=True), nullable=True))
    op.add_column("attendance_records", sa.Column("session_end_time", sa.DateTime(timezone=True), nullable=True))
    op.add_column(
        "attendance_records",
        sa.Column("time_window_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.add_column(
        "attendance_records",
        sa.Column("meeting_link_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.add_column(
        "attendance_records",
        sa.Column("session_duration_met", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.add_column("attendance_records", sa.Column("device_fingerprint", sa.Text(), nullable=True))
    op.add_column("attendance_records", sa.Column("ip_address", sa.Text(), nullable=True))


def downgrade() -> None:
    op.drop_column("attendance_records", "ip_address")
    op.drop_column("attendance_records", "device_fingerprint")
    op.drop_column("attendance_records", "session_duration_met")
    op.drop_column("attendance_records", "meeting_link_verified")
    op.drop_column("attendance_records", "time_window_verified")
    op.drop_column("attendance_records", "session_end_time")
    op.drop_column("attendance_records", "session_start_time")
