"""Initial schema - users, programmes, courses, class groups, rooms, schedules, attendance.

Revision ID: 001
Revises:
Create Date: 2025-08-15

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("users_email_key", "users", ["email"], unique=True)

    op.create_table(
        "lecturers",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("user_id", sa.Text(), sa.ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False),
        sa.Column("employee_id", sa.Text(), nullable=False),
        sa.Column("rank", sa.Text(), nullable=True),
        sa.Column("department", sa.Text(), nullable=True),
        sa.Column("employment_type", sa.Text(), nullable=True),
    )
    op.create_index("lecturers_user_id_key", "lecturers", ["user_id"], unique=True)
    op.create_index("lecturers_employee_id_key", "lecturers", ["employee_id"], unique=True)

    op.create_table(
        "programmes",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("level", sa.Text(), nullable=False),
        sa.Column("duration_semesters", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("delivery_modes", sa.Text(), nullable=False),
    )
    op.create_index("programmes_name_key", "programmes", ["name"], unique=True)

    op.create_table(
        "courses",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("course_code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("credit_hours", sa.Integer(), nullable=False),
        sa.Column("programme_id", sa.Text(), sa.ForeignKey("programmes.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("semester_level", sa.Integer(), nullable=False),
        sa.Column("is_elective", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("courses_course_code_key", "courses", ["course_code"], unique=True)

    op.create_table(
        "class_groups",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("programme_id", sa.Text(), sa.ForeignKey("programmes.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("admission_year", sa.Integer(), nullable=False),
        sa.Column("delivery_mode", sa.Text(), nullable=False),
        sa.Column("class_rep_id", sa.Text(), sa.ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True),
    )
    op.create_index(
        "class_groups_name_programme_id_admission_year_key",
        "class_groups",
        ["name", "programme_id", "admission_year"],
        unique=True,
    )
    op.create_index("ix_class_groups_class_rep_id", "class_groups", ["class_rep_id"])

    op.create_table(
        "buildings",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("gps_latitude", sa.Float(), nullable=False),
        sa.Column("gps_longitude", sa.Float(), nullable=False),
        sa.Column("total_floors", sa.Integer(), nullable=True),
    )
    op.create_index("buildings_code_key", "buildings", ["code"], unique=True)

    op.create_table(
        "classrooms",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("room_code", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("building_id", sa.Text(), sa.ForeignKey("buildings.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("room_type", sa.Text(), nullable=True),
        sa.Column("equipment_list", sa.Text(), nullable=True),
        sa.Column("gps_latitude", sa.Float(), nullable=True),
        sa.Column("gps_longitude", sa.Float(), nullable=True),
        sa.Column("availability_status", sa.Text(), nullable=False, server_default="available"),
        sa.Column("virtual_link", sa.Text(), nullable=True),
    )
    op.create_index("classrooms_room_code_key", "classrooms", ["room_code"], unique=True)

    op.create_table(
        "course_schedules",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("course_id", sa.Text(), sa.ForeignKey("courses.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("class_group_id", sa.Text(), sa.ForeignKey("class_groups.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("lecturer_id", sa.Text(), sa.ForeignKey("lecturers.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.Text(), nullable=False),
        sa.Column("end_time", sa.Text(), nullable=False),
        sa.Column("classroom_id", sa.Text(), sa.ForeignKey("classrooms.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True),
        sa.Column("session_type", sa.Text(), nullable=False),
    )

    op.create_table(
        "attendance_records",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("lecturer_id", sa.Text(), sa.ForeignKey("lecturers.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("course_schedule_id", sa.Text(), sa.ForeignKey("course_schedules.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("gps_latitude", sa.Float(), nullable=True),
        sa.Column("gps_longitude", sa.Float(), nullable=True),
        sa.Column("location_verified", sa.Boolean(), nullable=False),
        sa.Column("method", sa.Text(), nullable=False),
        sa.Column("class_rep_verified", sa.Boolean(), nullable=True),
        sa.Column("class_rep_comment", sa.Text(), nullable=True),
    )
    op.create_index("ix_attendance_records_timestamp", "attendance_records", ["timestamp"])

    op.create_table(
        "import_jobs",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("initiated_by", sa.Text(), sa.ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("job_type", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("file_name", sa.Text(), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rollback_available", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("user_id", sa.Text(), sa.ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("target_type", sa.Text(), nullable=False),
        sa.Column("target_id", sa.Text(), nullable=False),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_audit_logs_timestamp", "audit_logs", ["timestamp"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("user_id", sa.Text(), sa.ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])


def downgrade() -> None:
    op.drop_table("notifications")
    op.drop_table("audit_logs")
    op.drop_table("import_jobs")
    op.drop_table("attendance_records")
    op.drop_table("course_schedules")
    op.drop_table("classrooms")
    op.drop_table("buildings")
    op.drop_table("class_groups")
    op.drop_table("courses")
    op.drop_table("programmes")
    op.drop_table("lecturers")
    op.drop_table("users")
