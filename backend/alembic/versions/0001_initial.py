"""Employee and holiday tables.

Revision ID: 0001
Revises:
Create Date: 2024-11-04
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "employee",
        sa.Column("id", sa.String(length=9), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
    )
    op.create_table(
        "holiday",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("label", sa.String(length=255), nullable=False),
        sa.Column(
            "employee_id",
            sa.String(length=9),
            sa.ForeignKey("employee.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("start_of_holiday", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_of_holiday", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(length=50), server_default="DRAFT", nullable=False),
    )
    op.create_index("ix_holiday_employee_id", "holiday", ["employee_id"])
    op.create_index("ix_holiday_period", "holiday", ["start_of_holiday", "end_of_holiday"])


def downgrade() -> None:
    op.drop_index("ix_holiday_period", table_name="holiday")
    op.drop_index("ix_holiday_employee_id", table_name="holiday")
    op.drop_table("holiday")
    op.drop_table("employee")
