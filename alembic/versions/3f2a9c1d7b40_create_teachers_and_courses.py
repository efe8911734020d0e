"""create teachers and courses tables

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create teachers and courses tables."""
    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_teachers"),
    )
    op.create_index("ix_teachers_name", "teachers", ["name"], unique=False)
    op.create_index(
        "ix_teachers_department", "teachers", ["department"], unique=False
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("teacher_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["teacher_id"],
            ["teachers.id"],
            name="fk_courses_teacher_id",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_courses"),
    )
    op.create_index("ix_courses_teacher_id", "courses", ["teacher_id"], unique=False)


def downgrade() -> None:
    """Drop courses and teachers tables."""
    op.drop_index("ix_courses_teacher_id", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_teachers_department", table_name="teachers")
    op.drop_index("ix_teachers_name", table_name="teachers")
    op.drop_table("teachers")
