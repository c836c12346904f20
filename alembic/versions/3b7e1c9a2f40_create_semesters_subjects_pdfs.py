"""create semesters, subjects and pdfs tables

Revision ID: 3b7e1c9a2f40
Revises:
Create Date: 2026-10-17 10:12:04.118233

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3b7e1c9a2f40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create entity tables. References between them are not enforced."""
    op.create_table(
        "semesters",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_semesters_order"), "semesters", ["order"])

    op.create_table(
        "subjects",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("semester_id", sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_subjects_name"), "subjects", ["name"])
    op.create_index(op.f("ix_subjects_semester_id"), "subjects", ["semester_id"])

    op.create_table(
        "pdfs",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("semester_id", sa.String(length=64), nullable=False),
        sa.Column("subject_id", sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_pdfs_semester_id"), "pdfs", ["semester_id"])
    op.create_index(op.f("ix_pdfs_subject_id"), "pdfs", ["subject_id"])


def downgrade() -> None:
    """Drop entity tables."""
    op.drop_index(op.f("ix_pdfs_subject_id"), table_name="pdfs")
    op.drop_index(op.f("ix_pdfs_semester_id"), table_name="pdfs")
    op.drop_table("pdfs")
    op.drop_index(op.f("ix_subjects_semester_id"), table_name="subjects")
    op.drop_index(op.f("ix_subjects_name"), table_name="subjects")
    op.drop_table("subjects")
    op.drop_index(op.f("ix_semesters_order"), table_name="semesters")
    op.drop_table("semesters")
