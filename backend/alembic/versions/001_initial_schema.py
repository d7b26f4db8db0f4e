"""Initial schema — person and employee.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import MONEY

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "person",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
    )

    op.create_table(
        "employee",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "person_id", sa.Integer,
            sa.ForeignKey("person.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "salary", sa.Numeric(12, 2).with_variant(MONEY(), "postgresql"),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("employee")
    op.drop_table("person")
