"""Seed sample rows — three persons, each with one employee record.

Revision ID: 002_seed
Revises: 001_initial
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_seed"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SAMPLE_EMPLOYEES = [
    ("Dr. Strange", "1234567.89"),
    ("Dr. Doom", "9876543.21"),
    ("Dr. Mario", "3.50"),
]


def upgrade() -> None:
    person = sa.table("person", sa.column("name", sa.Text))
    op.bulk_insert(person, [{"name": name} for name, _ in SAMPLE_EMPLOYEES])

    for name, salary in SAMPLE_EMPLOYEES:
        op.execute(
            sa.text(
                "INSERT INTO employee (person_id, salary) VALUES ("
                "(SELECT id FROM person WHERE name = :name), "
                "CAST(:salary AS MONEY))"
            ).bindparams(name=name, salary=salary),
        )


def downgrade() -> None:
    # employee rows go with their person (ON DELETE CASCADE)
    names = [name for name, _ in SAMPLE_EMPLOYEES]
    op.execute(
        sa.text("DELETE FROM person WHERE name IN :names").bindparams(
            sa.bindparam("names", value=names, expanding=True),
        ),
    )
