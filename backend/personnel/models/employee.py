"""Employee ORM — salary record attached to an existing Person.

Invariants:
    - person_id always references a Person inserted no later than this row
    - Deleting the Person cascades to its Employee rows (ON DELETE CASCADE)
    - salary is a required fixed-point currency amount

Design Decisions:
    - MONEY on PostgreSQL, NUMERIC(12, 2) elsewhere: SQLite test databases cannot
      render the PostgreSQL-only type
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import MONEY

from personnel.db.base import Base

SalaryType = Numeric(12, 2).with_variant(MONEY(), "postgresql")


class Employee(Base):
    """Employee entity — one salary per row, owned by a Person."""
    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False,
    )
    salary: Mapped[Decimal] = mapped_column(SalaryType, nullable=False)

    person: Mapped["Person"] = relationship(
        "Person", back_populates="employees",
    )
