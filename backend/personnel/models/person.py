"""Person ORM — a named individual; the parent row of every Employee.

Invariants:
    - id is a store-generated integer primary key
    - name is non-nullable and unique (enforced by the store, not the API)

Design Decisions:
    - Never updated or deleted by the API: rows only come from POST /person and
      POST /employee
    - passive_deletes on employees: the store's ON DELETE CASCADE removes them
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from personnel.db.base import Base


class Person(Base):
    """Person entity — owns zero or more Employee rows."""
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    employees: Mapped[list["Employee"]] = relationship(
        "Employee", back_populates="person", passive_deletes=True,
    )
