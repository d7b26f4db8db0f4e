"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Person is the parent entity; Employee rows are scoped by person_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from personnel.models.person import Person  # noqa: F401
from personnel.models.employee import Employee  # noqa: F401
