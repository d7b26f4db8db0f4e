"""Employee Schemas — request body for POST /employee.

Design Decisions:
    - name and salary are Any: both are bound as text, so the store's TEXT and
      MONEY parsers decide what is valid (e.g. "1,234.50"), not the API
"""

from typing import Any

from pydantic import BaseModel


class EmployeeCreate(BaseModel):
    """Employee creation body — creates the owning Person as well."""
    name: Any = None
    salary: Any = None
