"""Person Schemas — request body for POST /person.

Design Decisions:
    - name is Any: it is bound as text and the store decides what it accepts
"""

from typing import Any

from pydantic import BaseModel


class PersonCreate(BaseModel):
    """Person creation body. name uniqueness is the store's concern."""
    name: Any = None
