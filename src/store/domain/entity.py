"""Entity — identity-bearing object (id)."""
import uuid
from typing import Optional


class Entity:
    """Entity: equality by id. A fresh uuid4 hex is used when no id is given."""

    def __init__(self, id: Optional[str] = None) -> None:
        self.id = id if id is not None else uuid.uuid4().hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
