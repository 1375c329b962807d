"""Domain layer base classes: Entity, ValueObject and field validators."""
from store.domain.entity import Entity
from store.domain.value_object import (
    ValueObject,
    require_cents,
    require_fraction,
    require_name,
    require_non_negative,
)

__all__ = [
    "Entity",
    "ValueObject",
    "require_name",
    "require_cents",
    "require_non_negative",
    "require_fraction",
]
