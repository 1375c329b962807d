"""ValueObject — value without identity; equality by fields."""
import math
from dataclasses import dataclass

from store.core.errors import ConfigurationError


@dataclass(frozen=True)
class ValueObject:
    """Value object: equality by all fields (via dataclass). Subclasses validate in _validate()."""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


def require_name(name: object, field: str = "name") -> None:
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{field} must be a non-empty string, got {name!r}")


def require_cents(value: object, field: str) -> None:
    # bool is an int subclass; a price of True is a caller bug
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{field} must be a non-negative integer (minor units), got {value!r}")


def require_non_negative(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{field} must be a finite non-negative number, got {value!r}")


def require_fraction(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 1:
        raise ConfigurationError(f"{field} must be between 0 and 1, got {value!r}")
