"""
Measurement kinds. Wire values are the integers 0, 1, 2.
"""
from enum import Enum
from typing import Any

from pantry.errors import ValidationError


class Unit(int, Enum):
    UNIT = 0
    GRAM = 1
    LITER = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "Unit":
        """Accept a Unit or one of 0/1/2; anything else (bools included) is rejected."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"wrong measurement: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"wrong measurement: {value!r} (expected 0, 1 or 2)") from None


_LABELS = {
    Unit.UNIT: "Unit",
    Unit.GRAM: "G",
    Unit.LITER: "L",
}
