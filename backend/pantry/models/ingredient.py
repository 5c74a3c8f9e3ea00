"""
Stocked ingredients and recipe requirements.

Two construction forms share one class:
- Ingredient.stocked(...): name, quantity, unit, price, expiration date. Lives in Inventory.
- Ingredient.requirement(...): name, quantity, unit only. Lives inside a Recipe; price is 0.0
  and there is no expiration.

Quantity is the only field mutated after construction (restock/consume); consume also
adjusts the stored price.
"""
import math
import re
from datetime import date, datetime
from typing import Any, Optional, Union
import logging

from pantry import config
from pantry.errors import ValidationError
from pantry.models.unit import Unit
from pantry.normalization.names import validate_name

logger = logging.getLogger(__name__)

EXPIRED = "Expired"
EXPIRES_TODAY = "Expires Today"

_DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_expiration(value: Union[str, date, None]) -> date:
    """Parse a yyyy-MM-dd string (or pass a date through). Anything else is a ValidationError."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_SHAPE.match(value):
        raise ValidationError(f"wrong date format {value!r}, it should be yyyy-MM-dd")
    try:
        return datetime.strptime(value, config.DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"wrong date format {value!r}, it should be yyyy-MM-dd") from None


def _positive_amount(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{what} must be a number")
    if not value > 0:
        raise ValidationError(f"{what} can't be 0 or negative")
    return float(value)


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no inf/nan; non-finite amounts are rendered as null."""
    return value if math.isfinite(value) else None


class Ingredient:
    """
    A named quantity of a consumable good.
    Compared by identity: two records with the same name are still different objects.
    """

    __slots__ = ("_name", "_quantity", "_unit", "_price", "_expiration")

    def __init__(
        self,
        name: str,
        quantity: float,
        unit: Union[Unit, int],
        price: float = 0.0,
        expiration: Union[str, date, None] = None,
    ):
        self._name = validate_name(name, "ingredient name")
        self._unit = Unit.parse(unit)
        self._quantity = _positive_amount(quantity, "amount")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError("price must be a number")
        if not price >= 0:
            raise ValidationError("price can't be negative")
        self._price = float(price)
        self._expiration = None if expiration is None else parse_expiration(expiration)

    @classmethod
    def stocked(
        cls,
        name: str,
        quantity: float,
        unit: Union[Unit, int],
        price: float,
        expiration_date: Union[str, date],
    ) -> "Ingredient":
        if expiration_date is None:
            raise ValidationError("stocked ingredient needs an expiration date (yyyy-MM-dd)")
        return cls(name, quantity, unit, price, expiration_date)

    @classmethod
    def requirement(cls, name: str, quantity: float, unit: Union[Unit, int]) -> "Ingredient":
        return cls(name, quantity, unit)

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> float:
        return self._quantity

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def expiration(self) -> Optional[date]:
        return self._expiration

    @property
    def unit_price(self) -> float:
        """Price per item for UNIT-measured goods; the stored price for grams and liters."""
        if self._unit is Unit.UNIT:
            if self._quantity == 0:
                # zero stock follows IEEE float division
                if self._price == 0:
                    return math.nan
                return math.copysign(math.inf, self._price)
            return self._price / self._quantity
        return self._price

    def expiration_status(self, today: Optional[date] = None) -> Optional[str]:
        """
        "Expired" before today, "Expires Today" on the day, otherwise the ISO date.
        None when the ingredient carries no expiration (requirement form).
        """
        if self._expiration is None:
            return None
        today = today or config.today()
        if self._expiration < today:
            return EXPIRED
        if self._expiration == today:
            return EXPIRES_TODAY
        return self._expiration.isoformat()

    def is_expired(self, today: Optional[date] = None) -> bool:
        return self.expiration_status(today) == EXPIRED

    def restock(self, amount: float) -> None:
        """Add to the stored quantity."""
        amount = _positive_amount(amount, "extra amount")
        self._quantity += amount

    def consume(self, amount: float) -> None:
        """
        Take from the stored quantity. Fails without mutation for amount <= 0 or
        amount > quantity.
        """
        amount = _positive_amount(amount, "used amount")
        if amount > self._quantity:
            raise ValidationError(
                f"used amount {amount} can't be higher than existing amount {self._quantity}"
            )
        self._quantity -= amount
        if self.unit_price > 0:
            # subtracts amount/price from the total, not a proportional share
            self._price -= amount / self._price
        logger.debug("INGREDIENT_CONSUME name=%s amount=%s left=%s", self._name, amount, self._quantity)

    def to_dict(self, today: Optional[date] = None) -> dict:
        return {
            "name": self._name,
            "quantity": self._quantity,
            "unit": self._unit.value,
            "unit_label": self._unit.label,
            "unit_price": finite_or_none(self.unit_price),
            "expiration": self.expiration_status(today),
        }

    def __repr__(self) -> str:
        return (
            f"Ingredient(name={self._name!r}, quantity={self._quantity!r}, "
            f"unit={self._unit.name}, expiration={self._expiration!r})"
        )
