"""
Structured results of reconciliation. Business outcomes, not errors.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pantry.models.ingredient import finite_or_none


class CookStatus(str, Enum):
    COOKED = "COOKED"
    MISSING_INGREDIENT = "MISSING_INGREDIENT"


@dataclass
class CookabilityReport:
    recipe_name: str
    cookable: bool
    ready: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    expired: list[str] = field(default_factory=list)
    short: dict[str, str] = field(default_factory=dict)  # name -> signed deficit + unit label, e.g. "-1.0G"

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipe_name": self.recipe_name,
            "cookable": self.cookable,
            "ready": list(self.ready),
            "missing": list(self.missing),
            "expired": list(self.expired),
            "short": dict(self.short),
        }


@dataclass
class CookResult:
    recipe_name: str
    status: CookStatus
    consumed: dict[str, float] = field(default_factory=dict)
    exhausted: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def cooked(self) -> bool:
        return self.status is CookStatus.COOKED

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipe_name": self.recipe_name,
            "status": self.status.value,
            "consumed": dict(self.consumed),
            "exhausted": list(self.exhausted),
            "missing": list(self.missing),
        }


@dataclass
class PurgeResult:
    removed: list[str] = field(default_factory=list)
    total_value: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"removed": list(self.removed), "total_value": finite_or_none(self.total_value)}


@dataclass
class InventoryValuation:
    expired_value: float = 0.0
    valid_value: float = 0.0

    @property
    def total_value(self) -> float:
        return self.expired_value + self.valid_value

    def to_dict(self) -> dict[str, Any]:
        return {
            "expired_value": finite_or_none(self.expired_value),
            "valid_value": finite_or_none(self.valid_value),
            "total_value": finite_or_none(self.total_value),
        }
