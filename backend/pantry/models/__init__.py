from .unit import Unit
from .ingredient import Ingredient, EXPIRED, EXPIRES_TODAY
from .recipe import Recipe
from .outcome import CookabilityReport, CookResult, CookStatus, InventoryValuation, PurgeResult

__all__ = [
    "Unit",
    "Ingredient",
    "EXPIRED",
    "EXPIRES_TODAY",
    "Recipe",
    "CookabilityReport",
    "CookResult",
    "CookStatus",
    "InventoryValuation",
    "PurgeResult",
]
