"""
Cross-references Inventory and Cookbook. Stateless request/response operations.

Two different notions of "makeable" live here on purpose:
- check_cookable: every requirement present, not expired and sufficiently stocked.
- suggest_cookable / cook precondition: every requirement name present (quantity and
  expiration ignored).
"""
from datetime import date
from typing import List, Optional
import logging

from pantry.models.ingredient import Ingredient
from pantry.models.outcome import (
    CookabilityReport,
    CookResult,
    CookStatus,
    InventoryValuation,
    PurgeResult,
)
from pantry.models.recipe import Recipe
from pantry.storage.cookbook import Cookbook
from pantry.storage.inventory import Inventory

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """
    Pipeline per recipe: look up each requirement by name -> classify -> aggregate.
    Writes only to Inventory (cook, purge_expired); the Cookbook is read-only here.
    """

    def __init__(
        self,
        inventory: Optional[Inventory] = None,
        cookbook: Optional[Cookbook] = None,
    ):
        self._inventory = inventory if inventory is not None else Inventory()
        self._cookbook = cookbook if cookbook is not None else Cookbook()

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def cookbook(self) -> Cookbook:
        return self._cookbook

    def _stocked(self, requirement: Ingredient) -> Optional[Ingredient]:
        return self._inventory.all().get(requirement.name)

    def _missing_names(self, recipe: Recipe) -> List[str]:
        return [r.name for r in recipe.iter_ingredients() if self._stocked(r) is None]

    def check_cookable(self, recipe: Recipe, today: Optional[date] = None) -> CookabilityReport:
        """
        Classify every requirement as ready, missing, expired or short.
        Expired wins over short. Short values are stocked - required (negative) plus the
        requirement's unit label, e.g. "-1.0G".
        """
        report = CookabilityReport(recipe_name=recipe.name, cookable=False)
        for requirement in recipe.iter_ingredients():
            stocked = self._stocked(requirement)
            if stocked is None:
                report.missing.append(requirement.name)
            elif stocked.is_expired(today):
                report.expired.append(requirement.name)
            elif requirement.quantity <= stocked.quantity:
                report.ready.append(requirement.name)
            else:
                deficit = stocked.quantity - requirement.quantity
                report.short[requirement.name] = f"{deficit}{requirement.unit.label}"

        report.cookable = len(report.ready) == len(recipe)
        logger.info(
            "COOKABLE_CHECK recipe=%s cookable=%s missing=%s expired=%s short=%s",
            recipe.name, report.cookable, report.missing, report.expired, list(report.short),
        )
        return report

    def cook(self, recipe: Recipe) -> CookResult:
        """
        Consume every requirement from Inventory, removing stock that lands on exactly 0.
        Only name presence is checked up front. A ValidationError from consume (not enough
        stock) propagates and leaves earlier requirements already consumed.
        """
        missing = self._missing_names(recipe)
        if missing:
            logger.info("COOK_REFUSED recipe=%s missing=%s", recipe.name, missing)
            return CookResult(
                recipe_name=recipe.name,
                status=CookStatus.MISSING_INGREDIENT,
                missing=missing,
            )

        result = CookResult(recipe_name=recipe.name, status=CookStatus.COOKED)
        for requirement in recipe.iter_ingredients():
            stocked = self._inventory.get(requirement.name)
            stocked.consume(requirement.quantity)
            result.consumed[requirement.name] = requirement.quantity
            if stocked.quantity == 0:
                self._inventory.remove(requirement.name)
                result.exhausted.append(requirement.name)
                logger.info("COOK_EXHAUSTED recipe=%s ingredient=%s", recipe.name, requirement.name)

        logger.info(
            "COOK recipe=%s consumed=%d exhausted=%s",
            recipe.name, len(result.consumed), result.exhausted,
        )
        return result

    def suggest_cookable(self) -> List[str]:
        """Recipe names, in cookbook order, whose requirement names are all stocked."""
        suggestions = [
            recipe.name for recipe in self._cookbook.iterate()
            if not self._missing_names(recipe)
        ]
        logger.info("SUGGEST recipes=%d suggested=%s", len(self._cookbook), suggestions)
        return suggestions

    def purge_expired(self, today: Optional[date] = None) -> PurgeResult:
        """Remove every expired ingredient; total_value sums their unit prices."""
        result = PurgeResult()
        cursor = self._inventory.iterate()
        for ingredient in cursor:
            if ingredient.is_expired(today):
                result.total_value += ingredient.unit_price
                result.removed.append(ingredient.name)
                cursor.remove()
        if result.removed:
            logger.info(
                "PURGE_EXPIRED removed=%s total_value=%s", result.removed, result.total_value,
            )
        return result

    def value_inventory(self, today: Optional[date] = None) -> InventoryValuation:
        """Sum of unit prices across the inventory, split into expired and still valid."""
        valuation = InventoryValuation()
        for ingredient in self._inventory.iterate():
            if ingredient.is_expired(today):
                valuation.expired_value += ingredient.unit_price
            else:
                valuation.valid_value += ingredient.unit_price
        return valuation
