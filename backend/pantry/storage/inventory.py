"""
Food storage: stocked ingredients keyed by canonical name.
First record for a name wins; a later add with the same name is ignored.
"""
from types import MappingProxyType
from typing import Iterator, Mapping, Optional
import logging

from pantry.errors import ValidationError
from pantry.models.ingredient import Ingredient
from pantry.normalization.names import lookup_key
from pantry.storage.cursor import RemovableCursor

logger = logging.getLogger(__name__)


class Inventory:
    """O(1) lookup by canonical ingredient name. In-memory only."""

    def __init__(self, ingredients: Optional[Mapping[str, Ingredient]] = None):
        self._by_name: dict[str, Ingredient] = {}
        for ing in (ingredients or {}).values():
            self.add(ing)

    def add(self, ingredient: Ingredient) -> None:
        if not isinstance(ingredient, Ingredient):
            raise ValidationError("invalid ingredient can't be added")
        if ingredient.name in self._by_name:
            logger.info("INVENTORY_ADD_IGNORED name=%s (already stocked)", ingredient.name)
            return
        self._by_name[ingredient.name] = ingredient
        logger.info(
            "INVENTORY_ADD name=%s quantity=%s unit=%s",
            ingredient.name, ingredient.quantity, ingredient.unit.label,
        )

    def get(self, name: str) -> Optional[Ingredient]:
        """Returns None when nothing is stocked under that name."""
        return self._by_name.get(lookup_key(name, "ingredient name"))

    def remove(self, name: str) -> Optional[Ingredient]:
        removed = self._by_name.pop(lookup_key(name, "ingredient name"), None)
        if removed is not None:
            logger.info("INVENTORY_REMOVE name=%s", removed.name)
        return removed

    def iterate(self) -> RemovableCursor[Ingredient]:
        return RemovableCursor(self._by_name)

    def all(self) -> Mapping[str, Ingredient]:
        return MappingProxyType(self._by_name)

    def __iter__(self) -> Iterator[Ingredient]:
        return self.iterate()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        return lookup_key(name) in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
