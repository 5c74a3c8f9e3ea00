"""
Recipe book keyed by canonical recipe name.
Unlike Inventory, add() replaces an existing entry; callers check existence first.
"""
from types import MappingProxyType
from typing import Iterator, Mapping, Optional
import logging

from pantry.errors import ValidationError
from pantry.models.recipe import Recipe
from pantry.normalization.names import lookup_key
from pantry.storage.cursor import RemovableCursor

logger = logging.getLogger(__name__)


class Cookbook:
    def __init__(self, recipes: Optional[Mapping[str, Recipe]] = None):
        self._by_name: dict[str, Recipe] = {}
        for recipe in (recipes or {}).values():
            self.add(recipe)

    def add(self, recipe: Recipe) -> None:
        if not isinstance(recipe, Recipe):
            raise ValidationError("invalid recipe can't be added")
        if recipe.name in self._by_name:
            logger.warning("COOKBOOK_REPLACE name=%s", recipe.name)
        else:
            logger.info("COOKBOOK_ADD name=%s ingredients=%d", recipe.name, len(recipe))
        self._by_name[recipe.name] = recipe

    def get(self, name: str) -> Optional[Recipe]:
        return self._by_name.get(lookup_key(name, "recipe name"))

    def remove(self, name: str) -> Optional[Recipe]:
        """No-op (returns None) when the name is not in the book."""
        removed = self._by_name.pop(lookup_key(name, "recipe name"), None)
        if removed is not None:
            logger.info("COOKBOOK_REMOVE name=%s", removed.name)
        return removed

    def iterate(self) -> RemovableCursor[Recipe]:
        return RemovableCursor(self._by_name)

    def all(self) -> Mapping[str, Recipe]:
        return MappingProxyType(self._by_name)

    def __iter__(self) -> Iterator[Recipe]:
        return self.iterate()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        return lookup_key(name) in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
