"""
Named dish with a fixed list of requirements. Read-only after construction.
Requirement keys are the canonical ingredient names; they are the join key into Inventory.
"""
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from pantry.errors import ValidationError
from pantry.models.ingredient import Ingredient
from pantry.normalization.names import validate_text


class Recipe:
    __slots__ = ("_name", "_description", "_instructions", "_servings", "_ingredients")

    def __init__(
        self,
        name: str,
        description: str,
        instructions: str,
        servings: int,
        ingredients: Mapping[str, Ingredient],
    ):
        self._name = validate_text(name, "recipe name")
        self._description = validate_text(description, "recipe description")
        self._instructions = validate_text(instructions, "recipe instructions")
        if isinstance(servings, bool) or not isinstance(servings, int):
            raise ValidationError("recipe servings must be a whole number")
        if servings <= 0:
            raise ValidationError("recipe servings can't be negative or 0")
        self._servings = servings
        if not ingredients:
            raise ValidationError("recipe doesn't contain ingredients")
        # own copy, insertion order pinned
        self._ingredients: dict[str, Ingredient] = {}
        for key, ing in ingredients.items():
            if not isinstance(ing, Ingredient):
                raise ValidationError(f"recipe ingredient {key!r} is not an Ingredient")
            if key != ing.name:
                raise ValidationError(
                    f"recipe ingredient key {key!r} doesn't match ingredient name {ing.name!r}"
                )
            self._ingredients[key] = ing

    @classmethod
    def from_requirements(
        cls,
        name: str,
        description: str,
        instructions: str,
        servings: int,
        requirements: Iterable[Ingredient],
    ) -> "Recipe":
        """Build the keyed requirement map from a list; a repeated name is rejected."""
        keyed: dict[str, Ingredient] = {}
        for ing in requirements:
            if not isinstance(ing, Ingredient):
                raise ValidationError("recipe ingredient is not an Ingredient")
            if ing.name in keyed:
                raise ValidationError(f"recipe ingredient {ing.name!r} listed twice")
            keyed[ing.name] = ing
        return cls(name, description, instructions, servings, keyed)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def instructions(self) -> str:
        return self._instructions

    @property
    def servings(self) -> int:
        return self._servings

    @property
    def ingredients(self) -> Mapping[str, Ingredient]:
        return MappingProxyType(self._ingredients)

    def iter_ingredients(self) -> Iterator[Ingredient]:
        return iter(self._ingredients.values())

    def __len__(self) -> int:
        return len(self._ingredients)

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "description": self._description,
            "instructions": self._instructions,
            "servings": self._servings,
            "ingredients": [
                {"name": ing.name, "quantity": ing.quantity, "unit": ing.unit.value, "unit_label": ing.unit.label}
                for ing in self._ingredients.values()
            ],
        }

    def __repr__(self) -> str:
        return f"Recipe(name={self._name!r}, servings={self._servings}, ingredients={list(self._ingredients)})"
