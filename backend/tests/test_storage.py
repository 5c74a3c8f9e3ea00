"""
Unit tests for Inventory and Cookbook: keyed add/get/remove, iteration, read-only views.
Run from backend: python -m pytest tests/test_storage.py -v
"""
import pytest

from pantry.errors import ValidationError
from pantry.models.ingredient import Ingredient
from pantry.models.recipe import Recipe
from pantry.storage.cookbook import Cookbook
from pantry.storage.inventory import Inventory


def _recipe(name, *requirements):
    reqs = requirements or (Ingredient.requirement("Tomato", 2, 0),)
    return Recipe.from_requirements(name, "Tasty", "Cook it", 2, reqs)


# --- Inventory ---

def test_inventory_add_and_get():
    """An added ingredient is returned by canonical name."""
    inventory = Inventory()
    tomato = Ingredient.requirement("Tomato", 5.0, 1)
    inventory.add(tomato)
    assert inventory.get("Tomato") is tomato
    assert "Tomato" in inventory
    assert len(inventory) == 1


def test_inventory_lookup_is_canonicalised():
    """Lookups accept any casing and surrounding whitespace."""
    inventory = Inventory()
    tomato = Ingredient.requirement("Tomato", 5.0, 1)
    inventory.add(tomato)
    assert inventory.get("tomato") is tomato
    assert inventory.get("  TOMATO ") is tomato
    assert "tomato" in inventory


def test_inventory_duplicate_add_keeps_first():
    """A second add under the same name is ignored; the first instance stays."""
    inventory = Inventory()
    first = Ingredient.stocked("tomato", 2, 0, 10, "2030-01-01")
    second = Ingredient.stocked("TOMATO", 9, 0, 99, "2031-01-01")
    inventory.add(first)
    inventory.add(second)
    assert inventory.get("Tomato") is first
    assert inventory.get("Tomato").quantity == 2
    assert len(inventory) == 1


@pytest.mark.parametrize("bad", (None, "Tomato", 5))
def test_inventory_add_rejects_non_ingredient(bad):
    """Only Ingredient instances can be stocked."""
    with pytest.raises(ValidationError):
        Inventory().add(bad)


@pytest.mark.parametrize("name", (None, "", "   "))
def test_inventory_blank_name_rejected(name):
    """get/remove with a blank or missing key is a contract violation."""
    inventory = Inventory()
    with pytest.raises(ValidationError):
        inventory.get(name)
    with pytest.raises(ValidationError):
        inventory.remove(name)


def test_inventory_absent_is_none():
    """Not found is a normal result, not an error."""
    inventory = Inventory()
    assert inventory.get("NonExistent") is None
    assert inventory.remove("NonExistent") is None


def test_inventory_remove_returns_entry():
    """remove hands back the removed instance."""
    inventory = Inventory()
    tomato = Ingredient.requirement("Tomato", 5.0, 1)
    inventory.add(tomato)
    assert inventory.remove("tomato") is tomato
    assert "Tomato" not in inventory.all()


def test_inventory_iteration_in_insertion_order():
    """Iteration follows insertion order."""
    inventory = Inventory()
    for name in ("Tomato", "Potato", "Basil"):
        inventory.add(Ingredient.requirement(name, 1, 0))
    assert [ing.name for ing in inventory] == ["Tomato", "Potato", "Basil"]
    assert [ing.name for ing in inventory.iterate()] == ["Tomato", "Potato", "Basil"]


def test_inventory_cursor_remove():
    """The iteration handle can drop the current element mid-walk."""
    inventory = Inventory()
    for name in ("Tomato", "Potato", "Basil"):
        inventory.add(Ingredient.requirement(name, 1, 0))
    cursor = inventory.iterate()
    seen = []
    for ing in cursor:
        seen.append(ing.name)
        if ing.name == "Potato":
            assert cursor.remove().name == "Potato"
    assert seen == ["Tomato", "Potato", "Basil"]
    assert list(inventory.all()) == ["Tomato", "Basil"]


def test_inventory_cursor_remove_before_next_fails():
    """remove() needs a current element."""
    inventory = Inventory()
    inventory.add(Ingredient.requirement("Tomato", 1, 0))
    cursor = inventory.iterate()
    with pytest.raises(RuntimeError):
        cursor.remove()
    next(cursor)
    cursor.remove()
    with pytest.raises(RuntimeError):
        cursor.remove()


def test_inventory_all_is_read_only():
    """all() is a live, read-only view."""
    inventory = Inventory()
    view = inventory.all()
    inventory.add(Ingredient.requirement("Tomato", 1, 0))
    assert len(view) == 1
    with pytest.raises(TypeError):
        view["Potato"] = Ingredient.requirement("Potato", 1, 0)


def test_inventory_seeded_from_mapping():
    """Constructor input goes through add(), so the first-wins rule applies."""
    a = Ingredient.requirement("Tomato", 1, 0)
    inventory = Inventory({"Tomato": a})
    assert inventory.get("Tomato") is a


# --- Cookbook ---

def test_cookbook_add_and_get():
    """Recipes are retrievable by canonical name."""
    cookbook = Cookbook()
    pasta = _recipe("Pasta")
    cookbook.add(pasta)
    assert len(cookbook) == 1
    assert cookbook.get("pasta") is pasta
    assert cookbook.get("Pasta").name == "Pasta"


def test_cookbook_add_overwrites_existing():
    """Unlike Inventory, a second add with the same name replaces the first."""
    cookbook = Cookbook()
    first = _recipe("Pasta")
    second = _recipe("pasta", Ingredient.requirement("Basil", 1, 0))
    cookbook.add(first)
    cookbook.add(second)
    assert len(cookbook) == 1
    assert cookbook.get("Pasta") is second


@pytest.mark.parametrize("bad", (None, "Pasta"))
def test_cookbook_add_rejects_non_recipe(bad):
    """Only Recipe instances go in the book."""
    with pytest.raises(ValidationError):
        Cookbook().add(bad)


def test_cookbook_recipe_name_with_spaces_is_findable():
    """A recipe named with surrounding spaces is stored under the same key lookups use."""
    cookbook = Cookbook()
    pasta = _recipe(" pasta ")
    cookbook.add(pasta)
    assert list(cookbook.all()) == ["Pasta"]
    assert cookbook.get(" pasta") is pasta
    assert " pasta" in cookbook
    assert cookbook.remove(" pasta ") is pasta
    assert len(cookbook) == 0


def test_cookbook_remove():
    """remove drops the entry; removing an absent name is a no-op."""
    cookbook = Cookbook()
    cookbook.add(_recipe("Pasta"))
    cookbook.remove("Pasta")
    assert len(cookbook) == 0
    assert cookbook.get("Pasta") is None
    assert cookbook.remove("Pasta") is None


@pytest.mark.parametrize("name", (None, "", " "))
def test_cookbook_blank_name_rejected(name):
    """Blank keys fail get and remove."""
    cookbook = Cookbook()
    with pytest.raises(ValidationError):
        cookbook.get(name)
    with pytest.raises(ValidationError):
        cookbook.remove(name)


def test_cookbook_iteration_and_view():
    """Iteration yields recipes in insertion order; all() is read-only."""
    cookbook = Cookbook()
    cookbook.add(_recipe("Pasta"))
    cookbook.add(_recipe("Salad"))
    assert [r.name for r in cookbook.iterate()] == ["Pasta", "Salad"]
    assert "salad" in cookbook
    with pytest.raises(TypeError):
        cookbook.all()["Soup"] = _recipe("Soup")
