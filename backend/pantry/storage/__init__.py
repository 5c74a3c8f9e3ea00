from .inventory import Inventory
from .cookbook import Cookbook
from .cursor import RemovableCursor

__all__ = [
    "Inventory",
    "Cookbook",
    "RemovableCursor",
]
