"""
Explicit application context: one Inventory, one Cookbook and the engine over them.
Handlers receive a session instead of reaching for module-level state.
"""
from dataclasses import dataclass, field

from pantry.evaluation.reconciliation_engine import ReconciliationEngine
from pantry.storage.cookbook import Cookbook
from pantry.storage.inventory import Inventory


@dataclass
class PantrySession:
    inventory: Inventory = field(default_factory=Inventory)
    cookbook: Cookbook = field(default_factory=Cookbook)
    engine: ReconciliationEngine = field(init=False)

    def __post_init__(self) -> None:
        self.engine = ReconciliationEngine(self.inventory, self.cookbook)
