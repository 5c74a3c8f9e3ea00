"""
PantrySure core: stocked ingredients, recipes, and the rules that reconcile them.

- Ingredient / Recipe: validated entities (models/).
- Inventory / Cookbook: in-memory keyed containers (storage/).
- ReconciliationEngine: cookable checks, cooking, suggestions, expiry purge (evaluation/).

Everything lives in process memory. Nothing is saved between runs.
"""
