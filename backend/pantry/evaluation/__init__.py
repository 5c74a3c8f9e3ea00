from .reconciliation_engine import ReconciliationEngine

__all__ = ["ReconciliationEngine"]
