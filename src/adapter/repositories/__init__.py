from .points_ledger_repository import InMemoryPointsLedgerRepository

__all__ = [
    "InMemoryPointsLedgerRepository",
]
