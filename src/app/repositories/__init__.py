from .points_ledger_repository import PointsLedgerRepository

__all__ = [
    "PointsLedgerRepository",
]
