"""Points Ledger Repository Interface

Defines the contract for the transaction log, the per-payer totals cache
and the spend tracker that travels with them.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ContextManager, Dict, List, Union
from src.domain.spend_tracker import SpendTracker
from src.domain.transaction import AnyTransaction


class PointsLedgerRepository(ABC):
    """
    Repository interface for the points ledger

    All mutations are serialized by a single re-entrant lock. Callers that
    need check-then-act atomicity (the spend engine) hold `locked()` across
    the whole operation.
    """

    @abstractmethod
    def locked(self) -> ContextManager:
        """
        Context manager holding the ledger's write lock

        Re-entrant: ledger methods called while it is held do not deadlock.
        """
        pass

    @property
    @abstractmethod
    def spend_tracker(self) -> SpendTracker:
        """Spend tracker for this ledger's award transactions"""
        pass

    @abstractmethod
    def add(
        self,
        payer: str,
        points: int,
        timestamp: Union[str, datetime],
        spend_record: bool = False,
    ) -> AnyTransaction:
        """
        Append a new transaction and update the payer's total

        Args:
            payer: Payer name (non-empty)
            points: Non-zero point amount
            timestamp: RFC3339 string or datetime
            spend_record: True only when called by the spend engine

        Returns:
            The created Award or SpendRecord with its assigned id

        Raises:
            ValidationError: payer empty, points zero, or timestamp unparseable
            InsufficientPointsError: a negative award would make the payer's total negative
        """
        pass

    @abstractmethod
    def get_all(self) -> List[AnyTransaction]:
        """All transactions in insertion order"""
        pass

    @abstractmethod
    def get_payer_totals(self) -> Dict[str, int]:
        """Payer -> current points, including payers at zero"""
        pass

    @abstractmethod
    def get_total_available(self) -> int:
        """Sum of points across all payers"""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Clear transactions, totals and spend tracker"""
        pass
