"""Spend Tracker

Out-of-band bookkeeping of how many points have been consumed from each
award. Transactions themselves are never mutated.
"""

from typing import Dict
from src.domain.errors import NotSpendableError, OverspendError
from src.domain.transaction import SpendRecord, Transaction


class SpendTracker:
    """
    Tracks cumulative spent points per award transaction id

    Invariants:
    - spent[id] <= points of the award with that id
    - spend records are never tracked
    """

    def __init__(self, spent: Dict[int, int] = None):
        self._spent: Dict[int, int] = dict(spent or {})

    def remaining(self, transaction: Transaction) -> int:
        """Points of the transaction not yet consumed"""
        self._ensure_spendable(transaction)
        return transaction.points - self._spent.get(transaction.id, 0)

    def spent(self, transaction_id: int) -> int:
        return self._spent.get(transaction_id, 0)

    def record_spend(self, transaction: Transaction, amount: int) -> None:
        """
        Add amount to the points consumed from transaction

        Raises:
            NotSpendableError: transaction is a spend record
            OverspendError: total consumed would exceed the transaction's points
        """
        self._ensure_spendable(transaction)
        already_spent = self._spent.get(transaction.id, 0)
        if already_spent + amount > transaction.points:
            raise OverspendError(
                f"Cannot spend {amount} from transaction {transaction.id}: "
                f"original points: {transaction.points}, spent: {already_spent}"
            )
        self._spent[transaction.id] = already_spent + amount

    def snapshot(self) -> Dict[int, int]:
        return dict(self._spent)

    def copy(self) -> "SpendTracker":
        return SpendTracker(self._spent)

    def clear(self) -> None:
        self._spent.clear()

    @staticmethod
    def _ensure_spendable(transaction: Transaction) -> None:
        if isinstance(transaction, SpendRecord):
            raise NotSpendableError(
                f"Transaction {transaction.id} refers to spent points and cannot be spent"
            )
