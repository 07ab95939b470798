"""In-memory implementation of PointsLedgerRepository

Process-lifetime storage for the transaction log. Every mutation runs under
one re-entrant lock so the totals cache always equals the sum of the log.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional, Union
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.domain.errors import InsufficientPointsError, ValidationError
from src.domain.id_allocator import IdAllocator
from src.domain.spend_tracker import SpendTracker
from src.domain.transaction import (
    AnyTransaction,
    Award,
    SpendRecord,
    validate_transaction_fields,
)

logger = logging.getLogger(__name__)


class InMemoryPointsLedgerRepository(PointsLedgerRepository):
    """
    In-memory points ledger

    Features:
    - Append-only transaction log in insertion order
    - Cached payer totals updated in the same critical section as the append
    - Snapshot reads (callers receive copies)
    """

    def __init__(self, id_allocator: Optional[IdAllocator] = None):
        self._lock = threading.RLock()
        self._ids = id_allocator or IdAllocator()
        self._transactions: List[AnyTransaction] = []
        self._payer_totals: Dict[str, int] = {}
        self._spend_tracker = SpendTracker()

    def locked(self):
        return self._lock

    @property
    def spend_tracker(self) -> SpendTracker:
        return self._spend_tracker

    def add(
        self,
        payer: str,
        points: int,
        timestamp: Union[str, datetime],
        spend_record: bool = False,
    ) -> AnyTransaction:
        parsed_timestamp = validate_transaction_fields(payer, points, timestamp)
        if spend_record and points > 0:
            raise ValidationError("Spend records must have negative points")

        with self._lock:
            current_total = self._payer_totals.get(payer, 0)
            if points < 0 and current_total + points < 0:
                raise InsufficientPointsError(
                    f"Payer {payer} balance cannot go below zero. "
                    f"available: {current_total}, requested: {-points}"
                )

            model = SpendRecord if spend_record else Award
            transaction = model(
                id=self._ids.next(),
                payer=payer,
                points=points,
                timestamp=parsed_timestamp,
            )
            self._transactions.append(transaction)
            self._payer_totals[payer] = current_total + points

        logger.info(
            f"Added {transaction.kind.value} transaction {transaction.id}: "
            f"payer={payer}, points={points}, timestamp={parsed_timestamp.isoformat()}"
        )
        return transaction

    def get_all(self) -> List[AnyTransaction]:
        with self._lock:
            return list(self._transactions)

    def get_payer_totals(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._payer_totals)

    def get_total_available(self) -> int:
        with self._lock:
            return sum(self._payer_totals.values())

    def reset(self) -> None:
        with self._lock:
            self._transactions.clear()
            self._payer_totals.clear()
            self._spend_tracker.clear()
        logger.info("Points ledger reset")
