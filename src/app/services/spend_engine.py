"""FIFO Spend Engine

Allocates a requested spend across payers, consuming the oldest award
points first without letting any payer's balance go negative.
"""

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Deque, Dict, List, Tuple
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.domain.errors import (
    InsufficientPointsError,
    InternalInconsistencyError,
    ValidationError,
)
from src.domain.payer_balance import PayerBalance, to_payer_balances
from src.domain.spend_tracker import SpendTracker
from src.domain.transaction import Award

logger = logging.getLogger(__name__)


class SpendEngine:
    """
    Spends points from a ledger oldest-first

    Business Rules:
    1. Requested points must be positive
    2. Total available across payers must cover the request (else no mutation)
    3. Awards are consumed in timestamp order, ties by insertion order
    4. Negative awards (adjustments) are charged against the payer's oldest awards
    5. No payer's total may go below zero
    6. Each consumed amount is recorded as a new spend record

    Flow:
    1. Lock the ledger for the whole operation
    2. Affordability check
    3. Order award candidates and settle adjustments
    4. Plan consumption on a copy of the spend tracker
    5. Commit spend records and tracker updates only if the plan is complete
    """

    def __init__(self, ledger: PointsLedgerRepository):
        self.ledger = ledger

    def spend(self, points: int) -> List[PayerBalance]:
        """
        Spend points across payers

        Args:
            points: Number of points to spend (must be > 0)

        Returns:
            List of PayerBalance with the negative amount taken from each payer,
            in the order payers were first touched

        Raises:
            ValidationError: points is not a positive integer
            InsufficientPointsError: total available is less than points
            InternalInconsistencyError: candidates exhausted before the request was covered
        """
        if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
            raise ValidationError(f"Spend points must be a positive integer, got {points!r}")

        with self.ledger.locked():
            total_available = self.ledger.get_total_available()
            if total_available < points:
                raise InsufficientPointsError(
                    f"Insufficient points. requested: {points}; available: {total_available}"
                )

            candidates = self._ordered_candidates()
            settled = self._settle_adjustments(candidates, self.ledger.spend_tracker)
            plan, summary = self._plan(points, candidates, settled)
            self._commit(plan)

        logger.info(f"Spent {points} points across {len(summary)} payers: {summary}")
        return to_payer_balances(summary)

    def _ordered_candidates(self) -> List[Award]:
        awards = [t for t in self.ledger.get_all() if isinstance(t, Award)]
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(awards, key=lambda t: t.timestamp)

    @staticmethod
    def _settle_adjustments(candidates: List[Award], tracker: SpendTracker) -> Dict[int, int]:
        """
        Charge each payer's adjustments against that payer's oldest awards

        Returns a mapping of award id -> points held back by adjustments.
        An adjustment older than all of its payer's awards carries forward
        onto the next award of that payer.
        """
        settled: Dict[int, int] = {}
        open_awards: Dict[str, Deque[List]] = {}
        carried: Dict[str, int] = {}

        for transaction in candidates:
            payer = transaction.payer
            queue = open_awards.setdefault(payer, deque())

            if transaction.is_adjustment:
                owed = -transaction.points
                while owed and queue:
                    entry = queue[0]
                    take = min(owed, entry[1])
                    settled[entry[0].id] = settled.get(entry[0].id, 0) + take
                    entry[1] -= take
                    owed -= take
                    if entry[1] == 0:
                        queue.popleft()
                if owed:
                    carried[payer] = carried.get(payer, 0) + owed
                continue

            available = tracker.remaining(transaction)
            owed = carried.get(payer, 0)
            if owed and available > 0:
                take = min(owed, available)
                settled[transaction.id] = take
                carried[payer] = owed - take
                available -= take
            if available > 0:
                queue.append([transaction, available])

        return settled

    def _plan(
        self,
        points: int,
        candidates: List[Award],
        settled: Dict[int, int],
    ) -> Tuple[List[Tuple[Award, int]], Dict[str, int]]:
        working = self.ledger.spend_tracker.copy()
        projected_totals = self.ledger.get_payer_totals()
        plan: List[Tuple[Award, int]] = []
        summary: Dict[str, int] = {}
        remaining_to_spend = points

        for transaction in candidates:
            if remaining_to_spend <= 0:
                break
            if transaction.is_adjustment:
                continue

            available = working.remaining(transaction) - settled.get(transaction.id, 0)
            if available <= 0:
                continue

            to_spend = min(available, remaining_to_spend)
            payer_total = projected_totals.get(transaction.payer, 0)
            if payer_total - to_spend < 0:
                logger.error(
                    f"Skipping transaction {transaction.id}: spending {to_spend} would take "
                    f"payer {transaction.payer} below zero (balance: {payer_total})"
                )
                continue

            working.record_spend(transaction, to_spend)
            projected_totals[transaction.payer] = payer_total - to_spend
            plan.append((transaction, to_spend))
            summary[transaction.payer] = summary.get(transaction.payer, 0) - to_spend
            remaining_to_spend -= to_spend

        if remaining_to_spend > 0:
            logger.error(
                f"Spend of {points} points left {remaining_to_spend} unallocated "
                f"after exhausting {len(candidates)} candidates"
            )
            raise InternalInconsistencyError(
                f"Unable to allocate {remaining_to_spend} of {points} points "
                f"after passing the affordability check"
            )

        return plan, summary

    def _commit(self, plan: List[Tuple[Award, int]]) -> None:
        spent_at = datetime.now(timezone.utc)
        tracker = self.ledger.spend_tracker
        for transaction, amount in plan:
            self.ledger.add(transaction.payer, -amount, spent_at, spend_record=True)
            tracker.record_spend(transaction, amount)
