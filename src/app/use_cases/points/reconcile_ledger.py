"""ReconcileLedger Use Case

Checks the cached payer totals against the transaction log.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Dict
from libs.result import Result, Return
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from .dtos import PayerDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileLedger:
    """
    Use Case: Reconcile payer totals against transactions

    Business Rules:
    1. Sums points per payer over every transaction in the log
    2. Compares each sum with the cached payer total
    3. Records and logs any discrepancies found
    4. Does NOT modify any data (read-only reconciliation)
    """

    def __init__(self, ledger_repo: PointsLedgerRepository):
        self.ledger_repo = ledger_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = datetime.now(timezone.utc)

        logger.info("Starting points ledger reconciliation")

        # Both reads under one lock so they describe the same ledger state
        with self.ledger_repo.locked():
            transactions = self.ledger_repo.get_all()
            cached_totals = self.ledger_repo.get_payer_totals()

        calculated: Dict[str, int] = {}
        for transaction in transactions:
            calculated[transaction.payer] = calculated.get(transaction.payer, 0) + transaction.points

        discrepancies = []
        for payer in {**cached_totals, **calculated}:
            cached = cached_totals.get(payer, 0)
            expected = calculated.get(payer, 0)
            if cached != expected:
                discrepancies.append(
                    PayerDiscrepancyDTO(
                        payer=payer,
                        cached_total=cached,
                        calculated_total=expected,
                        discrepancy=cached - expected,
                    )
                )
                logger.warning(
                    f"Discrepancy found for payer {payer}: "
                    f"cached_total={cached}, transaction_sum={expected}, "
                    f"discrepancy={cached - expected}"
                )

        execution_time_ms = int((time.time() - start_time) * 1000)
        total_payers = len(set(cached_totals) | set(calculated))

        if discrepancies:
            logger.warning(
                f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                f"out of {total_payers} payers in {execution_time_ms}ms"
            )
        else:
            logger.info(
                f"Reconciliation complete. All {total_payers} payers balanced "
                f"in {execution_time_ms}ms"
            )

        return Return.ok(
            ReconciliationResultDTO(
                total_payers_checked=total_payers,
                discrepancies_found=len(discrepancies),
                discrepancies=discrepancies,
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )
        )
