"""Ledger Reconciliation Background Worker

Periodically reconciles cached payer totals against the transaction log.
Runs inside the API process (the ledger lives in memory), started from the
application lifespan.
"""

import asyncio
import logging
from datetime import datetime, timezone

from config import ApplicationConfig
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.app.use_cases.points import ReconcileLedger, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class LedgerReconcilerWorker:
    """
    Background worker for points ledger reconciliation

    Features:
    - Compares payer totals against transaction sums
    - Logs discrepancies for investigation
    - Can run once or continuously until stopped

    Usage:
        worker = LedgerReconcilerWorker(ledger_repo)
        result = await worker.run_once()

        task = asyncio.create_task(worker.run_forever(interval_seconds=3600))
        ...
        worker.stop()
        await task
    """

    def __init__(self, ledger_repo: PointsLedgerRepository):
        self.ledger_repo = ledger_repo
        self._stopped = asyncio.Event()

        logger.info("LedgerReconcilerWorker initialized")

    async def run_once(self) -> ReconciliationResultDTO:
        """
        Run reconciliation once

        Returns:
            ReconciliationResultDTO with reconciliation results
        """
        reconciliation_enabled = getattr(
            ApplicationConfig, "RECONCILIATION_ENABLED", True
        )
        if not reconciliation_enabled:
            logger.info("Ledger reconciliation is disabled, skipping")
            return ReconciliationResultDTO(
                total_payers_checked=0,
                discrepancies_found=0,
                discrepancies=[],
                reconciliation_time=datetime.now(timezone.utc),
                execution_time_ms=0,
            )

        use_case = ReconcileLedger(ledger_repo=self.ledger_repo)
        result = await use_case.execute()

        if result.is_err():
            logger.error(f"Reconciliation failed: {result.error.message}")
            raise RuntimeError(f"Reconciliation failed: {result.error.message}")

        response = result.value

        if response.discrepancies_found > 0:
            logger.error(
                f"ALERT: {response.discrepancies_found} payer total discrepancies found!"
            )
            for d in response.discrepancies:
                logger.error(
                    f"  - Payer {d.payer}: "
                    f"expected={d.calculated_total}, actual={d.cached_total}, "
                    f"diff={d.discrepancy}"
                )

        return response

    async def run_forever(self, interval_seconds: int = 3600):
        """
        Run reconciliation at the given interval until stop() is called

        Args:
            interval_seconds: Seconds between reconciliation runs
        """
        logger.info(
            f"Starting continuous ledger reconciliation with {interval_seconds}s interval"
        )

        while not self._stopped.is_set():
            try:
                result = await self.run_once()
                logger.info(
                    f"Reconciliation cycle complete. "
                    f"Checked {result.total_payers_checked} payers, "
                    f"found {result.discrepancies_found} discrepancies "
                    f"in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Reconciliation cycle failed: {e}")

            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=interval_seconds)
            except asyncio.TimeoutError:
                pass

        logger.info("LedgerReconcilerWorker stopped")

    def stop(self):
        self._stopped.set()
