"""Get Payer Points Use Case

Retrieves the current balance of every payer.
"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.domain.payer_balance import PayerBalance, to_payer_balances


class GetPayerPoints:
    """
    Get Payer Points Use Case

    Read-only. Payers whose balance is zero are left out.
    """

    def __init__(self, ledger_repo: PointsLedgerRepository):
        self.ledger_repo = ledger_repo

    async def execute(self) -> Result[List[PayerBalance]]:
        totals = self.ledger_repo.get_payer_totals()
        return Return.ok(to_payer_balances(totals, skip_zero=True))
