"""
List Transactions Use Case

Retrieves the points audit log with pagination.
"""
from libs.result import Result, Return
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from .dtos import ListTransactionsResponseDTO, TransactionDTO


class ListTransactions:
    """
    Use case: View points transactions

    Returns awards and spend records in insertion order.
    """

    def __init__(self, ledger_repo: PointsLedgerRepository):
        self.ledger_repo = ledger_repo

    async def execute(self, limit: int = 20, offset: int = 0) -> Result[ListTransactionsResponseDTO]:
        """
        List transactions with pagination.

        Args:
            limit: Maximum number of transactions to return (default 20)
            offset: Number of transactions to skip (default 0)

        Returns:
            Result[ListTransactionsResponseDTO]: Paginated transaction list
        """
        transactions = self.ledger_repo.get_all()
        page = transactions[offset:offset + limit]

        return Return.ok(
            ListTransactionsResponseDTO(
                transactions=[
                    TransactionDTO(
                        id=txn.id,
                        payer=txn.payer,
                        points=txn.points,
                        timestamp=txn.timestamp,
                        kind=txn.kind.value,
                    )
                    for txn in page
                ],
                total=len(transactions),
                limit=limit,
                offset=offset,
            )
        )
