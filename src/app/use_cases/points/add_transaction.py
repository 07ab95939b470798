"""AddTransaction Use Case

Records points awarded by a payer (or a negative payer adjustment).
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.domain.errors import PointsError
from .dtos import AddTransactionCommandDTO, TransactionDTO

logger = logging.getLogger(__name__)


class AddTransaction:
    """
    Use Case: Award points from a payer

    Business Rules:
    1. Payer non-empty, points non-zero, timestamp required
    2. Negative points must not take the payer's balance below zero
    3. Transaction and payer total are updated atomically

    Flow:
    1. Append transaction to the ledger
    2. Return the created transaction
    """

    def __init__(self, ledger_repo: PointsLedgerRepository):
        self.ledger_repo = ledger_repo

    async def execute(self, command: AddTransactionCommandDTO) -> Result[TransactionDTO]:
        """
        Execute award

        Args:
            command: AddTransactionCommandDTO with payer, points, timestamp

        Returns:
            Result[TransactionDTO]: Created transaction or error
        """
        try:
            transaction = self.ledger_repo.add(
                command.payer, command.points, command.timestamp
            )
        except PointsError as e:
            logger.warning(f"Rejected transaction for payer {command.payer!r}: {e}")
            return Return.err(
                Error(
                    code=e.code,
                    message=str(e),
                    reason=f"payer={command.payer}, points={command.points}",
                )
            )

        return Return.ok(
            TransactionDTO(
                id=transaction.id,
                payer=transaction.payer,
                points=transaction.points,
                timestamp=transaction.timestamp,
                kind=transaction.kind.value,
            )
        )
