"""SpendPoints Use Case

Spends the user's points oldest-first across payers.
"""

import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.services.spend_engine import SpendEngine
from src.domain.errors import InternalInconsistencyError, PointsError
from src.domain.payer_balance import PayerBalance
from .dtos import SpendCommandDTO

logger = logging.getLogger(__name__)


class SpendPoints:
    """
    Use Case: Spend points

    Business Rules:
    1. Requested points must be positive
    2. Total balance must cover the request; otherwise nothing changes
    3. Oldest award points are consumed first
    4. No payer's balance goes below zero

    Errors:
        VALIDATION_ERROR, INSUFFICIENT_POINTS, NOT_SPENDABLE, OVERSPEND,
        INTERNAL_INCONSISTENCY
    """

    def __init__(self, engine: SpendEngine):
        self.engine = engine

    async def execute(self, command: SpendCommandDTO) -> Result[List[PayerBalance]]:
        try:
            spent = self.engine.spend(command.points)
        except InternalInconsistencyError as e:
            logger.error(f"Ledger inconsistency while spending {command.points} points: {e}")
            return Return.err(
                Error(
                    code=e.code,
                    message="Points ledger is in an inconsistent state",
                    reason=str(e),
                )
            )
        except PointsError as e:
            logger.warning(f"Spend of {command.points} points rejected: {e}")
            return Return.err(
                Error(
                    code=e.code,
                    message=str(e),
                    reason=f"requested={command.points}",
                )
            )

        return Return.ok(spent)
