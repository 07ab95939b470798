"""Points API Routes

FastAPI routes for awarding, spending and inspecting points.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError
from src.api.schemas.points_request import AwardRequestSchema, SpendRequestSchema
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.app.services.spend_engine import SpendEngine
from src.app.use_cases.points import (
    AddTransaction,
    AddTransactionCommandDTO,
    GetPayerPoints,
    ListTransactions,
    ListTransactionsResponseDTO,
    SpendCommandDTO,
    SpendPoints,
    TransactionDTO,
)
from src.depends import get_ledger, get_spend_engine
from src.domain.payer_balance import PayerBalance

router = APIRouter(tags=["Points"])

ERROR_EXAMPLES = {
    402: {
        "description": "Insufficient points",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INSUFFICIENT_POINTS",
                        "message": "Insufficient points. requested: 5000; available: 100"
                    }
                }
            }
        }
    },
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Invalid input - missing or invalid attributes: ['payer']"
                    }
                }
            }
        }
    }
}


@router.post(
    "/transaction",
    response_model=TransactionDTO,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_EXAMPLES,
)
async def add_transaction(
    request: AwardRequestSchema,
    ledger: PointsLedgerRepository = Depends(get_ledger),
):
    """
    Award points to the user on behalf of a payer.

    **Request body:**
    - `payer` (required): Payer name
    - `points` (required): Non-zero points; negative values adjust the payer's balance
    - `timestamp` (required): RFC3339 timestamp

    **Example request:**
    ```json
    { "payer": "DANNON", "points": 1000, "timestamp": "2020-11-02T14:00:00Z" }
    ```

    **Returns:**
    - 201: Transaction recorded
    - 402: Adjustment would take the payer's balance below zero
    - 400/422: Invalid request parameters
    """
    command = AddTransactionCommandDTO(
        payer=request.payer,
        points=request.points,
        timestamp=request.timestamp,
    )

    use_case = AddTransaction(ledger)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "INSUFFICIENT_POINTS":
            raise ClientError(result.error, status_code=status.HTTP_402_PAYMENT_REQUIRED)
        raise ClientError(result.error)

    return result.value


@router.get(
    "/payer-points",
    response_model=List[PayerBalance],
    status_code=status.HTTP_200_OK,
)
async def get_payer_points(ledger: PointsLedgerRepository = Depends(get_ledger)):
    """
    Current points balance per payer.

    Payers whose balance is zero are omitted.

    **Example response:**
    ```json
    [
      {"payer": "DANNON", "points": 1000},
      {"payer": "MILLER COORS", "points": 5300}
    ]
    ```
    """
    use_case = GetPayerPoints(ledger)
    result = await use_case.execute()
    return result.value


@router.post(
    "/spend",
    response_model=List[PayerBalance],
    status_code=status.HTTP_200_OK,
    responses=ERROR_EXAMPLES,
)
async def spend_points(
    request: SpendRequestSchema,
    engine: SpendEngine = Depends(get_spend_engine),
):
    """
    Spend points, oldest first, without taking any payer below zero.

    **Request body:**
    - `points` (required): Points to spend (must be > 0)

    **Example response:**
    ```json
    [
      {"payer": "DANNON", "points": -100},
      {"payer": "UNILEVER", "points": -200},
      {"payer": "MILLER COORS", "points": -4700}
    ]
    ```

    **Returns:**
    - 200: Points spent, per payer
    - 402: Not enough points in total; nothing was spent
    - 500: Ledger inconsistency detected; nothing was spent
    """
    command = SpendCommandDTO(points=request.points)

    use_case = SpendPoints(engine)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "INSUFFICIENT_POINTS":
            raise ClientError(result.error, status_code=status.HTTP_402_PAYMENT_REQUIRED)
        if result.error.code == "VALIDATION_ERROR":
            raise ClientError(result.error)
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value


@router.get(
    "/transactions",
    response_model=ListTransactionsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_transactions(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    ledger: PointsLedgerRepository = Depends(get_ledger),
):
    """
    Audit log of awards and spend records, in the order they were recorded.

    **Query parameters:**
    - `limit`: Page size (1-100, default 20)
    - `offset`: Entries to skip (default 0)
    """
    use_case = ListTransactions(ledger)
    result = await use_case.execute(limit=limit, offset=offset)
    return result.value
