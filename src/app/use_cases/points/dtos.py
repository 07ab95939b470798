"""Data Transfer Objects for Points Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class AddTransactionCommandDTO(BaseModel):
    """
    Command DTO for awarding points

    Used as input to AddTransaction use case. Negative points record a
    payer adjustment.
    """

    payer: str = Field(
        ...,
        description="Payer name"
    )

    points: int = Field(
        ...,
        description="Non-zero point amount"
    )

    timestamp: datetime = Field(
        ...,
        description="When the points were awarded (RFC3339)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "payer": "DANNON",
                "points": 1000,
                "timestamp": "2020-11-02T14:00:00Z"
            }
        }


class SpendCommandDTO(BaseModel):
    """
    Command DTO for spending points

    Used as input to SpendPoints use case.
    """

    points: int = Field(
        ...,
        description="Points to spend (must be > 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "points": 5000
            }
        }


class TransactionDTO(BaseModel):
    """Single transaction in the audit log"""

    id: int = Field(..., description="Transaction ID")
    payer: str = Field(..., description="Payer name")
    points: int = Field(..., description="Signed point amount")
    timestamp: datetime = Field(..., description="Transaction timestamp")
    kind: str = Field(..., description="Transaction kind (award, spend)")


class ListTransactionsResponseDTO(BaseModel):
    """
    Response DTO for list transactions operation

    Transactions are in insertion order (oldest entry first).
    """

    transactions: List[TransactionDTO] = Field(
        ...,
        description="Page of transactions"
    )

    total: int = Field(
        ...,
        description="Total number of transactions in the ledger"
    )

    limit: int = Field(
        ...,
        description="Maximum number of transactions returned"
    )

    offset: int = Field(
        ...,
        description="Number of transactions skipped"
    )


class PayerDiscrepancyDTO(BaseModel):
    """Mismatch between a payer's cached total and its transaction sum"""

    payer: str = Field(..., description="Payer name")
    cached_total: int = Field(..., description="Total held in the payer totals cache")
    calculated_total: int = Field(..., description="Sum of the payer's transactions")
    discrepancy: int = Field(..., description="cached_total - calculated_total")


class ReconciliationResultDTO(BaseModel):
    """
    Response DTO for ledger reconciliation

    Returned by ReconcileLedger use case.
    """

    total_payers_checked: int = Field(
        ...,
        description="Number of payers compared"
    )

    discrepancies_found: int = Field(
        ...,
        description="Number of payers whose totals disagree with the log"
    )

    discrepancies: List[PayerDiscrepancyDTO] = Field(
        default_factory=list,
        description="Details of each discrepancy"
    )

    reconciliation_time: datetime = Field(
        ...,
        description="When reconciliation ran"
    )

    execution_time_ms: int = Field(
        ...,
        description="Reconciliation duration in milliseconds"
    )
