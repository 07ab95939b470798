"""Points Transaction Domain Entities

Immutable, append-only records of points entering and leaving the account.
A transaction is either an Award (created by a payer request) or a
SpendRecord (created by the spend engine when points are consumed).
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field
from src.domain.errors import ValidationError

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


class TransactionKind(str, Enum):
    """Transaction variants"""
    AWARD = "award"    # Points granted by a payer (negative = adjustment)
    SPEND = "spend"    # Points consumed by the user


class Transaction(BaseModel):
    """
    Points Transaction - shared fields of every ledger entry

    Domain Rules:
    - id is assigned by the ledger and never changes
    - payer is non-empty, points is never zero
    - timestamp is timezone-aware (UTC) and drives FIFO ordering
    - all fields are immutable once created
    """

    id: int = Field(
        ...,
        description="Unique transaction identifier (monotonically increasing)"
    )

    payer: str = Field(
        ...,
        min_length=1,
        description="Entity that awarded the points"
    )

    points: int = Field(
        ...,
        description="Signed point amount (positive = award, negative = spend or adjustment)"
    )

    timestamp: datetime = Field(
        ...,
        description="Point in time used for FIFO ordering"
    )

    class Config:
        frozen = True


class Award(Transaction):
    """
    Award - points granted to the user by a payer

    An award with negative points is a payer adjustment: it reduces the
    payer's balance and is charged against that payer's oldest awards
    when points are spent.
    """

    kind: Literal[TransactionKind.AWARD] = TransactionKind.AWARD

    @property
    def is_adjustment(self) -> bool:
        return self.points < 0

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "payer": "DANNON",
                "points": 1000,
                "timestamp": "2020-11-02T14:00:00Z",
                "kind": "award"
            }
        }


class SpendRecord(Transaction):
    """
    Spend Record - points removed from circulation by a spend

    Always negative. Spend records can never be spent from themselves.
    """

    kind: Literal[TransactionKind.SPEND] = TransactionKind.SPEND

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 6,
                "payer": "DANNON",
                "points": -100,
                "timestamp": "2020-11-03T09:30:00Z",
                "kind": "spend"
            }
        }


AnyTransaction = Annotated[Union[Award, SpendRecord], Field(discriminator="kind")]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Normalize a timestamp to an aware UTC datetime

    Accepts RFC3339 strings and datetime objects (naive datetimes are taken
    as UTC). Returns None when the value is missing or cannot be parsed.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if not isinstance(value, str) or not RFC3339_PATTERN.match(value):
        return None

    try:
        parsed = datetime.fromisoformat(value.upper().replace(" ", "T"))
    except ValueError:
        return None
    return parsed.astimezone(timezone.utc)


def validate_transaction_fields(payer: Any, points: Any, timestamp: Any) -> datetime:
    """
    Check the fields of a new transaction and return its parsed timestamp

    Raises:
        ValidationError: listing every missing or invalid attribute
    """
    invalid = []
    if not isinstance(payer, str) or not payer.strip():
        invalid.append("payer")
    if isinstance(points, bool) or not isinstance(points, int) or points == 0:
        invalid.append("points")
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        invalid.append("timestamp")

    if invalid:
        raise ValidationError(f"Invalid input - missing or invalid attributes: {invalid}")
    return parsed
