"""Payer Balance Value Object"""

from typing import Dict, List
from pydantic import BaseModel, Field


class PayerBalance(BaseModel):
    """Points associated with a single payer"""

    payer: str = Field(
        ...,
        description="Payer name"
    )

    points: int = Field(
        ...,
        description="Point amount (balance, or negative amount consumed by a spend)"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "payer": "DANNON",
                "points": 1000
            }
        }


def to_payer_balances(totals: Dict[str, int], skip_zero: bool = False) -> List[PayerBalance]:
    """Convert a payer -> points mapping into balances, keeping mapping order"""
    return [
        PayerBalance(payer=payer, points=points)
        for payer, points in totals.items()
        if not (skip_zero and points == 0)
    ]
