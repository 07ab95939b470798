"""Request schemas for Points API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from src.domain.transaction import parse_timestamp


class AwardRequestSchema(BaseModel):
    """
    Request schema for awarding points

    Used for POST /transaction endpoint.
    """

    payer: str = Field(
        ...,
        min_length=1,
        description="Payer name (required, non-empty)"
    )

    points: int = Field(
        ...,
        strict=True,
        description="Non-zero point amount; negative values adjust the payer's balance"
    )

    timestamp: datetime = Field(
        ...,
        description="RFC3339 timestamp of the award"
    )

    @field_validator('payer')
    @classmethod
    def validate_payer(cls, v):
        if not v.strip():
            raise ValueError("Payer must not be blank")
        return v

    @field_validator('points')
    @classmethod
    def validate_points(cls, v):
        if v == 0:
            raise ValueError("Points must not be zero")
        return v

    @field_validator('timestamp', mode='before')
    @classmethod
    def validate_timestamp(cls, v):
        """Only RFC3339 strings are accepted on the wire"""
        if not isinstance(v, str):
            raise ValueError("Timestamp must be an RFC3339 string")
        parsed = parse_timestamp(v)
        if parsed is None:
            raise ValueError(f"Invalid timestamp format: got {v}; expected RFC3339")
        return parsed

    class Config:
        json_schema_extra = {
            "example": {
                "payer": "DANNON",
                "points": 1000,
                "timestamp": "2020-11-02T14:00:00Z"
            }
        }


class SpendRequestSchema(BaseModel):
    """
    Request schema for spending points

    Used for POST /spend endpoint.
    """

    points: int = Field(
        ...,
        strict=True,
        gt=0,
        description="Points to spend (must be > 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "points": 5000
            }
        }
