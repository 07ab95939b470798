"""Unit tests for points Transaction domain entities"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.domain.errors import ValidationError
from src.domain.transaction import (
    AnyTransaction,
    Award,
    SpendRecord,
    TransactionKind,
    parse_timestamp,
    validate_transaction_fields,
)

NOW = datetime(2020, 10, 31, 15, 0, tzinfo=timezone.utc)


class TestTransactionVariants:
    """Test Award / SpendRecord creation"""

    def test_award_defaults_to_award_kind(self):
        award = Award(id=1, payer="DANNON", points=500, timestamp=NOW)

        assert award.kind == TransactionKind.AWARD
        assert award.is_adjustment is False

    def test_negative_award_is_adjustment(self):
        award = Award(id=2, payer="DANNON", points=-200, timestamp=NOW)

        assert award.is_adjustment is True

    def test_spend_record_kind(self):
        record = SpendRecord(id=3, payer="DANNON", points=-100, timestamp=NOW)

        assert record.kind == TransactionKind.SPEND

    def test_transactions_are_immutable(self):
        award = Award(id=1, payer="DANNON", points=500, timestamp=NOW)

        with pytest.raises(PydanticValidationError):
            award.points = 10

    def test_discriminated_union_picks_variant(self):
        adapter = TypeAdapter(AnyTransaction)

        parsed = adapter.validate_python(
            {"id": 9, "payer": "UNILEVER", "points": -50, "timestamp": NOW, "kind": "spend"}
        )

        assert isinstance(parsed, SpendRecord)


class TestParseTimestamp:
    """Test RFC3339 timestamp parsing"""

    def test_parses_utc_designator(self):
        assert parse_timestamp("2020-11-02T14:00:00Z") == datetime(2020, 11, 2, 14, tzinfo=timezone.utc)

    def test_normalizes_offset_to_utc(self):
        parsed = parse_timestamp("2020-11-02T16:00:00+02:00")

        assert parsed == datetime(2020, 11, 2, 14, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_keeps_fractional_seconds(self):
        parsed = parse_timestamp("2020-11-02T14:00:00.123456Z")

        assert parsed.microsecond == 123456

    def test_naive_datetime_taken_as_utc(self):
        parsed = parse_timestamp(datetime(2020, 11, 2, 14))

        assert parsed.tzinfo is not None
        assert parsed == datetime(2020, 11, 2, 14, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        ["Mar 14, 2019", "Mark", "2020-11-02", "2020-11-02T14:00:00", "", None, 42, [1, 2]],
    )
    def test_rejects_non_rfc3339(self, value):
        assert parse_timestamp(value) is None


class TestValidateTransactionFields:
    """Test new transaction field validation"""

    def test_returns_parsed_timestamp(self):
        assert validate_transaction_fields("DANNON", 5, "2020-10-31T15:00:00Z") == NOW

    @pytest.mark.parametrize(
        "payer, points, timestamp, missing",
        [
            ("", 5, NOW, "payer"),
            ("   ", 5, NOW, "payer"),
            ("DANNON", 0, NOW, "points"),
            ("DANNON", True, NOW, "points"),
            ("DANNON", 5, None, "timestamp"),
            ("DANNON", 5, "Mark", "timestamp"),
        ],
    )
    def test_rejects_invalid_field(self, payer, points, timestamp, missing):
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction_fields(payer, points, timestamp)

        assert missing in str(exc_info.value)

    def test_reports_every_invalid_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction_fields("", 0, None)

        message = str(exc_info.value)
        assert "payer" in message and "points" in message and "timestamp" in message
