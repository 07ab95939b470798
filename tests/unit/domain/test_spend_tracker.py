"""Unit tests for SpendTracker"""

import pytest
from datetime import datetime, timezone

from src.domain.errors import NotSpendableError, OverspendError
from src.domain.spend_tracker import SpendTracker
from src.domain.transaction import Award, SpendRecord

NOW = datetime(2020, 10, 31, 13, 0, tzinfo=timezone.utc)


@pytest.fixture
def award():
    return Award(id=1, payer="UNILEVER", points=600, timestamp=NOW)


@pytest.fixture
def spend_record():
    return SpendRecord(id=2, payer="UNILEVER", points=-100, timestamp=NOW)


class TestSpendTrackerRemaining:

    def test_untouched_award_has_all_points_remaining(self, award):
        assert SpendTracker().remaining(award) == 600

    def test_partial_spends_accumulate(self, award):
        """
        Given: An award of 600 points
        When: 350, then 200 are recorded as spent
        Then: 50 points remain
        """
        tracker = SpendTracker()

        tracker.record_spend(award, 350)
        tracker.record_spend(award, 200)

        assert tracker.spent(award.id) == 550
        assert tracker.remaining(award) == 50

    def test_spending_exactly_all_points(self, award):
        tracker = SpendTracker()

        tracker.record_spend(award, 600)

        assert tracker.remaining(award) == 0


class TestSpendTrackerGuards:

    def test_overspend_is_rejected_without_change(self, award):
        tracker = SpendTracker()
        tracker.record_spend(award, 500)

        with pytest.raises(OverspendError):
            tracker.record_spend(award, 101)

        assert tracker.spent(award.id) == 500

    def test_spend_record_cannot_be_spent(self, spend_record):
        tracker = SpendTracker()

        with pytest.raises(NotSpendableError):
            tracker.record_spend(spend_record, 10)

        assert tracker.snapshot() == {}

    def test_spend_record_has_no_remaining(self, spend_record):
        with pytest.raises(NotSpendableError):
            SpendTracker().remaining(spend_record)


class TestSpendTrackerCopies:

    def test_copy_is_independent(self, award):
        tracker = SpendTracker()
        tracker.record_spend(award, 100)

        working = tracker.copy()
        working.record_spend(award, 200)

        assert tracker.spent(award.id) == 100
        assert working.spent(award.id) == 300

    def test_clear_forgets_spends(self, award):
        tracker = SpendTracker()
        tracker.record_spend(award, 100)

        tracker.clear()

        assert tracker.remaining(award) == 600
