import pytest

from src.adapter.repositories.points_ledger_repository import InMemoryPointsLedgerRepository
from src.app.services.spend_engine import SpendEngine
from tests.fixtures.reference_data import REFERENCE_AWARDS


@pytest.fixture
def ledger_repo():
    """Fresh in-memory points ledger"""
    return InMemoryPointsLedgerRepository()


@pytest.fixture
def spend_engine(ledger_repo):
    """SpendEngine bound to the test ledger"""
    return SpendEngine(ledger_repo)


@pytest.fixture
def reference_ledger(ledger_repo):
    """Ledger loaded with the reference award sequence"""
    for payer, points, timestamp in REFERENCE_AWARDS:
        ledger_repo.add(payer, points, timestamp)
    return ledger_repo
