from fastapi import Depends, Request
from src.app.repositories.points_ledger_repository import PointsLedgerRepository
from src.app.services.spend_engine import SpendEngine


def get_ledger(request: Request) -> PointsLedgerRepository:
    return request.app.state.ledger


def get_spend_engine(ledger: PointsLedgerRepository = Depends(get_ledger)) -> SpendEngine:
    return SpendEngine(ledger)
