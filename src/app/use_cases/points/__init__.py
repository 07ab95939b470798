"""Points domain use cases"""
from .add_transaction import AddTransaction
from .spend_points import SpendPoints
from .get_payer_points import GetPayerPoints
from .list_transactions import ListTransactions
from .reconcile_ledger import ReconcileLedger
from .dtos import (
    AddTransactionCommandDTO,
    SpendCommandDTO,
    TransactionDTO,
    ListTransactionsResponseDTO,
    PayerDiscrepancyDTO,
    ReconciliationResultDTO,
)

__all__ = [
    "AddTransaction",
    "SpendPoints",
    "GetPayerPoints",
    "ListTransactions",
    "ReconcileLedger",
    "AddTransactionCommandDTO",
    "SpendCommandDTO",
    "TransactionDTO",
    "ListTransactionsResponseDTO",
    "PayerDiscrepancyDTO",
    "ReconciliationResultDTO",
]
