from .errors import (
    PointsError,
    ValidationError,
    InsufficientPointsError,
    NotSpendableError,
    OverspendError,
    InternalInconsistencyError,
)
from .transaction import (
    Transaction,
    TransactionKind,
    Award,
    SpendRecord,
    AnyTransaction,
    parse_timestamp,
)
from .payer_balance import PayerBalance, to_payer_balances
from .spend_tracker import SpendTracker
from .id_allocator import IdAllocator

__all__ = [
    "PointsError",
    "ValidationError",
    "InsufficientPointsError",
    "NotSpendableError",
    "OverspendError",
    "InternalInconsistencyError",
    "Transaction",
    "TransactionKind",
    "Award",
    "SpendRecord",
    "AnyTransaction",
    "parse_timestamp",
    "PayerBalance",
    "to_payer_balances",
    "SpendTracker",
    "IdAllocator",
]
