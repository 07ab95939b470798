"""Points domain errors

Raised by the ledger, spend tracker and spend engine. Use cases translate
them into Result errors; nothing here is retried or partially applied.
"""


class PointsError(Exception):
    """Base class for all points ledger errors"""

    code = "POINTS_ERROR"


class ValidationError(PointsError):
    """A required field is missing, empty, zero or unparseable"""

    code = "VALIDATION_ERROR"


class InsufficientPointsError(PointsError):
    """Requested points exceed what is available"""

    code = "INSUFFICIENT_POINTS"


class NotSpendableError(PointsError):
    """Attempt to spend from a spend-record transaction"""

    code = "NOT_SPENDABLE"


class OverspendError(PointsError):
    """Attempt to record more spent points than a transaction holds"""

    code = "OVERSPEND"


class InternalInconsistencyError(PointsError):
    """Spend loop ran out of candidates after passing the affordability check"""

    code = "INTERNAL_INCONSISTENCY"
