from .spend_engine import SpendEngine

__all__ = [
    "SpendEngine",
]
