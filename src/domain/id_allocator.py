"""Transaction ID Allocator"""

import threading

# Ids are stored as signed 64-bit integers; allocation stops at this ceiling.
MAX_TRANSACTION_ID = 2 ** 63 - 1


class IdAllocator:
    """
    Issues unique, strictly increasing transaction ids

    Safe under concurrent use: one lock guards the counter increment.
    Ids are never reused for the lifetime of the allocator, including
    across ledger resets.
    """

    def __init__(self, start: int = 1, ceiling: int = MAX_TRANSACTION_ID):
        self._next_id = start
        self._ceiling = ceiling
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            if self._next_id > self._ceiling:
                raise OverflowError(f"Transaction id ceiling {self._ceiling} reached")
            allocated = self._next_id
            self._next_id += 1
            return allocated
