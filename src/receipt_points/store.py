"""Receipt store abstraction and in-memory implementation."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from receipt_points.models import Receipt

logger = logging.getLogger(__name__)


class ReceiptStore(Protocol):
    """Protocol for receipt storage backends."""

    def save(self, receipt: Receipt) -> str: ...

    def get(self, receipt_id: str) -> Receipt | None: ...

    def __len__(self) -> int: ...


def generate_receipt_id() -> str:
    """Return a new random receipt identifier."""
    return str(uuid.uuid4())


class InMemoryReceiptStore:
    """Thread-safe, process-local implementation of ReceiptStore.

    Receipts live only as long as the process does.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_receipt_id) -> None:
        self._id_factory = id_factory
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def save(self, receipt: Receipt) -> str:
        """Store a receipt and return its new identifier."""
        receipt_id = self._id_factory()
        with self._lock:
            if receipt_id in self._receipts:
                msg = f"Receipt id {receipt_id} is already in use"
                raise ValueError(msg)
            self._receipts[receipt_id] = receipt
        logger.debug("Stored receipt %s", receipt_id)
        return receipt_id

    def get(self, receipt_id: str) -> Receipt | None:
        """Return the receipt stored under receipt_id, or None."""
        with self._lock:
            return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
