"""Tests for receipt_points.store."""

from __future__ import annotations

import threading
import uuid
from itertools import count

import pytest

from receipt_points.models import Receipt
from receipt_points.store import InMemoryReceiptStore, generate_receipt_id


class TestGenerateReceiptId:
    """Tests for generate_receipt_id()."""

    def test_is_uuid(self) -> None:
        assert uuid.UUID(generate_receipt_id()).version == 4

    def test_unique(self) -> None:
        assert generate_receipt_id() != generate_receipt_id()


class TestInMemoryReceiptStore:
    """Tests for InMemoryReceiptStore."""

    def test_save_returns_id(self, target_receipt: Receipt) -> None:
        store = InMemoryReceiptStore()
        receipt_id = store.save(target_receipt)

        assert uuid.UUID(receipt_id)

    def test_get_returns_saved_receipt(self, target_receipt: Receipt) -> None:
        store = InMemoryReceiptStore()
        receipt_id = store.save(target_receipt)

        assert store.get(receipt_id) == target_receipt

    def test_get_unknown_returns_none(self) -> None:
        store = InMemoryReceiptStore()

        assert store.get("does-not-exist") is None

    def test_same_receipt_saved_twice_gets_two_ids(
        self, target_receipt: Receipt
    ) -> None:
        store = InMemoryReceiptStore()
        first = store.save(target_receipt)
        second = store.save(target_receipt)

        assert first != second
        assert len(store) == 2

    def test_custom_id_factory(
        self, target_receipt: Receipt, corner_market_receipt: Receipt
    ) -> None:
        ids = count(1)
        store = InMemoryReceiptStore(id_factory=lambda: f"receipt-{next(ids)}")

        assert store.save(target_receipt) == "receipt-1"
        assert store.save(corner_market_receipt) == "receipt-2"
        assert store.get("receipt-2") == corner_market_receipt

    def test_id_collision_raises(self, target_receipt: Receipt) -> None:
        store = InMemoryReceiptStore(id_factory=lambda: "fixed")
        store.save(target_receipt)

        with pytest.raises(ValueError, match="fixed"):
            store.save(target_receipt)
        assert len(store) == 1

    def test_len_empty(self) -> None:
        assert len(InMemoryReceiptStore()) == 0

    def test_concurrent_saves(self, target_receipt: Receipt) -> None:
        store = InMemoryReceiptStore()
        ids: list[str] = []

        def worker() -> None:
            for _ in range(50):
                ids.append(store.save(target_receipt))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 400
        assert len(set(ids)) == 400
