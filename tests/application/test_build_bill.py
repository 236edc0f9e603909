"""Integration tests for ringing up the in-progress bill."""

import pytest

from pos.application.build_bill import BillDraftHandler
from pos.domain.exceptions import (
    EntityNotFoundError,
    IndexOutOfRangeError,
    InsufficientStockError,
    ValidationError,
)
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from tests.fakes import FakeBillDraftRepository, FakeProductRepository


def _products() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="Milk", barcode="123", category="Dairy",
                price=Money.of("2.00"), quantity=3),
        Product(id="2", name="Bread", barcode="456", category="Bakery",
                price=Money.of("2.49"), quantity=12),
    ])


def _setup(user_id="cashier-1"):
    drafts = FakeBillDraftRepository()
    handler = BillDraftHandler(draft_repo=drafts, product_repo=_products(), user_id=user_id)
    return handler, drafts


def _two_operators():
    products = _products()
    drafts = FakeBillDraftRepository()
    alice = BillDraftHandler(draft_repo=drafts, product_repo=products, user_id="alice")
    bob = BillDraftHandler(draft_repo=drafts, product_repo=products, user_id="bob")
    return alice, bob


class TestAddToBill:

    def test_scan_adds_line(self):
        handler, _ = _setup()
        dto = handler.add_by_barcode("123", 2)
        assert [(i.product_name, i.quantity) for i in dto.items] == [("Milk", 2)]
        assert dto.total == "$4.00"

    def test_lines_are_numbered_from_one(self):
        handler, _ = _setup()
        handler.add_by_barcode("123")
        dto = handler.add_by_id("2")
        assert [i.position for i in dto.items] == [1, 2]

    def test_second_scan_over_stock_keeps_draft(self):
        handler, drafts = _setup()
        handler.add_by_barcode("123", 2)

        with pytest.raises(InsufficientStockError):
            handler.add_by_barcode("123", 2)

        dto = handler.show()
        assert dto.items[0].quantity == 2
        assert dto.total == "$4.00"

    def test_unknown_barcode_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="barcode '999'"):
            handler.add_by_barcode("999")

    def test_barcode_match_is_exact(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.add_by_barcode("12")

    def test_unknown_id_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.add_by_id("nope")


class TestEditBill:

    def test_set_quantity(self):
        handler, _ = _setup()
        handler.add_by_barcode("456")
        dto = handler.set_quantity(0, 4)
        assert dto.items[0].line_total == "$9.96"

    def test_remove(self):
        handler, _ = _setup()
        handler.add_by_barcode("123")
        handler.add_by_barcode("456")
        dto = handler.remove(0)
        assert [i.product_name for i in dto.items] == ["Bread"]

    def test_remove_bad_line(self):
        handler, _ = _setup()
        with pytest.raises(IndexOutOfRangeError):
            handler.remove(0)

    def test_clear(self):
        handler, _ = _setup()
        handler.add_by_barcode("123")
        handler.clear()
        handler.clear()
        assert handler.show().items == []
        assert handler.show().total == "$0.00"


class TestDraftPerUser:

    def test_operators_have_separate_drafts(self):
        alice, bob = _two_operators()

        alice.add_by_barcode("123", 2)

        assert bob.show().items == []
        bob.add_by_barcode("456")
        assert [i.product_name for i in alice.show().items] == ["Milk"]
        assert [i.product_name for i in bob.show().items] == ["Bread"]

    def test_clearing_one_draft_keeps_the_other(self):
        alice, bob = _two_operators()
        alice.add_by_barcode("123")
        bob.add_by_barcode("456")

        bob.clear()

        assert alice.show().total == "$2.00"
        assert bob.show().items == []

    def test_user_required(self):
        with pytest.raises(ValidationError, match="current user"):
            _setup(user_id=" ")
