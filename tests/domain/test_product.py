"""Unit tests for the Product aggregate."""

from datetime import datetime, timezone

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


def _product(**overrides) -> Product:
    fields = dict(
        product_id="1",
        name="Whole Milk",
        barcode="7891234567890",
        category="Dairy",
        price=Money.of("3.99"),
        quantity=18,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreate:

    def test_create_sets_timestamps(self):
        p = _product()
        assert p.created_at == p.updated_at
        assert p.created_at.tzinfo is not None
        assert p.sales_count == 0

    def test_create_strips_whitespace(self):
        p = _product(name="  Bread ", barcode=" 123 ")
        assert p.name == "Bread"
        assert p.barcode == "123"

    @pytest.mark.parametrize("field", ["name", "barcode", "category"])
    def test_blank_required_field_rejected(self, field):
        with pytest.raises(ValidationError, match="is required"):
            _product(**{field: "   "})

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _product(price=Money.of("0"))

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(quantity=-1)


class TestProductStock:

    def test_set_quantity(self):
        p = _product(quantity=3)
        p.set_quantity(40)
        assert p.quantity == 40

    def test_set_quantity_to_zero_allowed(self):
        p = _product(quantity=3)
        p.set_quantity(0)
        assert p.quantity == 0

    def test_set_negative_quantity_rejected_and_unchanged(self):
        p = _product(quantity=3)
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.set_quantity(-2)
        assert p.quantity == 3

    def test_adjust_quantity_up(self):
        p = _product(quantity=3)
        p.adjust_quantity(7)
        assert p.quantity == 10

    def test_adjust_quantity_clamps_at_zero(self):
        p = _product(quantity=3)
        p.adjust_quantity(-10)
        assert p.quantity == 0

    def test_record_sale_moves_counters(self):
        p = _product(quantity=10)
        sold_at = datetime(2024, 3, 1, tzinfo=timezone.utc)
        p.record_sale(4, at=sold_at)
        assert p.quantity == 6
        assert p.sales_count == 4
        assert p.updated_at == sold_at

    def test_record_sale_floors_stock_at_zero(self):
        p = _product(quantity=2)
        p.record_sale(5)
        assert p.quantity == 0
        assert p.sales_count == 5

    def test_low_stock_is_inclusive(self):
        assert _product(quantity=5).is_low_stock(5)
        assert not _product(quantity=6).is_low_stock(5)


class TestProductDetails:

    def test_update_price(self):
        p = _product()
        p.update_price(Money.of("4.49"))
        assert p.price == Money.of("4.49")

    def test_update_price_to_zero_rejected(self):
        p = _product()
        with pytest.raises(ValidationError, match="greater than zero"):
            p.update_price(Money.of("0"))
        assert p.price == Money.of("3.99")

    def test_stock_value(self):
        assert _product(price=Money.of("2.50"), quantity=4).stock_value == Money.of("10.00")
